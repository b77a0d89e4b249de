from __future__ import annotations
import logging
from functools import cmp_to_key
from ..types import *
from ..stream import Stream

logger = logging.getLogger(__name__)


class Sorted(Stream[T]):
    """
    stable sort of the whole upstream. nothing is yielded until upstream is drained.
    comparator returns negative, zero or positive; none means natural ordering.
    how the comparator treats none elements is up to the caller.
    """

    def __init__(self, upstream: Stream[T], comparator: Optional[Comparer[T]] = None):
        self._upstream = upstream
        self._comparator = comparator

    def _in_order(self):
        buffer = list(self._upstream)
        logger.debug("sorted: buffered %d elements", len(buffer))
        # list.sort is stable, equal elements keep upstream order
        if self._comparator is None:
            buffer.sort()
        else:
            buffer.sort(key=cmp_to_key(self._comparator))
        yield from buffer

    def iterate(self) -> ReadOnlyIterator[T]:
        return IteratorView(self._in_order())


class Reverse(Stream[T]):
    """yields the fully buffered upstream back to front"""

    def __init__(self, upstream: Stream[T]):
        self._upstream = upstream

    def _backwards(self):
        buffer = list(self._upstream)
        logger.debug("reverse: buffered %d elements", len(buffer))
        yield from reversed(buffer)

    def iterate(self) -> ReadOnlyIterator[T]:
        return IteratorView(self._backwards())
