from __future__ import annotations
import logging
from ..types import *
from ..stream import Stream

logger = logging.getLogger(__name__)


class _Membership(Generic[T]):
    """
    a set that also accepts unhashable elements.
    hashable items go in a real set; the rest fall back to an equality scan.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._hashed: Set[T] = set()
        self._unhashable: List[T] = []
        for item in items:
            self.add(item)

    def __contains__(self, item: T) -> bool:
        try:
            if item in self._hashed:
                return True
        except TypeError:
            # unhashable item: hashed members can only be compared by equality
            if any(item == other for other in self._hashed):
                return True
        return any(item == other for other in self._unhashable)

    def add(self, item: T) -> None:
        try:
            self._hashed.add(item)
        except TypeError:
            self._unhashable.append(item)

    def __len__(self) -> int:
        return len(self._hashed) + len(self._unhashable)


class Filter(Stream[T]):
    """admits only the elements for which predicate is true"""

    def __init__(self, upstream: Stream[T], predicate: Predicate[T]):
        self._upstream = upstream
        self._predicate = predicate

    def iterate(self) -> ReadOnlyIterator[T]:
        return IteratorView(item for item in self._upstream if self._predicate(item))


class DistinctFilter(Stream[T]):
    """yields each element the first time an equal one is seen. the seen-set lives per view."""

    def __init__(self, upstream: Stream[T]):
        self._upstream = upstream

    def _first_occurrences(self):
        seen = _Membership()
        for item in self._upstream:
            if item not in seen:
                seen.add(item)
                yield item

    def iterate(self) -> ReadOnlyIterator[T]:
        return IteratorView(self._first_occurrences())


class Without(Stream[T]):
    """drops every element equal to value"""

    def __init__(self, upstream: Stream[T], value: T):
        self._upstream = upstream
        self._value = value

    def _matches(self, item: T) -> bool:
        if self._value is None:
            return item is None
        return item is not None and item == self._value

    def iterate(self) -> ReadOnlyIterator[T]:
        return IteratorView(item for item in self._upstream if not self._matches(item))


class Separate(Stream[T]):
    """
    set difference that keeps upstream order and multiplicity.
    excluded is materialized once per view, on the first pull.
    """

    def __init__(self, upstream: Stream[T], excluded: Iterable[T]):
        self._upstream = upstream
        self._excluded = excluded

    def _remaining(self):
        excluded = _Membership(self._excluded)
        logger.debug("separate: materialized %d excluded elements", len(excluded))
        for item in self._upstream:
            if item not in excluded:
                yield item

    def iterate(self) -> ReadOnlyIterator[T]:
        return IteratorView(self._remaining())
