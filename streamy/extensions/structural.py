from __future__ import annotations
from ..types import *
from ..stream import Stream

# sentinel for "upstream ran out while skipping"; none is a valid element
_END = object()


class Take(Stream[T]):
    """yields at most count elements and never pulls upstream past them"""

    def __init__(self, upstream: Stream[T], count: int):
        self._upstream = upstream
        self._count = count

    def _bounded(self):
        if self._count <= 0:
            return
        taken = 0
        for item in self._upstream:
            yield item
            taken += 1
            if taken >= self._count:
                return

    def iterate(self) -> ReadOnlyIterator[T]:
        return IteratorView(self._bounded())


class Skip(Stream[T]):
    """discards the first count elements, then passes the rest through"""

    def __init__(self, upstream: Stream[T], count: int):
        self._upstream = upstream
        self._count = count

    def _after_skip(self):
        view = iter(self._upstream)
        for _ in range(self._count):
            if next(view, _END) is _END:
                return
        yield from view

    def iterate(self) -> ReadOnlyIterator[T]:
        return IteratorView(self._after_skip())


class Merge(Stream[T]):
    """all of upstream, then all of other. other is only touched once upstream is done."""

    def __init__(self, upstream: Stream[T], other: Iterable[T]):
        self._upstream = upstream
        self._other = other

    def _concatenated(self):
        yield from self._upstream
        yield from self._other

    def iterate(self) -> ReadOnlyIterator[T]:
        return IteratorView(self._concatenated())


class With(Stream[T]):
    """appends a single value after upstream is exhausted"""

    def __init__(self, upstream: Stream[T], value: T):
        self._upstream = upstream
        self._value = value

    def _appended(self):
        yield from self._upstream
        yield self._value

    def iterate(self) -> ReadOnlyIterator[T]:
        return IteratorView(self._appended())
