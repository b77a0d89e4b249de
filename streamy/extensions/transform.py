from __future__ import annotations
from enum import Enum
from ..types import *
from ..stream import Stream


class Map(Stream[U]):
    """applies a transform to each element exactly when it is pulled"""

    def __init__(self, upstream: Stream[T], transform: Selector[T, U]):
        self._upstream = upstream
        self._transform = transform

    def iterate(self) -> ReadOnlyIterator[U]:
        return IteratorView(self._transform(item) for item in self._upstream)


# --- flat map ---

class _FlatMapState(Enum):
    AWAITING_OUTER = 'awaiting_outer'
    IN_INNER = 'in_inner'
    DONE = 'done'


def _view_of(inner: Union[Stream[U], Iterable[U], None]) -> Optional[ReadOnlyIterator[U]]:
    """turn whatever the transform returned into an iteration view. none means empty."""
    if inner is None:
        return None
    if isinstance(inner, Stream):
        return inner.iterate()
    return IteratorView(iter(inner))


class _FlatMapIterator(ReadOnlyIterator[U]):
    def __init__(self, outer: ReadOnlyIterator[T], transform: Callable[[T], Any]):
        self._outer = outer
        self._transform = transform
        self._inner: Optional[ReadOnlyIterator[U]] = None
        self._state = _FlatMapState.AWAITING_OUTER

    def has_next(self) -> bool:
        while True:
            if self._state is _FlatMapState.DONE:
                return False

            if self._state is _FlatMapState.IN_INNER:
                if self._inner.has_next():
                    return True
                # inner drained, only now is the next outer element requested
                self._inner = None
                self._state = _FlatMapState.AWAITING_OUTER
                continue

            if not self._outer.has_next():
                self._state = _FlatMapState.DONE
                return False

            inner = _view_of(self._transform(self._outer.next()))
            if inner is not None:
                self._inner = inner
                self._state = _FlatMapState.IN_INNER

    def next(self) -> U:
        if not self.has_next():
            raise EndOfSequenceError("flat_map view is exhausted")
        return self._inner.next()


class FlatMap(Stream[U]):
    """
    concatenates the sequences produced by transform, in upstream order.
    transform may return a stream, any iterable, or none (treated as empty).
    at most one outer element is pulled ahead of the consumer.
    """

    def __init__(self, upstream: Stream[T], transform: Callable[[T], Union[Stream[U], Iterable[U], None]]):
        self._upstream = upstream
        self._transform = transform

    def iterate(self) -> ReadOnlyIterator[U]:
        return _FlatMapIterator(self._upstream.iterate(), self._transform)


class Cast(Stream[U]):
    """
    re-labels elements as target_type. the isinstance check happens per pull,
    so a bad element only fails when something actually consumes it.
    """

    def __init__(self, upstream: Stream[T], target_type: Type[U]):
        self._upstream = upstream
        self._target_type = target_type

    def _checked(self):
        target_type = self._target_type
        for item in self._upstream:
            # none is an absent payload and fits any target
            if item is not None and not isinstance(item, target_type):
                raise TypeMismatchError(item, target_type)
            yield item

    def iterate(self) -> ReadOnlyIterator[U]:
        return IteratorView(self._checked())
