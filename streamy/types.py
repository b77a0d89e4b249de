from abc import ABC, abstractmethod
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]


# --- error kinds ---

class StreamError(Exception):
    """base class for every error raised by streamy itself."""
    pass


class TypeMismatchError(StreamError, TypeError):
    """raised by cast() when a pulled element is not an instance of the target type."""

    def __init__(self, item: Any, target_type: type):
        self.item = item
        self.target_type = target_type
        super().__init__(
            f"cannot cast {item!r} of type {type(item).__name__} to {getattr(target_type, '__name__', target_type)}")


class EmptySequenceError(StreamError, ValueError):
    """raised when an operation needs at least one element and got none."""
    pass


class EndOfSequenceError(StreamError, LookupError):
    """raised by next() on an exhausted iteration view."""
    pass


# --- iteration primitive ---

class ReadOnlyIterator(ABC, Generic[T]):
    """
    a single-use cursor exposing only has_next() and next().
    there is no remove(); views are read-only.
    also speaks the python iterator protocol so it works in for loops.
    """

    @abstractmethod
    def has_next(self) -> bool:
        pass

    @abstractmethod
    def next(self) -> T:
        """produce the next element, raising EndOfSequenceError when exhausted"""
        pass

    def __iter__(self) -> 'ReadOnlyIterator[T]':
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()


_MISSING = object()


class IteratorView(ReadOnlyIterator[T]):
    """
    adapts a python iterator (usually a generator) to ReadOnlyIterator.
    has_next() peeks one element ahead; __next__ pulls directly so plain
    for-loops never read ahead of the consumer.
    """

    def __init__(self, iterator: Iterator[T]):
        self._iterator: Optional[Iterator[T]] = iterator
        self._peeked: Any = _MISSING

    def has_next(self) -> bool:
        if self._peeked is not _MISSING:
            return True
        if self._iterator is None:
            return False
        try:
            self._peeked = next(self._iterator)
        except StopIteration:
            self._iterator = None
            return False
        return True

    def next(self) -> T:
        if not self.has_next():
            raise EndOfSequenceError("iteration view is exhausted")
        item, self._peeked = self._peeked, _MISSING
        return item

    def __next__(self) -> T:
        if self._peeked is not _MISSING:
            item, self._peeked = self._peeked, _MISSING
            return item
        if self._iterator is None:
            raise StopIteration
        try:
            return next(self._iterator)
        except StopIteration:
            # once exhausted, stay exhausted even if the source would resume
            self._iterator = None
            raise
