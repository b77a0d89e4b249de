from __future__ import annotations

from .types import *

# --- chainable operations ---
from .extensions.core import _CoreOperations

# --- terminal operations ---
from .extensions.terminal import _TerminalOperations, TerminalAccessor

# --- abstract base class ---

class IStream(ABC, Generic[T]):
    @abstractmethod
    def iterate(self) -> ReadOnlyIterator[T]:
        """create a fresh, independent iteration view"""
        pass

# --- main stream class ---

class Stream(
    IStream[T],
    _CoreOperations[T],
    _TerminalOperations[T]
):
    """
    a lazy, composable sequence. building a stream never touches its source;
    only iterate() does, and every call to iterate() starts over.
    concrete streams subclass this directly and implement iterate().
    """

    def __iter__(self) -> ReadOnlyIterator[T]:
        return self.iterate()

    @property
    def to(self) -> TerminalAccessor[T]:
        """container conversions: list, set, dict, numpy array, pandas"""
        return TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

# --- source adapter ---

class IterableStream(Stream[T]):
    """
    wraps any iterable. each iteration view calls iter() on the source, so
    lists and tuples replay while generators and iterators are one-shot.
    """

    def __init__(self, source: Iterable[T]):
        self._source = source

    def iterate(self) -> ReadOnlyIterator[T]:
        return IteratorView(iter(self._source))

    def __repr__(self) -> str:
        return f"IterableStream({type(self._source).__name__})"


class GeneratorStream(Stream[T]):
    """
    wraps a zero-argument function returning a fresh iterator.
    the function is called once per iteration view, never at construction.
    """

    def __init__(self, iterator_func: Callable[[], Iterator[T]]):
        self._iterator_func = iterator_func

    def iterate(self) -> ReadOnlyIterator[T]:
        return IteratorView(iter(self._iterator_func()))
