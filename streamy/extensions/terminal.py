from __future__ import annotations
import logging
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..stream import Stream

logger = logging.getLogger(__name__)

_NO_ELEMENT = object()


class _TerminalOperations(Generic[T]):
    """operators that drive iteration to the end (or to the first hit) and return a plain value"""

    def to_list(self: 'Stream[T]', size_hint: Optional[int] = None) -> List[T]:
        """
        drain one iteration view into a new list.
        size_hint is advisory only: python lists grow on their own, so it never
        truncates or pads the result.
        """
        if size_hint is not None and size_hint < 0:
            raise ValueError(f"size_hint must be non-negative, got {size_hint}")
        return list(self)

    def collect(self: 'Stream[T]', collector: Callable[['Stream[T]'], U]) -> U:
        """hand the stream to collector and return whatever it returns, usually a caller-owned container"""
        return collector(self)

    def fold(self: 'Stream[T]', seed: U, combine: Accumulator[U, T]) -> U:
        """left fold starting from seed. an empty stream returns seed."""
        result = seed
        for item in self:
            result = combine(result, item)
        return result

    def reduce(self: 'Stream[T]', combine: Callable[[T, T], T]) -> T:
        """left fold seeded with the first element"""
        view = iter(self)
        result = next(view, _NO_ELEMENT)
        if result is _NO_ELEMENT:
            logger.debug("reduce called on an empty %s", type(self).__name__)
            raise EmptySequenceError("cannot reduce a sequence that contains no elements")
        for item in view:
            result = combine(result, item)
        return result

    def accumulate(self: 'Stream[T]', seed: U, combine: Accumulator[U, T]) -> U:
        """running left fold from seed, returning the final total. same result as fold()."""
        total = seed
        for item in self:
            total = combine(total, item)
        return total

    def first(self: 'Stream[T]', default: Optional[T] = None) -> Optional[T]:
        """first element or default. pulls at most one element."""
        view = self.iterate()
        return view.next() if view.has_next() else default

    def last(self: 'Stream[T]', default: Optional[T] = None) -> Optional[T]:
        """last element or default. always drains the stream."""
        result = default
        for item in self:
            result = item
        return result

    def count(self: 'Stream[T]', predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return sum(1 for _ in self)
        return sum(1 for x in self if predicate(x))

    def any(self: 'Stream[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition, stopping at the first hit"""
        if predicate is None: return self.iterate().has_next()
        return any(predicate(x) for x in self)

    def all(self: 'Stream[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition, stopping at the first miss"""
        return all(predicate(x) for x in self)


class TerminalAccessor(Generic[T]):
    """container conversions, reached through stream.to"""

    def __init__(self, stream_instance: 'Stream[T]'):
        self._stream = stream_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._stream.to_list()

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._stream)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. later keys overwrite earlier ones."""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._stream}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._stream.to_list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._stream.to_list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._stream.to_list())
