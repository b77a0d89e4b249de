from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..stream import Stream


def _require_callable(func: Any, name: str) -> None:
    if not callable(func):
        raise TypeError(f"{name} must be callable, got {type(func).__name__}")


def _is_type_target(target: Any) -> bool:
    """a type, or a (possibly nested) tuple of types, as isinstance accepts"""
    if isinstance(target, tuple):
        return all(_is_type_target(member) for member in target)
    return isinstance(target, type)


class _CoreOperations(Generic[T]):
    """
    chainable operators. each one is a compose() call that wraps self in a
    combinator node, so built-ins and user-defined lifts go through one door.
    """

    def compose(self: 'Stream[T]', lift: Callable[['Stream[T]'], 'Stream[R]']) -> 'Stream[R]':
        """
        apply lift to this stream once, right now, and return its result unchanged.
        this is the extension point for custom lazy transforms.
        """
        _require_callable(lift, "lift")
        return lift(self)

    # --- transformation ---

    def map(self: 'Stream[T]', transform: Selector[T, U]) -> 'Stream[U]':
        """project each element to a new form, at pull time"""
        from .transform import Map
        _require_callable(transform, "transform")
        return self.compose(lambda upstream: Map(upstream, transform))

    def flat_map(self: 'Stream[T]', transform: Callable[[T], Union['Stream[U]', Iterable[U], None]]) -> 'Stream[U]':
        """project each element to a sequence and concatenate them. none counts as empty."""
        from .transform import FlatMap
        _require_callable(transform, "transform")
        return self.compose(lambda upstream: FlatMap(upstream, transform))

    def cast(self: 'Stream[T]', target_type: Type[U]) -> 'Stream[U]':
        """check each pulled element against target_type, failing lazily"""
        from .transform import Cast
        if not _is_type_target(target_type):
            raise TypeError(f"cast target must be a type, got {target_type!r}")
        return self.compose(lambda upstream: Cast(upstream, target_type))

    # --- filtering ---

    def filter(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """filter elements based on a predicate"""
        from .filters import Filter
        _require_callable(predicate, "predicate")
        return self.compose(lambda upstream: Filter(upstream, predicate))

    def distinct(self: 'Stream[T]') -> 'Stream[T]':
        """drop repeats, keeping the first occurrence of each element"""
        from .filters import DistinctFilter
        return self.compose(DistinctFilter)

    def without(self: 'Stream[T]', value: T) -> 'Stream[T]':
        """drop every element equal to value"""
        from .filters import Without
        return self.compose(lambda upstream: Without(upstream, value))

    def separate(self: 'Stream[T]', excluded: Iterable[T]) -> 'Stream[T]':
        """drop every element found in excluded, keeping order and repeats of the rest"""
        from .filters import Separate
        if not isinstance(excluded, Iterable):
            raise TypeError(f"separate requires an iterable, got {type(excluded).__name__}")
        return self.compose(lambda upstream: Separate(upstream, excluded))

    # --- structural ---

    def with_(self: 'Stream[T]', value: T) -> 'Stream[T]':
        """append one value after the last element"""
        from .structural import With
        return self.compose(lambda upstream: With(upstream, value))

    def merge(self: 'Stream[T]', other: Iterable[T]) -> 'Stream[T]':
        """concatenate with another iterable, preserving all elements and order"""
        from .structural import Merge
        if not isinstance(other, Iterable):
            raise TypeError(f"merge requires an iterable, got {type(other).__name__}")
        return self.compose(lambda upstream: Merge(upstream, other))

    def take(self: 'Stream[T]', count: int) -> 'Stream[T]':
        """take the first 'count' elements"""
        from .structural import Take
        return self.compose(lambda upstream: Take(upstream, count))

    def skip(self: 'Stream[T]', count: int) -> 'Stream[T]':
        """skip the first 'count' elements"""
        from .structural import Skip
        return self.compose(lambda upstream: Skip(upstream, count))

    # --- materializing ---

    def sorted(self: 'Stream[T]', comparator: Optional[Comparer[T]] = None) -> 'Stream[T]':
        """
        stable sort using a cmp-style comparator (negative, zero, positive).
        without a comparator the elements' natural ordering is used.
        buffers the whole upstream before yielding anything.
        """
        from .materializing import Sorted
        if comparator is not None:
            _require_callable(comparator, "comparator")
        return self.compose(lambda upstream: Sorted(upstream, comparator))

    def reverse(self: 'Stream[T]') -> 'Stream[T]':
        """inverts the order of the elements in a sequence"""
        from .materializing import Reverse
        return self.compose(Reverse)
