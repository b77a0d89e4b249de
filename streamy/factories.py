import typing
from itertools import count as _count, repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .stream import Stream

def stream(source: Iterable[T]) -> 'Stream[T]':
    """create a stream over a list, tuple or any other iterable"""
    from .stream import Stream, IterableStream
    if isinstance(source, Stream):
        return source
    if not isinstance(source, Iterable):
        raise TypeError(f"cannot stream a non-iterable {type(source).__name__}")
    return IterableStream(source)

def of(*elements: T) -> 'Stream[T]':
    """create a stream over the given arguments, in order"""
    from .stream import IterableStream
    return IterableStream(elements)

def from_range(start: int, count: int) -> 'Stream[int]':
    """create stream from range"""
    from .stream import IterableStream
    return IterableStream(range(start, start + max(count, 0)))

def repeat(item: T, count: Optional[int] = None) -> 'Stream[T]':
    """repeat an item count times, or forever when count is None"""
    from .stream import GeneratorStream
    if count is None:
        return GeneratorStream(lambda: _repeat(item))
    return GeneratorStream(lambda: _repeat(item, max(count, 0)))

def empty() -> 'Stream[Any]':
    """create empty stream"""
    from .stream import IterableStream
    return IterableStream(())

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Stream[T]':
    """
    call generator_func once per pulled element.
    infinite when count is None, so bound it with take() before a terminal.
    """
    from .stream import GeneratorStream
    if not callable(generator_func):
        raise TypeError("generate requires a callable")
    indices = (lambda: _count()) if count is None else (lambda: range(max(count, 0)))
    return GeneratorStream(lambda: (generator_func() for _ in indices()))

# --- aliases ---
S = stream
