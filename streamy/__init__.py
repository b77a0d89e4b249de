r"""
'      _____ _____ ____  _____    _    __  ____   __
'     / ___/|_   _|  _ \| ____|  / \  |  \/  \ \ / /
'     \___ \  | | | |_) |  _|   / _ \ | |\/| |\ V /
'      ___) | | | |  _ <| |___ / ___ \| |  | | | |
'     |____/  |_| |_| \_\_____/_/   \_\_|  |_| |_|
"""

import logging

# expose the main classes
from .stream import Stream, IterableStream, GeneratorStream

# expose the factory functions
from .factories import (
    stream,
    of,
    from_range,
    repeat,
    empty,
    generate,
    S
)

# expose the iteration primitive and error kinds
from .types import (
    ReadOnlyIterator,
    IteratorView,
    StreamError,
    TypeMismatchError,
    EmptySequenceError,
    EndOfSequenceError
)

# library logging stays silent unless the host configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Stream",
    "IterableStream",
    "GeneratorStream",
    "stream",
    "of",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "S",
    "ReadOnlyIterator",
    "IteratorView",
    "StreamError",
    "TypeMismatchError",
    "EmptySequenceError",
    "EndOfSequenceError"
]
