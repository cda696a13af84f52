"""
'     ___  ___  __ _  ___  _ __  ___
'    / __|/ _ \/ _` |/ _ \| '_ \/ __|
'    \__ \  __/ (_| | (_) | |_) \__ \
'    |___/\___|\__, |\___/| .__/|___/
'                 |_|     |_|
"""

# expose the main class
from .sequence import Sequence

# expose the factory functions
from .factories import (
    from_iterable,
    from_named,
    from_range,
    repeat,
    empty,
    from_frame,
    seq,
    S,
    s,
)

# expose path lookups and the free-function module
from .access import pluck, as_transform
from . import functions

# expose configuration
from .config import Options, get_options, set_options, options, configure_logging

# expose supporting data classes and errors
from .types import (
    Entry,
    ParseResult,
    NOT_FOUND,
    SequenceError,
    TypeMismatch,
    LengthMismatch,
    PathNotFound,
    IndexOutOfRange,
)

# define what `import *` does
__all__ = [
    "Sequence",
    "from_iterable",
    "from_named",
    "from_range",
    "repeat",
    "empty",
    "from_frame",
    "seq",
    "S",
    "s",
    "pluck",
    "as_transform",
    "functions",
    "Options",
    "get_options",
    "set_options",
    "options",
    "configure_logging",
    "Entry",
    "ParseResult",
    "NOT_FOUND",
    "SequenceError",
    "TypeMismatch",
    "LengthMismatch",
    "PathNotFound",
    "IndexOutOfRange",
]
