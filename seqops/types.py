import numbers
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Mapping, NamedTuple, Type
)

import numpy as np

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Transform = Callable[..., U]
Accumulator = Callable[[U, T], U]
Key = Union[str, int]

# positions are 1-based; 0 means "not found"
NOT_FOUND = 0


class Entry(NamedTuple):
    """a single value held by a sequence, with its optional name"""
    name: Optional[str]
    value: Any


# --- errors ---

class SequenceError(Exception):
    """base class for all sequence operation failures"""


class TypeMismatch(SequenceError, TypeError):
    """a result or element violates the type contract of a typed operation"""


class LengthMismatch(SequenceError, ValueError):
    """paired or nested sequences have unequal lengths"""


class PathNotFound(SequenceError, LookupError):
    """a pluck path segment does not resolve"""

    def __init__(self, segment: Any, depth: int):
        super().__init__(f"path segment {segment!r} not found at depth {depth}")
        self.segment = segment
        self.depth = depth


class IndexOutOfRange(SequenceError, IndexError):
    """a position lies outside the bounds of a sequence"""


# --- scalar type conformance ---

_TARGET_ALIASES: Dict[str, type] = {
    'bool': bool, 'lgl': bool,
    'int': int,
    'float': float, 'dbl': float,
    'str': str, 'chr': str,
}


def resolve_target(target: Union[str, type]) -> type:
    """normalise a target type given as a type or one of its short names"""
    if isinstance(target, str):
        if target not in _TARGET_ALIASES:
            raise ValueError(f"unknown target type '{target}'")
        return _TARGET_ALIASES[target]
    if target not in (bool, int, float, str):
        raise ValueError(f"target type must be bool, int, float or str, got {target!r}")
    return target


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def conforms(value: Any, target: type) -> bool:
    """
    checks whether value can stand in a homogeneous container of target.
    bools never count as numbers, integers widen to float.
    """
    if target is bool:
        return _is_bool(value)
    if target is int:
        return isinstance(value, numbers.Integral) and not _is_bool(value)
    if target is float:
        return isinstance(value, numbers.Real) and not _is_bool(value)
    return isinstance(value, target)


def is_position(value: Any) -> bool:
    """integral, non-bool values (numpy integers included) can name a position"""
    return isinstance(value, numbers.Integral) and not _is_bool(value)


def keeps_type(value: Any, original: Any) -> bool:
    """
    checks whether value may replace original without changing its type.
    scalars follow conforms() without the int to float widening.
    """
    kind = type(original)
    if kind in (bool, int, float, str):
        if kind is float and isinstance(value, numbers.Integral):
            return False
        return conforms(value, kind)
    return isinstance(value, kind)


def coerce(value: Any, target: type) -> Any:
    """convert a conforming value to the exact python target type"""
    if target in (bool, int, float, str):
        return target(value)
    return value


class ParseResult(Generic[T]):
    """encapsulates results of a guarded map: values that worked and errors that didn't"""

    def __init__(self, successes: List[T], failures: List[Tuple[int, Exception]]):
        self.successes = successes
        self.failures = failures

    @property
    def has_failures(self) -> bool: return len(self.failures) > 0

    @property
    def success_count(self) -> int: return len(self.successes)

    @property
    def failure_count(self) -> int: return len(self.failures)

    def __repr__(self) -> str:
        return f"ParseResult(successes={self.success_count}, failures={self.failure_count})"
