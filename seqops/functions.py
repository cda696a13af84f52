"""
free-function form of the sequence operations.

every function takes the sequence first and accepts any list, tuple, mapping,
numpy array, pandas object or Sequence. sequence results are evaluated before
they are returned, so errors surface at the call that caused them.

    from seqops import functions as fn
    fn.keep(range(11, 21), lambda x: x % 2 == 0).to.list()   # [12, 14, 16, 18, 20]
"""
from functools import partial
from typing import Any, Callable, Iterable, Optional, Union

from .access import as_transform, pluck
from .factories import from_iterable
from .sequence import Sequence
from .types import Key, Predicate, Transform

__all__ = [
    'map', 'map_typed', 'map2', 'pmap', 'imap', 'pluck',
    'keep', 'discard', 'compact',
    'every', 'some', 'none', 'has_element', 'detect', 'detect_index',
    'modify', 'modify_if', 'modify_at',
    'flatten', 'transpose', 'reduce', 'accumulate', 'walk',
    'negate', 'compose', 'partial', 'as_transform',
]


def _seq(data: Any) -> Sequence:
    return data if isinstance(data, Sequence) else from_iterable(data)


# --- function helpers ---

def negate(predicate: Predicate) -> Predicate:
    test = as_transform(predicate)
    return lambda item: not test(item)


def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """compose left to right: compose(f, g)(x) == g(f(x))"""
    steps = [as_transform(f) for f in functions]
    def composed(item):
        for step in steps:
            item = step(item)
        return item
    return composed


# --- mapping ---

def map(data, transform: Transform, *args, **kwargs) -> Sequence:
    return _seq(data).map(transform, *args, **kwargs).evaluate()


def map_typed(data, transform: Transform, target: Union[str, type], *args, **kwargs) -> Sequence:
    return _seq(data).map_typed(transform, target, *args, **kwargs).evaluate()


def map2(first, second, transform: Callable[[Any, Any], Any], *args, **kwargs) -> Sequence:
    return _seq(first).zip.map2(second, transform, *args, **kwargs).evaluate()


def pmap(sequences: Iterable[Any], transform: Callable[..., Any], *args, **kwargs) -> Sequence:
    """map over several equal-length sequences at once; at least one sequence is needed"""
    sequences = list(sequences)
    if not sequences:
        raise ValueError("pmap needs at least one sequence")
    first, *others = sequences
    return _seq(first).zip.pmap(others, transform, *args, **kwargs).evaluate()


def imap(data, transform: Callable[[Any, Key], Any]) -> Sequence:
    return _seq(data).imap(transform).evaluate()


# --- filtering ---

def keep(data, predicate: Predicate) -> Sequence:
    return _seq(data).keep(predicate).evaluate()


def discard(data, predicate: Predicate) -> Sequence:
    return _seq(data).discard(predicate).evaluate()


def compact(data) -> Sequence:
    return _seq(data).compact().evaluate()


# --- aggregate predicates ---

def every(data, predicate: Predicate) -> bool:
    return _seq(data).every(predicate)


def some(data, predicate: Predicate) -> bool:
    return _seq(data).some(predicate)


def none(data, predicate: Predicate) -> bool:
    return _seq(data).none(predicate)


def has_element(data, value: Any, strict: Optional[bool] = None) -> bool:
    return _seq(data).has_element(value, strict=strict)


def detect(data, predicate: Predicate, default: Any = None, direction: str = 'forward') -> Any:
    return _seq(data).detect(predicate, default=default, direction=direction)


def detect_index(data, predicate: Predicate, direction: str = 'forward') -> int:
    return _seq(data).detect_index(predicate, direction=direction)


# --- selective modification ---

def modify(data, transform: Transform, *args, **kwargs) -> Sequence:
    return _seq(data).modify(transform, *args, **kwargs).evaluate()


def modify_if(data, predicate: Predicate, transform: Transform) -> Sequence:
    return _seq(data).modify_if(predicate, transform).evaluate()


def modify_at(data, positions: Union[Key, Iterable[Key]], transform: Transform) -> Sequence:
    return _seq(data).modify_at(positions, transform).evaluate()


# --- reshaping ---

def flatten(data, target: Optional[Union[str, type]] = None) -> Sequence:
    return _seq(data).util.flatten(target).evaluate()


def transpose(data) -> Sequence:
    return _seq(data).util.transpose().evaluate()


# --- reducing ---

def reduce(data, accumulator: Callable[[Any, Any], Any], *initial: Any) -> Any:
    return _seq(data).reduce(accumulator, *initial)


def accumulate(data, accumulator: Callable[[Any, Any], Any], *initial: Any) -> Sequence:
    return _seq(data).accumulate(accumulator, *initial).evaluate()


def walk(data, action: Callable[[Any], Any]) -> Sequence:
    return _seq(data).util.walk(action)
