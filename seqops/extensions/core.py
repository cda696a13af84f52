from __future__ import annotations
import logging
import typing
from functools import reduce as _reduce
from itertools import accumulate as _accumulate
import numpy as np
from ..types import *
from ..access import as_transform, pluck as _pluck
from ..config import get_options

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)

_MISSING = object()


def _key_of(entry: Entry, position: int) -> Key:
    return entry.name if entry.name is not None else position


def _check_direction(direction: str) -> None:
    if direction not in ('forward', 'backward'):
        raise ValueError(f"direction must be 'forward' or 'backward', got '{direction}'")


def _mismatch(value: Any, target: type, position: int, operation: str) -> TypeMismatch:
    logger.debug(f"{operation}: {type(value).__name__} at position {position} is not {target.__name__}")
    return TypeMismatch(
        f"{operation}: result at position {position} is {type(value).__name__}, expected {target.__name__}")


def _ensure_type(value: Any, target: type, position: int, operation: str) -> None:
    if not conforms(value, target):
        raise _mismatch(value, target, position, operation)


def _equal(x: Any, value: Any) -> bool:
    # arrays compare element-wise, so reduce them to a single answer
    if isinstance(x, np.ndarray) or isinstance(value, np.ndarray):
        return np.array_equal(x, value)
    return x == value


class _CoreOperations(Generic[T]):

    # --- mapping ---

    def map(self: 'Sequence[T]', transform: Transform, *args, **kwargs) -> 'Sequence[Any]':
        """apply transform to every element, forwarding extra arguments to each call"""
        from ..sequence import Sequence
        func = as_transform(transform)
        def map_data():
            return [Entry(e.name, func(e.value, *args, **kwargs)) for e in self._get_entries()]
        return Sequence(map_data)

    def map_typed(self: 'Sequence[T]', transform: Transform, target: Union[str, type],
                  *args, **kwargs) -> 'Sequence[Any]':
        """map into a homogeneous sequence of bool, int, float or str"""
        from ..sequence import Sequence
        func = as_transform(transform)
        target_type = resolve_target(target)
        def typed_data():
            result = []
            for position, e in enumerate(self._get_entries(), start=1):
                value = func(e.value, *args, **kwargs)
                _ensure_type(value, target_type, position, 'map_typed')
                result.append(Entry(e.name, coerce(value, target_type)))
            return result
        return Sequence(typed_data)

    def map_bool(self: 'Sequence[T]', transform: Transform, *args, **kwargs) -> 'Sequence[bool]':
        return self.map_typed(transform, bool, *args, **kwargs)

    def map_int(self: 'Sequence[T]', transform: Transform, *args, **kwargs) -> 'Sequence[int]':
        return self.map_typed(transform, int, *args, **kwargs)

    def map_float(self: 'Sequence[T]', transform: Transform, *args, **kwargs) -> 'Sequence[float]':
        return self.map_typed(transform, float, *args, **kwargs)

    def map_str(self: 'Sequence[T]', transform: Transform, *args, **kwargs) -> 'Sequence[str]':
        return self.map_typed(transform, str, *args, **kwargs)

    def imap(self: 'Sequence[T]', transform: Callable[[T, Key], U]) -> 'Sequence[U]':
        """
        apply transform(value, key) where key is the element's name,
        or its 1-based position when the element is unnamed.
        """
        from ..sequence import Sequence
        def imap_data():
            return [Entry(e.name, transform(e.value, _key_of(e, position)))
                    for position, e in enumerate(self._get_entries(), start=1)]
        return Sequence(imap_data)

    def pluck(self: 'Sequence[T]', *path: Any, default: Any = _MISSING) -> Any:
        """navigate into this sequence (and what it holds) along path"""
        if default is _MISSING:
            return _pluck(self, *path)
        return _pluck(self, *path, default=default)

    # --- filtering ---

    def keep(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """keep the elements satisfying predicate, in order and with their names"""
        from ..sequence import Sequence
        test = as_transform(predicate)
        return Sequence(lambda: [e for e in self._get_entries() if test(e.value)])

    def discard(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """drop the elements satisfying predicate"""
        test = as_transform(predicate)
        return self.keep(lambda item: not test(item))

    def compact(self: 'Sequence[T]') -> 'Sequence[T]':
        """drop None values and empty containers"""
        from ..sequence import is_container
        def is_empty(item):
            if item is None:
                return True
            return is_container(item) and len(item) == 0
        return self.discard(is_empty)

    # --- aggregate predicates (eager) ---

    def every(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        """true if predicate holds for all elements; true for an empty sequence"""
        test = as_transform(predicate)
        return all(test(x) for x in self._get_data())

    def some(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        """true if predicate holds for at least one element; false for an empty sequence"""
        test = as_transform(predicate)
        return any(test(x) for x in self._get_data())

    def none(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        return not self.some(predicate)

    def has_element(self: 'Sequence[T]', value: Any, strict: Optional[bool] = None) -> bool:
        """
        membership test. strict equality (the default, see config) also requires
        identical types, so 2 does not match 2.0 and True does not match 1.
        """
        if strict is None:
            strict = get_options().strict_equality
        if strict:
            return any(type(x) is type(value) and _equal(x, value) for x in self._get_data())
        return any(_equal(x, value) for x in self._get_data())

    def detect(self: 'Sequence[T]', predicate: Predicate[T], default: Optional[T] = None,
               direction: str = 'forward') -> Optional[T]:
        """first element satisfying predicate, or default when nothing matches"""
        position = self.detect_index(predicate, direction)
        if position == NOT_FOUND:
            return default
        return self._get_entries()[position - 1].value

    def detect_index(self: 'Sequence[T]', predicate: Predicate[T], direction: str = 'forward') -> int:
        """1-based position of the first element satisfying predicate in this sequence, 0 if none"""
        _check_direction(direction)
        test = as_transform(predicate)
        data = self._get_data()
        positions = range(1, len(data) + 1)
        if direction == 'backward':
            positions = reversed(positions)
        for position in positions:
            if test(data[position - 1]):
                return position
        return NOT_FOUND

    # --- selective modification ---

    def modify(self: 'Sequence[T]', transform: Callable[[T], T], *args, **kwargs) -> 'Sequence[T]':
        """
        like map, but every result must keep the exact type of the element it replaces.
        ints are not widened to float here; numpy scalars come back as native python values.
        """
        from ..sequence import Sequence
        func = as_transform(transform)
        def modify_data():
            result = []
            for position, e in enumerate(self._get_entries(), start=1):
                value = func(e.value, *args, **kwargs)
                if not keeps_type(value, e.value):
                    raise _mismatch(value, type(e.value), position, 'modify')
                result.append(Entry(e.name, coerce(value, type(e.value))))
            return result
        return Sequence(modify_data)

    def modify_if(self: 'Sequence[T]', predicate: Predicate[T], transform: Callable[[T], T]) -> 'Sequence[T]':
        """apply transform only where predicate holds; other elements pass through"""
        from ..sequence import Sequence
        test = as_transform(predicate)
        func = as_transform(transform)
        def modify_if_data():
            return [Entry(e.name, func(e.value)) if test(e.value) else e for e in self._get_entries()]
        return Sequence(modify_if_data)

    def modify_at(self: 'Sequence[T]', positions: Union[Key, Iterable[Key]],
                  transform: Callable[[T], T]) -> 'Sequence[T]':
        """apply transform only at the given 1-based positions or names"""
        from ..sequence import Sequence
        func = as_transform(transform)
        single = isinstance(positions, str) or is_position(positions)
        wanted = [positions] if single else list(positions)
        def modify_at_data():
            entries = self._get_entries()
            targets = set()
            for key in wanted:
                if isinstance(key, str):
                    matches = [i for i, e in enumerate(entries) if e.name == key]
                    if not matches:
                        logger.debug(f"modify_at: unknown name {key!r}")
                        raise IndexOutOfRange(f"modify_at: no element named {key!r}")
                    targets.update(matches)
                elif is_position(key) and 1 <= key <= len(entries):
                    targets.add(int(key) - 1)
                else:
                    logger.debug(f"modify_at: position {key!r} outside 1..{len(entries)}")
                    raise IndexOutOfRange(f"modify_at: position {key!r} outside 1..{len(entries)}")
            return [Entry(e.name, func(e.value)) if i in targets else e for i, e in enumerate(entries)]
        return Sequence(modify_at_data)

    # --- names ---

    def set_names(self: 'Sequence[T]', names: Optional[Iterable[Optional[str]]]) -> 'Sequence[T]':
        """replace the names of all entries; None removes them"""
        from ..sequence import Sequence
        def named_data():
            entries = self._get_entries()
            if names is None:
                return [Entry(None, e.value) for e in entries]
            new_names = list(names)
            if len(new_names) != len(entries):
                raise LengthMismatch(f"set_names: got {len(new_names)} names for {len(entries)} elements")
            return [Entry(n, e.value) for n, e in zip(new_names, entries)]
        return Sequence(named_data)

    # --- reducing ---

    def reduce(self: 'Sequence[T]', accumulator: Accumulator[U, T], initial: Any = _MISSING) -> U:
        """fold the sequence from the left"""
        data = self._get_data()
        if initial is _MISSING:
            if not data: raise ValueError("cannot reduce empty sequence without an initial value")
            return _reduce(accumulator, data)
        return _reduce(accumulator, data, initial)

    def accumulate(self: 'Sequence[T]', accumulator: Accumulator[U, T], initial: Any = _MISSING) -> 'Sequence[U]':
        """the running results of reduce, including the initial value when given"""
        from ..sequence import Sequence
        def accumulate_data():
            entries = self._get_entries()
            data = [e.value for e in entries]
            if initial is _MISSING:
                # one result per element, so names carry over
                return [Entry(e.name, v) for e, v in zip(entries, _accumulate(data, accumulator))]
            return [Entry(None, v) for v in _accumulate(data, accumulator, initial=initial)]
        return Sequence(accumulate_data)
