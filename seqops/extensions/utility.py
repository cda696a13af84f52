from __future__ import annotations
import logging
import typing
from ..types import *
from ..access import as_transform

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)


def _join_names(outer: Optional[str], inner: Optional[str]) -> Optional[str]:
    if outer is not None and inner is not None:
        return f"{outer}_{inner}"
    return inner if inner is not None else outer


class UtilityAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def walk(self, action: Callable[[T], Any]) -> 'Sequence[T]':
        """
        calls action on each element for its side-effects.
        this is an EAGER operation that executes immediately.
        returns the original sequence to allow chaining.
        """
        for item in self._sequence._get_data():
            action(item)
        return self._sequence

    def flatten(self, target: Optional[Union[str, type]] = None) -> 'Sequence[Any]':
        """
        concatenate nested containers one level deep, in order.
        scalars (strings included) pass through as they are. inner names are kept and
        joined to the outer name as 'outer_inner' when both exist.
        with a target type every resulting value must conform to it and is coerced.
        """
        from ..sequence import Sequence, entries_of, is_container
        target_type = resolve_target(target) if target is not None else None

        def flatten_data():
            result = []
            for outer in self._sequence._get_entries():
                if is_container(outer.value):
                    result.extend(Entry(_join_names(outer.name, inner.name), inner.value)
                                  for inner in entries_of(outer.value))
                else:
                    result.append(outer)
            if target_type is None:
                return result

            typed = []
            for position, e in enumerate(result, start=1):
                if not conforms(e.value, target_type):
                    logger.debug(f"flatten: {type(e.value).__name__} at position {position} is not {target_type.__name__}")
                    raise TypeMismatch(
                        f"flatten: element at position {position} is {type(e.value).__name__}, expected {target_type.__name__}")
                typed.append(Entry(e.name, coerce(e.value, target_type)))
            return typed

        return Sequence(flatten_data)

    def transpose(self) -> 'Sequence[Sequence[Any]]':
        """
        swap rows and columns of a sequence of equal-length sequences.
        the i-th result collects the i-th element of every inner sequence; results are
        named after the first inner sequence's names and hold the outer names.
        when every inner sequence is fully named, elements are matched by name.
        """
        from ..sequence import Sequence, constant, entries_of, is_container

        def transpose_data():
            outer = self._sequence._get_entries()
            if not outer:
                return []

            rows = []
            for position, e in enumerate(outer, start=1):
                if not is_container(e.value):
                    raise TypeMismatch(
                        f"transpose: element at position {position} is {type(e.value).__name__}, not a sequence")
                rows.append(entries_of(e.value))

            width = len(rows[0])
            for position, row in enumerate(rows, start=1):
                if len(row) != width:
                    logger.debug(f"transpose: inner length {len(row)} at position {position}, expected {width}")
                    raise LengthMismatch(
                        f"transpose: inner sequence {position} has length {len(row)}, expected {width}")

            keys = [entry.name for entry in rows[0]]
            by_name = all(entry.name is not None for row in rows for entry in row)
            if by_name:
                aligned = []
                for row in rows:
                    lookup = {}
                    for entry in row:
                        lookup.setdefault(entry.name, entry.value)
                    missing = [k for k in keys if k not in lookup]
                    if missing:
                        raise PathNotFound(missing[0], 2)
                    aligned.append([lookup[k] for k in keys])
            else:
                aligned = [[entry.value for entry in row] for row in rows]

            return [Entry(keys[j], constant([Entry(o.name, values[j]) for o, values in zip(outer, aligned)]))
                    for j in range(width)]

        return Sequence(transpose_data)

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """
        pipes the sequence object into an external function. enables custom, chainable operations.
        example: .util.pipe(fit_per_group, degree=1)
        """
        return func(self._sequence, *args, **kwargs)

    def try_map(self, transform: Transform, *args, **kwargs) -> ParseResult[Any]:
        """
        map that records failures instead of stopping at the first one.
        failures are (1-based position, exception) pairs.
        """
        func = as_transform(transform)
        successes, failures = [], []
        for position, item in enumerate(self._sequence._get_data(), start=1):
            try:
                successes.append(func(item, *args, **kwargs))
            except Exception as e:
                logger.debug(f"try_map: position {position} failed with {type(e).__name__}: {e}")
                failures.append((position, e))
        return ParseResult(successes, failures)
