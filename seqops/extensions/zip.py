from __future__ import annotations
import logging
import typing
from ..types import *
from ..access import as_transform

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)


class ZipAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def map2(self, other: Iterable[U], transform: Callable[[T, U], V], *args, **kwargs) -> 'Sequence[V]':
        """apply a two-argument transform element-wise; both sequences must have the same length"""
        return self.pmap([other], transform, *args, **kwargs)

    def pmap(self, others: Iterable[Iterable[Any]], transform: Callable[..., V], *args, **kwargs) -> 'Sequence[V]':
        """
        apply an n-argument transform element-wise across this sequence and others.
        the i-th call receives the i-th element of every sequence, in order.
        names are taken from this sequence.
        """
        from ..sequence import Sequence, entries_of
        func = as_transform(transform)
        def pmap_data():
            entries = self._sequence._get_entries()
            columns = [[e.value for e in entries_of(o)] for o in others]
            for i, column in enumerate(columns, start=2):
                if len(column) != len(entries):
                    logger.debug(f"pmap: argument {i} has length {len(column)}, expected {len(entries)}")
                    raise LengthMismatch(
                        f"sequences must have the same length: argument 1 has {len(entries)}, argument {i} has {len(column)}")
            return [Entry(e.name, func(e.value, *(column[j] for column in columns), *args, **kwargs))
                    for j, e in enumerate(entries)]
        return Sequence(pmap_data)
