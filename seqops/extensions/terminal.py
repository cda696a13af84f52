from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


def _plain(value: Any) -> Any:
    from ..sequence import Sequence
    if not isinstance(value, Sequence):
        return value
    entries = value._get_entries()
    names = [e.name for e in entries]
    if entries and None not in names and len(set(names)) == len(names):
        return {e.name: _plain(e.value) for e in entries}
    return [_plain(e.value) for e in entries]


class TerminalAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list of values"""
        return self._sequence._get_data()

    def entries(self) -> List[Entry]:
        """convert to list of (name, value) entries"""
        return self._sequence.entries()

    def dict(self, key_selector: Optional[Callable[[T], K]] = None,
             value_selector: Optional[Callable[[T], V]] = None) -> Dict[Any, Any]:
        """
        convert to dictionary. without a key selector, names are the keys and
        unnamed elements are keyed by their 1-based position.
        """
        val_sel = value_selector if value_selector else lambda item: item
        entries = self._sequence._get_entries()
        if key_selector is not None:
            return {key_selector(e.value): val_sel(e.value) for e in entries}
        return {(e.name if e.name is not None else position): val_sel(e.value)
                for position, e in enumerate(entries, start=1)}

    def plain(self) -> Any:
        """
        recursively convert nested sequences to builtins: uniquely and fully
        named sequences become dicts, everything else becomes lists.
        """
        return _plain(self._sequence)

    def array(self, dtype: Any = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._sequence._get_data(), dtype=dtype)

    def pandas(self) -> pd.Series:
        """convert to pandas series; names become the index when every element has one"""
        entries = self._sequence._get_entries()
        names = [e.name for e in entries]
        index = names if entries and None not in names else None
        return pd.Series([e.value for e in entries], index=index, dtype=object if not entries else None)

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe; a named sequence of columns becomes one column each"""
        from ..sequence import entries_of, is_container
        entries = self._sequence._get_entries()
        if entries and all(e.name is not None and is_container(e.value) for e in entries):
            return pd.DataFrame({e.name: [x.value for x in entries_of(e.value)] for e in entries})
        return pd.DataFrame(self._sequence._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._sequence._get_entries())
        return sum(1 for x in self._sequence._get_data() if predicate(x))
