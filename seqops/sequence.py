from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import numpy as np
import pandas as pd
from .types import *
from collections.abc import Mapping

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.zip import ZipAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

_MISSING = object()


def is_container(value: Any) -> bool:
    """true for values that hold elements of their own; strings and bytes are scalars"""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (list, tuple, Mapping, Sequence, np.ndarray, pd.Series, pd.DataFrame))


def entries_of(data: Any) -> List[Entry]:
    """
    normalise any supported input into a list of entries.
    mappings and labelled pandas objects contribute names, a data frame
    contributes one named entry per column.
    """
    if isinstance(data, Sequence):
        return list(data.entries())
    if isinstance(data, pd.DataFrame):
        return [Entry(str(col), data[col]) for col in data.columns]
    if isinstance(data, pd.Series):
        if isinstance(data.index, pd.RangeIndex):
            return [Entry(None, v) for v in data.tolist()]
        return [Entry(str(k), v) for k, v in zip(data.index, data.tolist())]
    if isinstance(data, np.ndarray):
        # tolist() hands back native python scalars, which typed operations rely on
        return [Entry(None, v) for v in data.tolist()]
    if isinstance(data, Mapping):
        return [Entry(str(k), v) for k, v in data.items()]
    if isinstance(data, (str, bytes)):
        raise TypeMismatch(f"expected a sequence of elements, got a {type(data).__name__}")
    return [Entry(None, v) for v in data]


def constant(entries: List[Entry]) -> 'Sequence[Any]':
    """wrap already computed entries in a sequence"""
    return Sequence(lambda: entries)


# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _get_entries(self) -> List[Entry]:
        """get the underlying (name, value) entries"""
        pass


# --- base sequence implementation ---

class _BaseSequence(ISequence[T]):
    def __init__(self, data_func: Callable[[], List[Entry]]):
        """init with a function that returns entries when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[Entry]] = None
        self._is_cached = False

    def _get_entries(self) -> List[Entry]:
        """get the current entries, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def _get_data(self) -> List[T]:
        return [entry.value for entry in self._get_entries()]

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return len(self._get_entries())

    def __repr__(self) -> str:
        entries = self._get_entries()
        if self.has_names():
            body = ", ".join(f"{e.name}={e.value!r}" for e in entries)
            return f"Sequence({body})"
        return f"Sequence({[e.value for e in entries]!r})"

    # --- named form ---

    def entries(self) -> List[Entry]:
        """a copy of the (name, value) pairs"""
        return list(self._get_entries())

    def names(self) -> List[Optional[str]]:
        return [entry.name for entry in self._get_entries()]

    def values(self) -> List[T]:
        return self._get_data()

    def has_names(self) -> bool:
        """true when at least one entry carries a name"""
        return any(entry.name is not None for entry in self._get_entries())

    def get(self, key: Key, default: Any = _MISSING) -> T:
        """
        look up by name for str keys, by 1-based position for integer keys.
        an unknown name raises PathNotFound, a position out of bounds IndexOutOfRange.
        """
        entries = self._get_entries()
        if isinstance(key, str):
            for entry in entries:
                if entry.name == key:
                    return entry.value
        elif is_position(key) and 1 <= key <= len(entries):
            return entries[int(key) - 1].value
        if default is not _MISSING:
            return default
        if isinstance(key, str):
            logger.debug(f"no element named {key!r}")
            raise PathNotFound(key, 1)
        logger.debug(f"lookup of {key!r} failed on sequence of length {len(entries)}")
        raise IndexOutOfRange(f"no element at {key!r} (length {len(entries)})")

    def evaluate(self) -> 'Sequence[T]':
        """force the pipeline now so that errors surface at this call; returns self"""
        self._get_entries()
        return self


# --- main sequence class ---

class Sequence(
    _BaseSequence[T],
    _CoreOperations[T]
):
    """an ordered, optionally named, lazily evaluated sequence of values."""
    def __init__(self, data_func: Callable[[], List[Entry]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.zip = ZipAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)
