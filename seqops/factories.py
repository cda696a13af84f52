import typing
import pandas as pd
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Sequence

def from_iterable(data: Iterable[T]) -> 'Sequence[T]':
    """create sequence from iterable; mappings become named sequences"""
    from .sequence import Sequence, entries_of
    return Sequence(lambda: entries_of(data))

def from_named(**values: Any) -> 'Sequence[Any]':
    """create named sequence from keyword arguments, in the order given"""
    from .sequence import Sequence
    return Sequence(lambda: [Entry(k, v) for k, v in values.items()])

def from_range(start: int, count: int) -> 'Sequence[int]':
    """create sequence from range"""
    from .sequence import Sequence
    return Sequence(lambda: [Entry(None, i) for i in range(start, start + count)])

def repeat(item: T, count: int) -> 'Sequence[T]':
    """create sequence with repeated item"""
    from .sequence import Sequence
    return Sequence(lambda: [Entry(None, item)] * count)

def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .sequence import Sequence
    return Sequence(lambda: [])

def from_frame(frame: pd.DataFrame, by: Optional[str] = None) -> 'Sequence[Any]':
    """
    split a data frame into a named sequence.
    with `by`, one sub-frame per distinct value of that column (in sorted order, named by the value);
    without it, one series per column.
    """
    from .sequence import Sequence, entries_of
    if by is None:
        return Sequence(lambda: entries_of(frame))

    def split_data():
        if by not in frame.columns:
            raise PathNotFound(by, 1)
        return [Entry(str(key), group) for key, group in frame.groupby(by, sort=True)]

    return Sequence(split_data)

# --- aliases ---
seq = from_iterable
S = from_iterable
s = from_iterable
