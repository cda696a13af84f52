"""
path based lookups into nested containers.

a path is a chain of segments resolved left to right:
    - str  -> mapping key, sequence name, item label or attribute
    - int  -> 1-based position (or a mapping key when the mapping has it)
    - callable -> applied to the current value
strings are treated as scalars and are never indexed into.
"""
import logging
from collections.abc import Mapping, Sequence as AbcSequence
from typing import Any, Callable, Tuple

import numpy as np

from .types import PathNotFound, is_position

logger = logging.getLogger(__name__)

_MISSING = object()


def _by_position(values, position: int) -> Tuple[bool, Any]:
    position = int(position)
    if 1 <= position <= len(values):
        return True, values[position - 1]
    return False, None


def _resolve(container: Any, segment: Any) -> Tuple[bool, Any]:
    """resolve one segment against one level, returning (found, value)"""
    from .sequence import Sequence

    if callable(segment) and not isinstance(segment, (str, int)):
        return True, segment(container)

    if container is None or isinstance(container, (str, bytes)):
        return False, None

    if isinstance(container, Sequence):
        entries = container.entries()
        if isinstance(segment, str):
            for entry in entries:
                if entry.name == segment:
                    return True, entry.value
            return False, None
        if is_position(segment):
            found, entry = _by_position(entries, segment)
            return (True, entry.value) if found else (False, None)
        return False, None

    if isinstance(container, Mapping):
        if segment in container:
            return True, container[segment]
        if is_position(segment):
            return _by_position(list(container.values()), segment)
        return False, None

    if isinstance(container, (AbcSequence, np.ndarray)):
        if is_position(segment):
            return _by_position(container, segment)
        # namedtuples fall through to attribute access
        if isinstance(segment, str) and hasattr(container, '_fields') and segment in container._fields:
            return True, getattr(container, segment)
        return False, None

    if isinstance(segment, str):
        # labelled containers (pandas frames and series) before plain attributes
        if hasattr(container, '__getitem__'):
            try:
                return True, container[segment]
            except (KeyError, IndexError, TypeError):
                pass
        if hasattr(container, segment):
            return True, getattr(container, segment)
    return False, None


def pluck(container: Any, *path: Any, default: Any = _MISSING) -> Any:
    """
    navigate a nested structure along path.
    raises PathNotFound when a segment does not resolve, unless a default is given.
    """
    current = container
    for depth, segment in enumerate(path, start=1):
        found, current = _resolve(current, segment)
        if not found:
            if default is not _MISSING:
                return default
            logger.debug(f"pluck failed on segment {segment!r} at depth {depth}")
            raise PathNotFound(segment, depth)
    return current


def as_transform(extractor: Any) -> Callable[..., Any]:
    """
    turn an extractor into a callable.
    callables pass through; str/int become a single-segment pluck, tuples and lists a full path.
    """
    if callable(extractor) and not isinstance(extractor, (str, int)):
        return extractor
    if isinstance(extractor, str) or is_position(extractor):
        return lambda item, *args, **kwargs: pluck(item, extractor)
    if isinstance(extractor, (tuple, list)):
        path = tuple(extractor)
        return lambda item, *args, **kwargs: pluck(item, *path)
    raise TypeError(f"cannot use {type(extractor).__name__} as a transform or predicate")
