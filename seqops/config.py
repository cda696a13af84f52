import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace, asdict
from typing import Iterator

logger = logging.getLogger(__name__)

_TRUTHY = {'1', 'true', 'yes', 'on'}


@dataclass(frozen=True)
class Options:
    """library-wide defaults"""
    strict_equality: bool = True
    log_level: str = 'WARNING'


def _from_env() -> Options:
    strict = os.environ.get('SEQOPS_STRICT_EQUALITY')
    level = os.environ.get('SEQOPS_LOG_LEVEL')
    opts = Options()
    if strict is not None:
        opts = replace(opts, strict_equality=strict.strip().lower() in _TRUTHY)
    if level:
        opts = replace(opts, log_level=level.strip().upper())
    return opts


_current = _from_env()


def get_options() -> Options:
    return _current


def set_options(**changes) -> Options:
    """update options, returning the previous ones so they can be restored"""
    global _current
    known = {f.name for f in fields(Options)}
    unknown = set(changes) - known
    if unknown:
        raise ValueError(f"unknown option(s): {', '.join(sorted(unknown))}")
    previous = _current
    _current = replace(_current, **changes)
    logger.debug(f"options changed: {asdict(_current)}")
    return previous


@contextmanager
def options(**changes) -> Iterator[Options]:
    """temporarily override options inside a with-block"""
    previous = set_options(**changes)
    try:
        yield _current
    finally:
        set_options(**asdict(previous))


def configure_logging(level=None) -> None:
    """minimal logging setup for scripts; the library itself never adds handlers"""
    logging.basicConfig(level=level or _current.log_level, format='%(asctime)s - %(message)s')
