from __future__ import annotations
from typing import Any, Callable, Optional, TypeVar

from .logger import ConsoleLogger, default_logger
from .option import Option, Present

T = TypeVar("T")


def traced(label: str, opt: Option[T], logger: Optional[ConsoleLogger] = None) -> Option[T]:
    """Log whether ``opt`` is present at DEBUG and return it unchanged.

    The payload is not logged.
    """
    log = logger if logger is not None else default_logger()
    log.debug(label, state="present" if opt.is_present() else "absent")
    return opt


def tap(f: Callable[[T], Any], opt: Option[T]) -> Option[T]:
    # side effect on present values only; result of f is discarded
    if isinstance(opt, Present):
        f(opt.value)
    return opt
