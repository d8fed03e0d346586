"""Unchecked extraction, for test scaffolding only.

Application code leaves an Option through ``get_or_else``. Nothing in
``maybepy``'s public namespace re-exports ``unsafe_get``.
"""
from __future__ import annotations
from typing import TypeVar

from .errors import AbsentValueError
from .logger import default_logger
from .option import Option, Present

T = TypeVar("T")


def unsafe_get(opt: Option[T]) -> T:
    if isinstance(opt, Present):
        return opt.value
    default_logger().error("unsafe_get called on Absent")
    raise AbsentValueError()
