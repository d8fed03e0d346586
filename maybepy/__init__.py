from .option import Option, Present, Absent, ABSENT, present, absent, from_nullable
from .ops import (
    identity,
    compose,
    curry,
    map,
    apply,
    and_then,
    get_or_else,
    lift,
    map2,
    chain,
    filter,
    or_else,
    sequence,
    traverse,
)
from .errors import AbsentValueError
from .logger import ConsoleLogger, default_logger, set_default_logger
from .trace import traced, tap
