"""Free-function forms of the Option combinators.

Argument order follows the call sites these are usually written at:
the function comes first for ``map``/``apply``-style lifting, the option
comes first for ``and_then`` chains, and the default comes first for
``get_or_else``.
"""
from __future__ import annotations
import inspect
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from .option import ABSENT, Option, Present

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
A = TypeVar("A")
B = TypeVar("B")


def identity(x: T) -> T:
    return x


def compose(*fs: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Right-to-left composition: ``compose(g, f)(x) == g(f(x))``."""
    def run(x: Any) -> Any:
        for f in reversed(fs):
            x = f(x)
        return x
    return run


def _arity(f: Callable[..., Any]) -> int:
    try:
        params = inspect.signature(f).parameters.values()
    except (TypeError, ValueError) as e:
        raise TypeError(f"cannot determine arity of {f!r}; pass arity explicitly") from e
    kinds = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return sum(1 for p in params if p.kind in kinds and p.default is inspect.Parameter.empty)


def curry(f: Callable[..., U], arity: Optional[int] = None) -> Callable[[Any], Any]:
    """Turn ``f(a, b, c)`` into ``f(a)(b)(c)``.

    Arity defaults to the number of required positional parameters.
    """
    n = _arity(f) if arity is None else arity
    if n <= 1:
        return f

    def step(args: tuple) -> Callable[[Any], Any]:
        def take(x: Any) -> Any:
            got = args + (x,)
            if len(got) == n:
                return f(*got)
            return step(got)
        return take

    return step(())


def map(f: Callable[[T], U], opt: Option[T]) -> Option[U]:
    return opt.map(f)


def apply(f_opt: Option[Callable[[T], U]], x_opt: Option[T]) -> Option[U]:
    return f_opt.ap(x_opt)


def and_then(opt: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    return opt.and_then(f)


def get_or_else(default: U, opt: Option[T]) -> T | U:
    return opt.get_or_else(default)


def lift(f: Callable[..., U]) -> Callable[..., Option[U]]:
    """Lift an n-ary function to work on n options.

    ``lift(f)(a, b, c)`` is ``apply(apply(map(curry(f), a), b), c)``: the
    result is absent if any argument is, and ``f`` only runs when all are
    present.
    """
    def lifted(*opts: Option[Any]) -> Option[U]:
        if not opts:
            return Present(f())
        acc: Option[Any] = map(curry(f, len(opts)), opts[0])
        for o in opts[1:]:
            acc = apply(acc, o)
        return acc
    return lifted


def map2(a: Option[A], b: Option[B], f: Callable[[A, B], V]) -> Option[V]:
    if isinstance(a, Present) and isinstance(b, Present):
        return Present(f(a.value, b.value))
    return ABSENT


def chain(opt: Option[Any], *fs: Callable[[Any], Option[Any]]) -> Option[Any]:
    """``and_then`` through each step left to right, stopping at the first absence."""
    for f in fs:
        if not isinstance(opt, Present):
            return ABSENT
        opt = f(opt.value)
    return opt


def filter(pred: Callable[[T], bool], opt: Option[T]) -> Option[T]:
    return opt.filter(pred)


def or_else(opt: Option[T], alternative: Callable[[], Option[T]]) -> Option[T]:
    return opt.or_else(alternative)


def sequence(opts: Iterable[Option[T]]) -> Option[List[T]]:
    out: List[T] = []
    for o in opts:
        if not isinstance(o, Present):
            return ABSENT
        out.append(o.value)
    return Present(out)


def traverse(f: Callable[[T], Option[U]], xs: Iterable[T]) -> Option[List[U]]:
    return sequence(f(x) for x in xs)
