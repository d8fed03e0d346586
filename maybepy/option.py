from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """A value of type ``T`` that is either ``Present`` or ``Absent``.

    Absence carries no information beyond "nothing is there". Every
    combinator returns a new Option; instances are never mutated.

    Example:
        ```python
        present(2).map(lambda x: x + 1)               # Present(3)
        absent().map(lambda x: x + 1)                 # Absent
        present(2).and_then(lambda x: absent())       # Absent
        absent().get_or_else(0)                       # 0
        ```
    """
    __slots__ = ()

    def is_present(self) -> bool: raise NotImplementedError
    def is_absent(self) -> bool: return not self.is_present()

    def fold(self, on_present: Callable[[T], U], on_absent: Callable[[], U]) -> U:
        """Exhaustive case analysis: exactly one of the callables runs."""
        if isinstance(self, Present):
            return on_present(self.value)
        return on_absent()

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if isinstance(self, Present):
            return Present(f(self.value))
        return ABSENT

    def ap(self: "Option[Callable[[T], U]]", opt: "Option[T]") -> "Option[U]":
        """Apply the wrapped function to the wrapped argument.

        ``self`` holds the function. The function only runs when both sides
        are present.
        """
        if isinstance(self, Present) and isinstance(opt, Present):
            return Present(self.value(opt.value))
        return ABSENT

    def and_then(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if isinstance(self, Present):
            return f(self.value)
        return ABSENT

    flat_map = and_then

    def filter(self, pred: Callable[[T], bool]) -> "Option[T]":
        if isinstance(self, Present) and pred(self.value):
            return self
        return ABSENT

    def or_else(self, alternative: Callable[[], "Option[T]"]) -> "Option[T]":
        return self if isinstance(self, Present) else alternative()

    def get_or_else(self, default: U) -> T | U:
        return self.value if isinstance(self, Present) else default

    def to_nullable(self) -> Optional[T]:
        return self.value if isinstance(self, Present) else None


@dataclass(frozen=True)
class Present(Option[T]):
    value: T
    def __repr__(self) -> str: return f"Present({self.value!r})"
    def is_present(self) -> bool: return True


class Absent(Option[Any]):
    __slots__ = ()
    __match_args__ = ()
    _instance: "Absent | None" = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "Absent"
    def __eq__(self, other: object) -> bool: return isinstance(other, Absent)
    def __hash__(self) -> int: return hash(Absent)
    def __reduce__(self) -> tuple: return (Absent, ())
    def __copy__(self) -> "Absent": return self
    def __deepcopy__(self, _memo: dict) -> "Absent": return self
    def is_present(self) -> bool: return False


ABSENT: Option[Any] = Absent()


def present(value: T) -> Option[T]:
    return Present(value)


def absent() -> Option[Any]:
    return ABSENT


def from_nullable(v: Optional[T]) -> Option[T]:
    return Present(v) if v is not None else ABSENT
