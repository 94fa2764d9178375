"""Answer value objects returned by boolean and vote answerers."""
from __future__ import annotations

import dataclasses
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

Answerer = Callable[[Any], Any]

_ZERO_VALUES: dict[type, Any] = {
    int: 0,
    float: 0.0,
    bool: False,
    str: "",
    bytes: b"",
    complex: 0j,
    Decimal: Decimal(0),
    Fraction: Fraction(0),
}


@dataclasses.dataclass(frozen=True, slots=True)
class BoolAnswer:
    """One boolean opinion. ``is_applicable=False`` means the answerer abstains."""

    is_applicable: bool
    result: bool = False

    @classmethod
    def yes(cls) -> "BoolAnswer":
        return cls(True, True)

    @classmethod
    def no(cls) -> "BoolAnswer":
        return cls(True, False)

    @classmethod
    def abstain(cls) -> "BoolAnswer":
        return cls(False, False)


@dataclasses.dataclass(frozen=True, slots=True)
class VoteAnswer(Generic[T]):
    """A weighted ballot for *candidate*; abstaining ballots are ignored."""

    is_applicable: bool
    candidate: T | None = None
    weight: int = 1

    @classmethod
    def for_(cls, candidate: T, weight: int = 1) -> "VoteAnswer[T]":
        return cls(True, candidate, weight)

    @classmethod
    def abstain(cls) -> "VoteAnswer[T]":
        return cls(False)


def zero_value(tp: type) -> Any:
    """Return the "nothing" value of *tp*; ``None`` for types without one."""
    return _ZERO_VALUES.get(tp)


__all__ = ["Answerer", "BoolAnswer", "VoteAnswer", "zero_value"]
