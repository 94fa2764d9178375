"""Numeric reductions (sum / min / max) generic over a :class:`NumericKind`."""
from __future__ import annotations

import dataclasses
import numbers
from typing import Any, Callable, Generic, Iterable, TypeVar

from askbus.application.query.answers import zero_value

N = TypeVar("N")


@dataclasses.dataclass(frozen=True, slots=True)
class NumericKind(Generic[N]):
    """Result type of a numeric query together with its zero.

    The type takes part in the query key; the zero is both the sum seed and
    the default returned when nobody answers.
    """

    type: type
    zero: N

    @classmethod
    def of(cls, tp: type) -> "NumericKind[Any]":
        """Build a kind for *tp*; its zero is ``tp()`` unless one is known.

        Raises :class:`TypeError` when *tp* is not a :class:`numbers.Number`
        subclass.
        """
        if tp is INT.type:
            return INT
        if tp is FLOAT.type:
            return FLOAT
        if not (isinstance(tp, type) and issubclass(tp, numbers.Number)):
            raise TypeError(f"numeric queries need a numbers.Number subclass, got {tp!r}")
        zero = zero_value(tp)
        return cls(tp, tp() if zero is None else zero)


INT: NumericKind[int] = NumericKind(int, 0)
FLOAT: NumericKind[float] = NumericKind(float, 0.0)


def reduce_sum(kind: NumericKind[N], answerers: Iterable[Callable[[Any], N]], context: Any) -> N:
    total = kind.zero
    for answer in answerers:
        total = total + answer(context)
    return total


def _reduce_extremum(
    kind: NumericKind[N],
    answerers: Iterable[Callable[[Any], N]],
    context: Any,
    pick: Callable[[N, N], N],
) -> N:
    # first answer seeds the accumulator; zero only when nobody answers
    accumulator: N = kind.zero
    seeded = False
    for answer in answerers:
        value = answer(context)
        if seeded:
            accumulator = pick(accumulator, value)
        else:
            accumulator = value
            seeded = True
    return accumulator


def reduce_min(kind: NumericKind[N], answerers: Iterable[Callable[[Any], N]], context: Any) -> N:
    return _reduce_extremum(kind, answerers, context, min)


def reduce_max(kind: NumericKind[N], answerers: Iterable[Callable[[Any], N]], context: Any) -> N:
    return _reduce_extremum(kind, answerers, context, max)


__all__ = ["FLOAT", "INT", "NumericKind", "reduce_max", "reduce_min", "reduce_sum"]
