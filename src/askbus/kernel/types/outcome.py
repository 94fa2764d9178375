"""QueryOutcome[T] – Answered and Unanswered variants.

Distinguishes "nobody was subscribed" from "answerers replied with the
zero value" while still carrying the family default in both cases.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, NoReturn, TypeVar

from askbus.kernel.errors import NoAnswererError

T = TypeVar("T")
U = TypeVar("U")


class Answered(Generic[T]):
    """Outcome of a query that polled at least one answerer."""

    __slots__ = ("_value", "_polled")

    def __init__(self, value: T, polled: int) -> None:
        self._value = value
        self._polled = polled

    @property
    def value(self) -> T:
        return self._value

    @property
    def polled(self) -> int:
        """How many answerers were invoked (short-circuits stop early)."""
        return self._polled

    @property
    def answered(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self._value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def map(self, func: Callable[[T], U]) -> "Answered[U]":
        return Answered(func(self._value), self._polled)

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Answered):
            return NotImplemented
        return self._value == other._value and self._polled == other._polled

    def __hash__(self) -> int:
        return hash(("answered", self._value, self._polled))

    def __repr__(self) -> str:
        return f"Answered({self._value!r}, polled={self._polled})"


class Unanswered(Generic[T]):
    """Outcome of a query with no subscribed answerer; carries the default."""

    __slots__ = ("_query_name", "_default")

    def __init__(self, query_name: str, default: T) -> None:
        self._query_name = query_name
        self._default = default

    @property
    def value(self) -> T:
        return self._default

    @property
    def polled(self) -> int:
        return 0

    @property
    def answered(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise NoAnswererError(self._query_name)

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, func: Callable[[T], U]) -> "Unanswered[U]":
        return Unanswered(self._query_name, func(self._default))

    def __iter__(self) -> Iterator[T]:
        return iter(())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unanswered):
            return NotImplemented
        return self._query_name == other._query_name and self._default == other._default

    def __hash__(self) -> int:
        return hash(("unanswered", self._query_name, self._default))

    def __repr__(self) -> str:
        return f"Unanswered({self._query_name!r}, default={self._default!r})"


type QueryOutcome[T] = Answered[T] | Unanswered[T]

__all__ = ["Answered", "QueryOutcome", "Unanswered"]
