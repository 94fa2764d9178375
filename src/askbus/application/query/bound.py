"""ContextQueries – call-site adapter that fixes the context of every query."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from askbus.application.query.bus import QueryBus

T = TypeVar("T")


class ContextQueries:
    """Forwards to a :class:`QueryBus` with a fixed context object."""

    __slots__ = ("_bus", "context")

    def __init__(self, bus: "QueryBus", context: Any) -> None:
        self._bus = bus
        self.context = context

    def sum_int(self, query_name: str) -> int:
        return self._bus.sum_int(query_name, self.context)

    def min_int(self, query_name: str) -> int:
        return self._bus.min_int(query_name, self.context)

    def max_int(self, query_name: str) -> int:
        return self._bus.max_int(query_name, self.context)

    def sum_float(self, query_name: str) -> float:
        return self._bus.sum_float(query_name, self.context)

    def min_float(self, query_name: str) -> float:
        return self._bus.min_float(query_name, self.context)

    def max_float(self, query_name: str) -> float:
        return self._bus.max_float(query_name, self.context)

    def or_(self, query_name: str) -> bool:
        return self._bus.or_(query_name, self.context)

    def and_(self, query_name: str) -> bool:
        return self._bus.and_(query_name, self.context)

    def vote(self, query_name: str, candidate_type: type[T], **kwargs: Any) -> T:
        return self._bus.vote(query_name, candidate_type, self.context, **kwargs)

    def __repr__(self) -> str:
        return f"ContextQueries({self.context!r})"


__all__ = ["ContextQueries"]
