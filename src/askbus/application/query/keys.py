"""Query keys, aggregation families and aggregation policies."""
from __future__ import annotations

import dataclasses
import enum


class Family(enum.Enum):
    """Subscriber collection an answerer belongs to."""

    NUMBER = "number"
    BOOL = "bool"
    VOTE = "vote"


class Aggregation(enum.Enum):
    """Reduction policy applied to the answers of one query."""

    SUM = ("sum", Family.NUMBER)
    MIN = ("min", Family.NUMBER)
    MAX = ("max", Family.NUMBER)
    OR = ("or", Family.BOOL)
    AND = ("and", Family.BOOL)
    VOTE = ("vote", Family.VOTE)

    def __init__(self, label: str, family: Family) -> None:
        self.label = label
        self.family = family


@dataclasses.dataclass(frozen=True, slots=True)
class QueryKey:
    """Identity of a query: its name plus the declared result type.

    ``QueryKey("score", int) != QueryKey("score", float)``.
    """

    name: str
    result_type: type

    def __str__(self) -> str:
        return f"{self.name}:{self.result_type.__name__}"


__all__ = ["Aggregation", "Family", "QueryKey"]
