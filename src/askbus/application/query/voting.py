"""Weighted vote reduction over :class:`VoteAnswer` answerers."""
from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from askbus.application.query.answers import VoteAnswer
from askbus.kernel.errors import InvalidAnswerError

T = TypeVar("T")

VoteAnswerer = Callable[[Any], VoteAnswer[Any]]


def tally(query_name: str, answerers: Iterable[VoteAnswerer], context: Any) -> dict[Any, int]:
    """Poll every answerer and sum weights per candidate, in first-seen order."""
    weights: dict[Any, int] = {}
    for answerer in answerers:
        ballot = answerer(context)
        if not isinstance(ballot, VoteAnswer):
            raise InvalidAnswerError(query_name, VoteAnswer, ballot)
        if not ballot.is_applicable:
            continue
        weights[ballot.candidate] = weights.get(ballot.candidate, 0) + ballot.weight
    return weights


def elect(weights: dict[T, int], default: T) -> T:
    """Pick the candidate with strictly greatest weight.

    The running best starts at weight 0, so ties keep the earlier leader and
    a best weight of 0 or less elects nobody (*default* is returned).
    """
    best_weight = 0
    winner = default
    for candidate, weight in weights.items():
        if weight > best_weight:
            winner = candidate
            best_weight = weight
    return winner


def reduce_vote(
    query_name: str,
    answerers: Iterable[VoteAnswerer],
    context: Any,
    default: T,
) -> T:
    return elect(tally(query_name, answerers, context), default)


__all__ = ["VoteAnswerer", "elect", "reduce_vote", "tally"]
