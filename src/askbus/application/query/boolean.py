"""Boolean reductions (or / and) over :class:`BoolAnswer` answerers."""
from __future__ import annotations

from typing import Any, Callable, Iterable

from askbus.application.query.answers import BoolAnswer
from askbus.kernel.errors import InvalidAnswerError

BoolAnswerer = Callable[[Any], BoolAnswer]


def _poll(query_name: str, answerer: BoolAnswerer, context: Any) -> BoolAnswer:
    answer = answerer(context)
    if not isinstance(answer, BoolAnswer):
        raise InvalidAnswerError(query_name, BoolAnswer, answer)
    return answer


def reduce_or(query_name: str, answerers: Iterable[BoolAnswerer], context: Any) -> tuple[bool, int]:
    """Return ``(result, polled)``; stops at the first applicable ``True``."""
    polled = 0
    for answerer in answerers:
        answer = _poll(query_name, answerer, context)
        polled += 1
        if answer.is_applicable and answer.result:
            return True, polled
    return False, polled


def reduce_and(query_name: str, answerers: Iterable[BoolAnswerer], context: Any) -> tuple[bool, int]:
    """Return ``(result, polled)``.

    Stops at the first applicable ``False``. When every answerer abstains
    the result is ``False``: there is no vacuous truth.
    """
    polled = 0
    has_answer = False
    for answerer in answerers:
        answer = _poll(query_name, answerer, context)
        polled += 1
        if not answer.is_applicable:
            continue
        has_answer = True
        if not answer.result:
            return False, polled
    return has_answer, polled


__all__ = ["BoolAnswerer", "reduce_and", "reduce_or"]
