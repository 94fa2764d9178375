"""Application-layer errors raised by the query bus."""

from __future__ import annotations

from typing import Any

from askbus.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class QueryError(ApplicationError):
    """Base for faults detected while answering a query."""

    default_code = "query_error"

    def __init__(self, message: str, *, query_name: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.query_name = query_name
        if query_name is not None:
            self.detail.setdefault("query", query_name)


class InvalidAnswerError(QueryError):
    """An answerer returned a value of the wrong shape for its family."""

    default_code = "invalid_answer"

    def __init__(
        self,
        query_name: str,
        expected: type,
        answer: object,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Answerer for {query_name!r} returned {type(answer).__name__}, "
            f"expected {expected.__name__}",
            query_name=query_name,
            **kwargs,
        )
        self.expected = expected
        self.answer = answer
        self.detail.setdefault("expected", expected.__name__)
        self.detail.setdefault("received", type(answer).__name__)


class NoAnswererError(QueryError):
    """An unanswered outcome was unwrapped."""

    default_code = "no_answerer"

    def __init__(self, query_name: str, **kwargs: Any) -> None:
        super().__init__(f"No answerer subscribed to {query_name!r}", query_name=query_name, **kwargs)


__all__ = [
    "ApplicationError",
    "InvalidAnswerError",
    "NoAnswererError",
    "QueryError",
]
