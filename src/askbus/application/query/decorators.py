"""Decorators that subscribe a function to a :class:`QueryBus` at definition time."""
from __future__ import annotations

from typing import Any, Callable, TypeVar

from askbus.application.query.bus import QueryBus

F = TypeVar("F", bound=Callable[..., Any])


def number_answerer(bus: QueryBus, query_name: str, result_type: type = int) -> Callable[[F], F]:
    """Subscribe the decorated callable as a numeric answerer.

    Usage::

        @number_answerer(bus, "armor")
        def base_armor(unit: Unit) -> int:
            return unit.stats.armor

    The function is returned unchanged, so it can later be passed to
    :meth:`QueryBus.unsubscribe_number`.
    """
    def decorator(func: F) -> F:
        bus.subscribe_number(query_name, func, result_type)
        return func

    return decorator


def bool_answerer(bus: QueryBus, query_name: str) -> Callable[[F], F]:
    """Subscribe the decorated callable as a boolean answerer."""
    def decorator(func: F) -> F:
        bus.subscribe_bool(query_name, func)
        return func

    return decorator


def vote_answerer(bus: QueryBus, query_name: str, candidate_type: type) -> Callable[[F], F]:
    """Subscribe the decorated callable as a vote answerer for *candidate_type*."""
    def decorator(func: F) -> F:
        bus.subscribe_vote(query_name, candidate_type, func)
        return func

    return decorator


__all__ = ["bool_answerer", "number_answerer", "vote_answerer"]
