"""QueryBus – ask every subscribed answerer, reduce the answers to one result."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from askbus.application.query.answers import Answerer, BoolAnswer, VoteAnswer, zero_value
from askbus.application.query.bound import ContextQueries
from askbus.application.query.boolean import reduce_and, reduce_or
from askbus.application.query.keys import Aggregation, Family, QueryKey
from askbus.application.query.numeric import NumericKind, reduce_max, reduce_min, reduce_sum
from askbus.application.query.registry import QueryRegistry, Subscription
from askbus.application.query.voting import reduce_vote
from askbus.kernel.types import Answered, QueryOutcome, Unanswered
from askbus.observability.logging import get_logger
from askbus.observability.metrics import Metrics, NoopMetrics

if TYPE_CHECKING:
    from askbus.config.settings import QueryBusSettings

T = TypeVar("T")
N = TypeVar("N")

_UNSET: Any = object()

_NUMERIC_REDUCERS = {
    Aggregation.SUM: reduce_sum,
    Aggregation.MIN: reduce_min,
    Aggregation.MAX: reduce_max,
}


class QueryBus:
    """Synchronous query-aggregation bus.

    Answerers subscribe to a query name within one of three families
    (number, bool, vote). A query polls every answerer of the matching key
    with the caller's *context*, on the calling thread, and reduces the
    answers under the requested :class:`Aggregation`. A query nobody answers
    returns the family default: ``0`` for numbers, ``False`` for booleans,
    the candidate type's zero value for votes.

    Exceptions raised by an answerer propagate out of the query unchanged.

    Subscription changes are logged at DEBUG; per-query ``query_answered``
    events are emitted only with ``log_queries=True``.

    Example::

        bus = QueryBus()
        bus.subscribe_number("armor", lambda unit: unit.base_armor)
        bus.subscribe_number("armor", shield_bonus)
        total = bus.sum_int("armor", unit)
    """

    def __init__(
        self,
        *,
        thread_safe: bool = True,
        metrics: Metrics | None = None,
        log_queries: bool = False,
    ) -> None:
        self._registry = QueryRegistry(thread_safe=thread_safe)
        self._log_queries = log_queries
        self._log = get_logger(__name__)
        metrics = metrics or NoopMetrics()
        self._queries = metrics.counter("askbus.queries", "Queries answered by the bus")
        self._polled = metrics.histogram(
            "askbus.answerers_polled", "Answerers invoked per query", unit="1"
        )

    @classmethod
    def from_settings(cls, settings: "QueryBusSettings", metrics: Metrics | None = None) -> "QueryBus":
        return cls(
            thread_safe=settings.thread_safe,
            metrics=metrics,
            log_queries=settings.log_queries,
        )

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe_number(
        self, query_name: str, answerer: Callable[[Any], N], result_type: type = int
    ) -> Subscription:
        key = QueryKey(query_name, NumericKind.of(result_type).type)
        return self._subscribe(Family.NUMBER, key, answerer)

    def unsubscribe_number(
        self, query_name: str, answerer: Callable[[Any], N], result_type: type = int
    ) -> None:
        key = QueryKey(query_name, NumericKind.of(result_type).type)
        self._unsubscribe(Family.NUMBER, key, answerer)

    def subscribe_bool(self, query_name: str, answerer: Callable[[Any], BoolAnswer]) -> Subscription:
        return self._subscribe(Family.BOOL, QueryKey(query_name, BoolAnswer), answerer)

    def unsubscribe_bool(self, query_name: str, answerer: Callable[[Any], BoolAnswer]) -> None:
        self._unsubscribe(Family.BOOL, QueryKey(query_name, BoolAnswer), answerer)

    def subscribe_vote(
        self, query_name: str, candidate_type: type[T], answerer: Callable[[Any], VoteAnswer[T]]
    ) -> Subscription:
        return self._subscribe(Family.VOTE, QueryKey(query_name, candidate_type), answerer)

    def unsubscribe_vote(
        self, query_name: str, candidate_type: type[T], answerer: Callable[[Any], VoteAnswer[T]]
    ) -> None:
        self._unsubscribe(Family.VOTE, QueryKey(query_name, candidate_type), answerer)

    def subscriber_count(self, aggregation: Aggregation, query_name: str, result_type: type | None = None) -> int:
        """Number of answerers that a query of this shape would poll."""
        key = self._key_for(aggregation, query_name, result_type)
        return self._registry.count(aggregation.family, key)

    def clear(self) -> None:
        """Drop every subscription in every family."""
        self._registry.clear()
        self._log.debug("query_bus_cleared")

    def _subscribe(self, family: Family, key: QueryKey, answerer: Answerer) -> Subscription:
        subscription = self._registry.add(family, key, answerer)
        self._log.debug(
            "query_subscribed",
            query=key.name,
            family=family.value,
            result_type=key.result_type.__name__,
        )
        return subscription

    def _unsubscribe(self, family: Family, key: QueryKey, answerer: Answerer) -> None:
        removed = self._registry.remove(family, key, answerer)
        self._log.debug(
            "query_unsubscribed",
            query=key.name,
            family=family.value,
            result_type=key.result_type.__name__,
            removed=removed,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def query(
        self,
        aggregation: Aggregation,
        query_name: str,
        context: Any = None,
        *,
        result_type: type | None = None,
        default: Any = _UNSET,
    ) -> QueryOutcome[Any]:
        """Run *aggregation* over the answerers of *query_name*.

        *result_type* selects the numeric kind (``int`` when omitted) or the
        vote candidate type (required for votes); it is ignored for boolean
        queries. *default* overrides the zero value returned by an
        unanswered vote.

        Returns :class:`Answered` when at least one answerer is subscribed,
        :class:`Unanswered` otherwise. Both carry the plain result in
        ``.value``.
        """
        key = self._key_for(aggregation, query_name, result_type)
        answerers = self._registry.snapshot(aggregation.family, key)

        if aggregation.family is Family.NUMBER:
            kind = NumericKind.of(key.result_type)
            fallback: Any = kind.zero
        elif aggregation.family is Family.BOOL:
            fallback = False
        else:
            fallback = zero_value(key.result_type) if default is _UNSET else default

        if not answerers:
            outcome: QueryOutcome[Any] = Unanswered(query_name, fallback)
        elif aggregation.family is Family.NUMBER:
            value = _NUMERIC_REDUCERS[aggregation](kind, answerers, context)
            outcome = Answered(value, len(answerers))
        elif aggregation is Aggregation.OR:
            outcome = Answered(*reduce_or(query_name, answerers, context))
        elif aggregation is Aggregation.AND:
            outcome = Answered(*reduce_and(query_name, answerers, context))
        else:
            outcome = Answered(reduce_vote(query_name, answerers, context, fallback), len(answerers))

        self._record(aggregation, key, outcome)
        return outcome

    def sum(self, query_name: str, context: Any = None, result_type: type = int) -> Any:
        return self.query(Aggregation.SUM, query_name, context, result_type=result_type).value

    def min(self, query_name: str, context: Any = None, result_type: type = int) -> Any:
        return self.query(Aggregation.MIN, query_name, context, result_type=result_type).value

    def max(self, query_name: str, context: Any = None, result_type: type = int) -> Any:
        return self.query(Aggregation.MAX, query_name, context, result_type=result_type).value

    def sum_int(self, query_name: str, context: Any = None) -> int:
        return self.sum(query_name, context, int)

    def min_int(self, query_name: str, context: Any = None) -> int:
        return self.min(query_name, context, int)

    def max_int(self, query_name: str, context: Any = None) -> int:
        return self.max(query_name, context, int)

    def sum_float(self, query_name: str, context: Any = None) -> float:
        return self.sum(query_name, context, float)

    def min_float(self, query_name: str, context: Any = None) -> float:
        return self.min(query_name, context, float)

    def max_float(self, query_name: str, context: Any = None) -> float:
        return self.max(query_name, context, float)

    def or_(self, query_name: str, context: Any = None) -> bool:
        return self.query(Aggregation.OR, query_name, context).value

    def and_(self, query_name: str, context: Any = None) -> bool:
        return self.query(Aggregation.AND, query_name, context).value

    any_of = or_
    all_of = and_

    def vote(
        self,
        query_name: str,
        candidate_type: type[T],
        context: Any = None,
        default: Any = _UNSET,
    ) -> T:
        return self.query(
            Aggregation.VOTE, query_name, context, result_type=candidate_type, default=default
        ).value

    def about(self, context: Any) -> ContextQueries:
        """Bind *context* so call sites can ask ``bus.about(unit).sum_int("armor")``."""
        return ContextQueries(self, context)

    # ------------------------------------------------------------------

    def _key_for(self, aggregation: Aggregation, query_name: str, result_type: type | None) -> QueryKey:
        if aggregation.family is Family.NUMBER:
            return QueryKey(query_name, NumericKind.of(result_type or int).type)
        if aggregation.family is Family.BOOL:
            return QueryKey(query_name, BoolAnswer)
        if result_type is None:
            raise TypeError(f"vote query {query_name!r} needs a candidate result_type")
        return QueryKey(query_name, result_type)

    def _record(self, aggregation: Aggregation, key: QueryKey, outcome: QueryOutcome[Any]) -> None:
        labels = {"aggregation": aggregation.label, "answered": str(outcome.answered).lower()}
        self._queries.add(1, labels)
        self._polled.record(outcome.polled, {"aggregation": aggregation.label})
        if not self._log_queries:
            return
        self._log.debug(
            "query_answered",
            query=key.name,
            aggregation=aggregation.label,
            result_type=key.result_type.__name__,
            answered=outcome.answered,
            polled=outcome.polled,
        )


__all__ = ["QueryBus"]
