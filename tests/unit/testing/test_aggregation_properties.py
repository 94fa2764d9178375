"""Property-based tests for the aggregation policies, driven by askbus strategies."""

from __future__ import annotations

from typing import Any

import hypothesis.strategies as st
from hypothesis import given

from askbus.application.query import Aggregation, BoolAnswer, QueryBus
from askbus.testing import (
    answerers_strategy,
    bool_answer_strategy,
    constant_answerer,
    vote_answer_strategy,
)


def _bus_with(subscribe, answerers: list[Any]) -> QueryBus:
    bus = QueryBus(thread_safe=False)
    for answerer in answerers:
        subscribe(bus, answerer)
    return bus


def _number(bus: QueryBus, answerer: Any) -> None:
    bus.subscribe_number("n", answerer)


def _bool(bus: QueryBus, answerer: Any) -> None:
    bus.subscribe_bool("b", answerer)


def _vote(bus: QueryBus, answerer: Any) -> None:
    bus.subscribe_vote("v", str, answerer)


class TestNumericProperties:
    @given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=10))
    def test_sum_min_max_match_builtins(self, values: list[int]) -> None:
        bus = _bus_with(_number, [constant_answerer(v) for v in values])
        assert bus.sum_int("n") == sum(values)
        assert bus.min_int("n") == (min(values) if values else 0)
        assert bus.max_int("n") == (max(values) if values else 0)

    @given(st.integers(min_value=-50, max_value=50), st.integers(min_value=1, max_value=5))
    def test_resubscribing_never_double_counts(self, value: int, times: int) -> None:
        answerer = constant_answerer(value)
        bus = _bus_with(_number, [answerer] * times)
        assert bus.sum_int("n") == value


class TestBooleanProperties:
    @given(st.lists(bool_answer_strategy(), max_size=8))
    def test_or_matches_any_applicable_true(self, answers: list[BoolAnswer]) -> None:
        bus = _bus_with(_bool, [constant_answerer(a) for a in answers])
        expected = any(a.is_applicable and a.result for a in answers)
        assert bus.or_("b") is expected

    @given(st.lists(bool_answer_strategy(), max_size=8))
    def test_and_needs_one_applicable_and_no_false(self, answers: list[BoolAnswer]) -> None:
        bus = _bus_with(_bool, [constant_answerer(a) for a in answers])
        applicable = [a.result for a in answers if a.is_applicable]
        assert bus.and_("b") is (bool(applicable) and all(applicable))

    @given(answerers_strategy(bool_answer_strategy()))
    def test_outcome_answered_iff_subscribed(self, answerers: list[Any]) -> None:
        bus = _bus_with(_bool, answerers)
        assert bus.query(Aggregation.AND, "b").answered is bool(answerers)


class TestVoteProperties:
    @given(st.lists(vote_answer_strategy(), max_size=8))
    def test_winner_has_strictly_positive_maximal_weight(self, ballots: list[Any]) -> None:
        bus = _bus_with(_vote, [constant_answerer(b) for b in ballots])
        weights: dict[str, int] = {}
        for ballot in ballots:
            if ballot.is_applicable:
                weights[ballot.candidate] = weights.get(ballot.candidate, 0) + ballot.weight

        winner = bus.vote("v", str)
        if not weights or max(weights.values()) <= 0:
            assert winner == ""
        else:
            assert weights[winner] == max(weights.values())
            first_best = next(c for c, w in weights.items() if w == max(weights.values()))
            assert winner == first_best
