"""conftest.py for benchmarks.

Provides a bus pre-populated with answerers in every family so benchmarks
measure polling and reduction rather than setup.
"""

from __future__ import annotations

import pytest

from askbus.application.query import BoolAnswer, QueryBus, VoteAnswer
from askbus.testing import constant_answerer

ANSWERERS = 50


@pytest.fixture(scope="session")
def loaded_bus() -> QueryBus:
    bus = QueryBus()
    for i in range(ANSWERERS):
        bus.subscribe_number("armor", constant_answerer(i))
        bus.subscribe_bool("visible", constant_answerer(BoolAnswer(i % 2 == 0, True)))
        bus.subscribe_vote("target", str, constant_answerer(VoteAnswer(True, f"unit-{i % 5}", 1)))
    return bus
