"""Testing support – fakes and Hypothesis generators.

Hypothesis strategies need the ``test`` extra installed.
"""

from askbus.testing.fakes import FakeCounter, FakeHistogram, FakeMetrics
from askbus.testing.generators import (
    answerers_strategy,
    bool_answer_strategy,
    constant_answerer,
    vote_answer_strategy,
)

__all__ = [
    "FakeCounter",
    "FakeHistogram",
    "FakeMetrics",
    "answerers_strategy",
    "bool_answer_strategy",
    "constant_answerer",
    "vote_answer_strategy",
]
