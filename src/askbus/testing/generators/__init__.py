"""Testing generators – property-based strategies."""
from askbus.testing.generators.strategies import (
    answerers_strategy,
    bool_answer_strategy,
    constant_answerer,
    vote_answer_strategy,
)

__all__ = [
    "answerers_strategy",
    "bool_answer_strategy",
    "constant_answerer",
    "vote_answer_strategy",
]
