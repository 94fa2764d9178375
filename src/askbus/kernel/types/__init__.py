"""Kernel value types."""
from askbus.kernel.types.outcome import Answered, QueryOutcome, Unanswered

__all__ = ["Answered", "QueryOutcome", "Unanswered"]
