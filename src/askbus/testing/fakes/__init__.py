"""Testing fakes – in-memory doubles for observability ports."""
from askbus.testing.fakes.metrics import FakeCounter, FakeHistogram, FakeMetrics

__all__ = ["FakeCounter", "FakeHistogram", "FakeMetrics"]
