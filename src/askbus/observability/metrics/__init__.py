"""Observability – metrics ports and the no-op backend."""
from askbus.observability.metrics.noop import NoopMetrics
from askbus.observability.metrics.ports import Counter, Histogram, Metrics

__all__ = ["Counter", "Histogram", "Metrics", "NoopMetrics"]
