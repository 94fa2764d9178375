"""Observability – structured logging helpers."""
from askbus.observability.logging.factory import LoggerFactory, configure_logging
from askbus.observability.logging.processors import get_logger

__all__ = ["LoggerFactory", "configure_logging", "get_logger"]
