"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError      (application.py)
        ├── QueryError
        │   ├── InvalidAnswerError
        │   └── NoAnswererError
        └── ConfigError       (askbus.config.validation)
"""

from askbus.kernel.errors.application import (
    ApplicationError,
    InvalidAnswerError,
    NoAnswererError,
    QueryError,
)
from askbus.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "InvalidAnswerError",
    "NoAnswererError",
    "QueryError",
]
