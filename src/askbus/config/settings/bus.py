"""Config settings – QueryBusSettings."""
from __future__ import annotations

import dataclasses
import logging

from askbus.config.settings.base import Settings
from askbus.config.validation import InvalidSettingValueError

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class QueryBusSettings(Settings):
    """Knobs for a :class:`~askbus.application.query.QueryBus` deployment.

    Read from ``ASKBUS_THREAD_SAFE``, ``ASKBUS_LOG_QUERIES``,
    ``ASKBUS_LOG_LEVEL`` and ``ASKBUS_JSON_LOGS`` by :class:`EnvSettingsLoader`.
    """

    _prefix = "ASKBUS"

    thread_safe: bool = True
    log_queries: bool = False
    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVELS:
            raise InvalidSettingValueError(
                type(self),
                self.env_key("log_level"),
                self.log_level,
                f"expected one of {', '.join(_LEVELS)}",
            )

    @property
    def level(self) -> int:
        """``log_level`` as a stdlib :mod:`logging` level number."""
        return logging.getLevelName(self.log_level)


__all__ = ["QueryBusSettings"]
