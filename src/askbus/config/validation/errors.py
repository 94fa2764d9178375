"""Errors raised while loading or validating bus settings."""
from __future__ import annotations

from askbus.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded from the environment or failed validation."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """An ``ASKBUS_*`` variable (or constructor argument) holds an unusable value."""
    default_code = "invalid_setting_value"

    def __init__(self, settings_class: type, env_key: str, value: object, reason: str) -> None:
        super().__init__(
            f"{settings_class.__name__}: {env_key}={value!r} rejected, {reason}",
            detail={"settings": settings_class.__name__, "env_key": env_key},
        )
        self.settings_class = settings_class
        self.env_key = env_key
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
