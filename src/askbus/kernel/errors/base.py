"""Root error class for the askbus error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of every error askbus raises.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Context such as the query name or the offending setting.
        cause: Original exception that triggered this error.
    """

    default_code: str = "askbus_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Flat key/values for a structlog event: ``log.error("...", **err.log_fields())``."""
        fields: dict[str, Any] = {"error": type(self).__name__, "error_code": self.code}
        fields.update({f"error_{k}": v for k, v in self.detail.items()})
        return fields


__all__ = ["BaseError"]
