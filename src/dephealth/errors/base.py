"""Root of the dephealth error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Error carrying a stable ``code`` next to its human-readable message.

    Checkers log ``to_dict()`` when a dependency fails, so ``code`` and
    ``detail`` end up as fields of the ``health_check_failed`` record.

    Args:
        message: Text shown in reports.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Structured context such as an HTTP status or a setting name.
        cause: Lower-level exception, also chained as ``__cause__``.
    """

    default_code: str = "dephealth_error"

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
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Flatten into log-friendly fields."""
        payload: dict[str, Any] = {
            "error": self.message,
            "error_type": type(self).__name__,
            "code": self.code,
        }
        if self.detail:
            payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
