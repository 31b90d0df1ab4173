"""Config settings – HealthSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from dephealth.config.base import Settings
from dephealth.errors import InvalidSettingValueError


@dataclasses.dataclass
class HealthSettings(Settings):
    """Endpoints and switches for the four monitored dependencies.

    Loaded from ``HEALTH_*`` environment variables, e.g. ``HEALTH_SENTRY_URL``
    or ``HEALTH_REDIS_ENABLED=false``.
    """

    _prefix: ClassVar[str] = "HEALTH"

    influx_url: str = "http://localhost:8086"
    influx_enabled: bool = True
    jaeger_collector_url: str = "http://localhost:14269"
    jaeger_enabled: bool = True
    redis_url: str = "redis://localhost:6379/0"
    redis_enabled: bool = True
    sentry_url: str = ""
    sentry_enabled: bool = True
    timeout_seconds: float = 5.0
    # 0 disables latency-based degradation
    degraded_after_seconds: float = 0.0

    def _validate(self) -> None:
        if self.timeout_seconds <= 0:
            raise InvalidSettingValueError(
                "timeout_seconds", self.timeout_seconds, "must be positive"
            )
        if self.degraded_after_seconds < 0:
            raise InvalidSettingValueError(
                "degraded_after_seconds", self.degraded_after_seconds, "must not be negative"
            )

    @property
    def degraded_after(self) -> float | None:
        return self.degraded_after_seconds or None


__all__ = ["HealthSettings"]
