from __future__ import annotations

import asyncio

from dephealth.health.check import HealthChecker
from dephealth.health.escalation import determine_status
from dephealth.health.kinds import INFLUX, JAEGER, REDIS, SENTRY
from dephealth.health.report import DisplayReport, to_display
from dephealth.health.status import Status
from dephealth.observability.logging import get_logger

__all__ = ["HealthComponent"]

logger = get_logger(__name__)


class HealthComponent:
    """Aggregates the health of influx, jaeger, redis and sentry.

    None of the methods raise for an unhealthy dependency: failures are
    reported as ``KO`` entries.
    """

    def __init__(
        self,
        influx: HealthChecker,
        jaeger: HealthChecker,
        redis: HealthChecker,
        sentry: HealthChecker,
    ) -> None:
        self._checkers: dict[str, HealthChecker] = {
            INFLUX: influx,
            JAEGER: jaeger,
            REDIS: redis,
            SENTRY: sentry,
        }

    @property
    def kinds(self) -> tuple[str, ...]:
        return tuple(self._checkers)

    async def influx_health_checks(self) -> list[DisplayReport]:
        return await self._health_checks(INFLUX)

    async def jaeger_health_checks(self) -> list[DisplayReport]:
        return await self._health_checks(JAEGER)

    async def redis_health_checks(self) -> list[DisplayReport]:
        return await self._health_checks(REDIS)

    async def sentry_health_checks(self) -> list[DisplayReport]:
        return await self._health_checks(SENTRY)

    async def all_health_checks(self) -> dict[str, str]:
        """Run every kind concurrently and return its overall status."""
        kinds = self.kinds
        results = await asyncio.gather(*(self._health_checks(kind) for kind in kinds))
        return {kind: determine_status(reports) for kind, reports in zip(kinds, results)}

    async def _health_checks(self, kind: str) -> list[DisplayReport]:
        try:
            reports = await self._checkers[kind].health_checks()
            return [to_display(report) for report in reports]
        except Exception as exc:  # noqa: BLE001
            logger.exception("health_checker_crashed", kind=kind)
            return [
                DisplayReport(
                    name="health_checks",
                    duration="0s",
                    status=Status.KO.label,
                    error=f"exception: {exc}",
                )
            ]
