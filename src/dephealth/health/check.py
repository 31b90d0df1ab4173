from __future__ import annotations

import asyncio
import time
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Awaitable, Callable, Protocol, Sequence, runtime_checkable

from dephealth.errors import DegradedError, ProbeError, ProbeTimeoutError
from dephealth.health.report import Report, format_duration
from dephealth.health.status import Status
from dephealth.observability.logging import get_logger

__all__ = ["DependencyChecker", "HealthChecker", "LambdaSubCheck", "SubCheck"]

logger = get_logger(__name__)


@runtime_checkable
class HealthChecker(Protocol):
    """Anything that can report on the health of one dependency."""

    async def health_checks(self) -> list[Report]: ...


class SubCheck(ABC):
    """One named probe against a dependency."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    async def probe(self) -> None:
        """Return when healthy, raise :class:`ProbeError` otherwise."""


class LambdaSubCheck(SubCheck):
    """Sub-check backed by an async callable, useful in tests."""

    def __init__(self, name_: str, fn: Callable[[], Awaitable[None]]) -> None:
        self._name = name_
        self._fn = fn

    @property
    def name(self) -> str:
        return self._name

    async def probe(self) -> None:
        await self._fn()


class DependencyChecker:
    """Runs the sub-checks of one dependency kind and reports on each.

    A disabled checker reports every sub-check as ``DEACTIVATED`` without
    probing. An enabled checker never raises for a failed probe: the failure
    is captured into the report.

    Args:
        kind: Dependency kind name, e.g. ``"sentry"``.
        sub_checks: Probes to run, in report order.
        enabled: ``False`` deactivates every sub-check.
        timeout: Per-probe deadline in seconds.
        degraded_after: Latency in seconds above which a passing probe is
            reported ``DEGRADED``.
    """

    def __init__(
        self,
        kind: str,
        sub_checks: Sequence[SubCheck],
        *,
        enabled: bool = True,
        timeout: float | None = None,
        degraded_after: float | None = None,
    ) -> None:
        self._kind = kind
        self._checks = list(sub_checks)
        self._enabled = enabled
        self._timeout = timeout
        self._degraded_after = degraded_after

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def enabled(self) -> bool:
        return self._enabled

    async def health_checks(self) -> list[Report]:
        return [await self._run(check) for check in self._checks]

    async def _run(self, check: SubCheck) -> Report:
        if not self._enabled:
            return Report(name=check.name, duration=timedelta(0), status=Status.DEACTIVATED)

        error: ProbeError | None = None
        start = time.monotonic()
        try:
            if self._timeout is None:
                await check.probe()
            else:
                await asyncio.wait_for(check.probe(), timeout=self._timeout)
        except ProbeError as exc:
            error = exc
        except asyncio.TimeoutError as exc:
            error = ProbeTimeoutError(self._kind, exc, timeout=self._timeout)
        except Exception as exc:  # noqa: BLE001
            error = ProbeError(f"{self._kind} {check.name} check crashed: {exc!r}", cause=exc)
        duration = timedelta(seconds=time.monotonic() - start)

        if error is None and self._degraded_after is not None:
            threshold = timedelta(seconds=self._degraded_after)
            if duration > threshold:
                error = DegradedError(
                    f"{self._kind} answered in {format_duration(duration)}, "
                    f"above {format_duration(threshold)}"
                )

        if error is None:
            status = Status.OK
        elif isinstance(error, DegradedError):
            status = Status.DEGRADED
        else:
            status = Status.KO

        log = logger.bind(
            kind=self._kind,
            check=check.name,
            status=str(status),
            duration=format_duration(duration),
        )
        if error is None:
            log.debug("health_check_completed")
        else:
            log.warning("health_check_failed", **error.to_dict())

        return Report(name=check.name, duration=duration, status=status, error=error)
