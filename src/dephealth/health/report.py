from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from dephealth.health.status import Status

__all__ = ["DisplayReport", "Report", "format_duration", "to_display"]

_MICROSECOND = timedelta(microseconds=1)
_US_PER_MS = 1_000
_US_PER_S = 1_000_000
_US_PER_MIN = 60 * _US_PER_S
_US_PER_H = 60 * _US_PER_MIN


@dataclass(frozen=True)
class Report:
    """Result of one sub-check run, as produced by a checker."""

    name: str
    duration: timedelta
    status: Status
    error: BaseException | None = None


@dataclass(frozen=True)
class DisplayReport:
    """String-rendered projection of a :class:`Report`."""

    name: str
    duration: str
    status: str
    error: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "duration": self.duration,
            "status": self.status,
            "error": self.error,
        }


def _trim(value: float) -> str:
    return f"{value:.6f}".rstrip("0").rstrip(".")


def format_duration(duration: timedelta) -> str:
    """Render *duration* the way Go's ``time.Duration`` prints.

    ``0s``, ``250µs``, ``1.5ms``, ``2.5s``, ``1m2s``, ``1h0m0s``.
    """
    micros = duration // _MICROSECOND
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    if micros < _US_PER_MS:
        return f"{sign}{micros}µs"
    if micros < _US_PER_S:
        return f"{sign}{_trim(micros / _US_PER_MS)}ms"

    hours, rest = divmod(micros, _US_PER_H)
    minutes, rest = divmod(rest, _US_PER_MIN)
    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return f"{out}{_trim(rest / _US_PER_S)}s"


def to_display(report: Report) -> DisplayReport:
    return DisplayReport(
        name=report.name,
        duration=format_duration(report.duration),
        status=Status.render(report.status),
        error="" if report.error is None else str(report.error),
    )
