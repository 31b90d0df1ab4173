"""Per-kind checker configuration for the four monitored dependencies.

Every kind is a :class:`DependencyChecker`; only the sub-checks differ.
"""
from __future__ import annotations

from typing import Any

import httpx

from dephealth.health.check import DependencyChecker
from dephealth.health.probes import HttpPingCheck, RedisPingCheck, join_url, resolve_health_url

__all__ = [
    "INFLUX",
    "JAEGER",
    "KINDS",
    "REDIS",
    "SENTRY",
    "influx_checker",
    "jaeger_checker",
    "redis_checker",
    "sentry_checker",
]

INFLUX = "influx"
JAEGER = "jaeger"
REDIS = "redis"
SENTRY = "sentry"

KINDS: tuple[str, ...] = (INFLUX, JAEGER, REDIS, SENTRY)


def influx_checker(
    client: httpx.AsyncClient,
    url: str,
    *,
    enabled: bool = True,
    timeout: float | None = None,
    degraded_after: float | None = None,
) -> DependencyChecker:
    """InfluxDB answers ``/ping`` with ``204 No Content``."""
    ping = HttpPingCheck(
        INFLUX, client, join_url(url, "/ping"), expected_status=204, expected_body=None
    )
    return DependencyChecker(
        INFLUX, [ping], enabled=enabled, timeout=timeout, degraded_after=degraded_after
    )


def jaeger_checker(
    client: httpx.AsyncClient,
    collector_url: str,
    *,
    enabled: bool = True,
    timeout: float | None = None,
    degraded_after: float | None = None,
) -> DependencyChecker:
    """*collector_url* is the collector admin endpoint; ``/`` is its health check."""
    collector = HttpPingCheck(
        JAEGER, client, join_url(collector_url, "/"), name="collector", expected_body=None
    )
    return DependencyChecker(
        JAEGER, [collector], enabled=enabled, timeout=timeout, degraded_after=degraded_after
    )


def redis_checker(
    client: Any,
    *,
    enabled: bool = True,
    timeout: float | None = None,
    degraded_after: float | None = None,
) -> DependencyChecker:
    return DependencyChecker(
        REDIS, [RedisPingCheck(client)], enabled=enabled, timeout=timeout, degraded_after=degraded_after
    )


def sentry_checker(
    client: httpx.AsyncClient,
    store_url: str,
    *,
    enabled: bool = True,
    timeout: float | None = None,
    degraded_after: float | None = None,
) -> DependencyChecker:
    """*store_url* is the event endpoint, e.g. ``https://sentry.io/api/42/store/``.

    Sentry serves ``<base>/_health`` and answers ``ok`` when healthy.
    """
    ping = HttpPingCheck(SENTRY, client, resolve_health_url(store_url), expected_body="ok")
    return DependencyChecker(
        SENTRY, [ping], enabled=enabled, timeout=timeout, degraded_after=degraded_after
    )
