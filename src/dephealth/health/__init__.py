"""Health – per-dependency checks and status aggregation."""
from dephealth.health.check import DependencyChecker, HealthChecker, LambdaSubCheck, SubCheck
from dephealth.health.component import HealthComponent
from dephealth.health.escalation import determine_status
from dephealth.health.kinds import (
    INFLUX,
    JAEGER,
    KINDS,
    REDIS,
    SENTRY,
    influx_checker,
    jaeger_checker,
    redis_checker,
    sentry_checker,
)
from dephealth.health.probes import HttpPingCheck, RedisPingCheck, join_url, resolve_health_url
from dephealth.health.report import DisplayReport, Report, format_duration, to_display
from dephealth.health.status import Status

__all__ = [
    "INFLUX",
    "JAEGER",
    "KINDS",
    "REDIS",
    "SENTRY",
    "DependencyChecker",
    "DisplayReport",
    "HealthChecker",
    "HealthComponent",
    "HttpPingCheck",
    "LambdaSubCheck",
    "RedisPingCheck",
    "Report",
    "Status",
    "SubCheck",
    "determine_status",
    "format_duration",
    "influx_checker",
    "jaeger_checker",
    "join_url",
    "redis_checker",
    "resolve_health_url",
    "sentry_checker",
    "to_display",
]
