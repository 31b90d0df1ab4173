"""Wire a :class:`HealthComponent` from :class:`HealthSettings`."""
from __future__ import annotations

from contextlib import AsyncExitStack, asynccontextmanager
from typing import Any, AsyncIterator

import httpx
import redis.asyncio as aioredis

from dephealth.config import HealthSettings
from dephealth.health.component import HealthComponent
from dephealth.health.kinds import influx_checker, jaeger_checker, redis_checker, sentry_checker
from dephealth.observability.logging import get_logger

__all__ = ["build_component", "open_component"]

logger = get_logger(__name__)


def build_component(
    settings: HealthSettings,
    *,
    http_client: httpx.AsyncClient,
    redis_client: Any,
) -> HealthComponent:
    """Build the four checkers around caller-owned clients."""
    common: dict[str, Any] = {
        "timeout": settings.timeout_seconds,
        "degraded_after": settings.degraded_after,
    }
    return HealthComponent(
        influx=influx_checker(http_client, settings.influx_url, enabled=settings.influx_enabled, **common),
        jaeger=jaeger_checker(
            http_client, settings.jaeger_collector_url, enabled=settings.jaeger_enabled, **common
        ),
        redis=redis_checker(redis_client, enabled=settings.redis_enabled, **common),
        sentry=sentry_checker(http_client, settings.sentry_url, enabled=settings.sentry_enabled, **common),
    )


@asynccontextmanager
async def open_component(settings: HealthSettings) -> AsyncIterator[HealthComponent]:
    """Create the HTTP and Redis clients, yield the component, close the clients.

    Usage::

        async with open_component(EnvSettingsLoader().load(HealthSettings)) as health:
            statuses = await health.all_health_checks()
    """
    async with AsyncExitStack() as stack:
        http_client = httpx.AsyncClient(timeout=settings.timeout_seconds)
        stack.push_async_callback(http_client.aclose)
        redis_client = aioredis.Redis.from_url(
            settings.redis_url,
            socket_timeout=settings.timeout_seconds,
            socket_connect_timeout=settings.timeout_seconds,
        )
        stack.push_async_callback(redis_client.aclose)
        logger.debug(
            "health_component_opened",
            influx=settings.influx_enabled,
            jaeger=settings.jaeger_enabled,
            redis=settings.redis_enabled,
            sentry=settings.sentry_enabled,
        )
        yield build_component(settings, http_client=http_client, redis_client=redis_client)
