"""Built-in sub-checks: HTTP ping with sentinel body, Redis PING."""
from __future__ import annotations

from typing import Any

import httpx
import redis.exceptions

from dephealth.errors import (
    ContentMismatchError,
    ProbeTimeoutError,
    TransportError,
    UnexpectedStatusError,
)
from dephealth.health.check import SubCheck

__all__ = [
    "HttpPingCheck",
    "RedisPingCheck",
    "join_url",
    "resolve_health_url",
]


def resolve_health_url(endpoint: str, marker: str = "/api/", suffix: str = "/_health") -> str:
    """Derive a health URL from *endpoint*.

    The endpoint is cut at the last occurrence of *marker* and *suffix* is
    appended: ``https://sentry.io/api/42/`` gives ``https://sentry.io/_health``.
    Without the marker the result is ``""``; the probe then fails like any
    unreachable endpoint.
    """
    idx = endpoint.rfind(marker)
    if idx == -1:
        return ""
    return f"{endpoint[:idx]}{suffix}"


def join_url(base: str, path: str) -> str:
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


class HttpPingCheck(SubCheck):
    """GET a health URL and compare status code and, optionally, the body.

    The response is streamed inside an ``async with`` block, so the
    connection is released on every exit path.
    """

    def __init__(
        self,
        service: str,
        client: httpx.AsyncClient,
        url: str,
        *,
        name: str = "ping",
        expected_status: int = 200,
        expected_body: str | None = "ok",
    ) -> None:
        self._service = service
        self._client = client
        self._url = url
        self._name = name
        self._expected_status = expected_status
        self._expected_body = expected_body

    @property
    def name(self) -> str:
        return self._name

    @property
    def url(self) -> str:
        return self._url

    async def probe(self) -> None:
        try:
            async with self._client.stream("GET", self._url) as response:
                if response.status_code != self._expected_status:
                    raise UnexpectedStatusError(
                        self._service, response.status_code, response.reason_phrase
                    )
                if self._expected_body is None:
                    return
                body = await _read_prefix(response, len(self._expected_body.encode()) + 1)
        except httpx.TimeoutException as exc:
            raise ProbeTimeoutError(self._service, exc) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(self._service, exc) from exc

        if body != self._expected_body:
            raise ContentMismatchError(self._service, self._expected_body, body)


async def _read_prefix(response: httpx.Response, limit: int) -> str:
    """Decode at most ``limit`` bytes of the body, leaving the rest unread."""
    buffer = bytearray()
    async for chunk in response.aiter_bytes():
        buffer.extend(chunk)
        if len(buffer) >= limit:
            break
    return bytes(buffer[:limit]).decode(response.encoding or "utf-8", errors="replace")


class RedisPingCheck(SubCheck):
    """Send ``PING`` through a ``redis.asyncio`` client."""

    def __init__(self, client: Any, *, name: str = "ping", service: str = "redis") -> None:
        self._client = client
        self._name = name
        self._service = service

    @property
    def name(self) -> str:
        return self._name

    async def probe(self) -> None:
        try:
            reply = await self._client.ping()
        except redis.exceptions.TimeoutError as exc:
            raise ProbeTimeoutError(self._service, exc) from exc
        except (redis.exceptions.RedisError, OSError) as exc:
            raise TransportError(self._service, exc) from exc
        if not reply:
            raise ContentMismatchError(self._service, "PONG", repr(reply))
