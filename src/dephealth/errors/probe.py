"""Probe errors: why a sub-check did not pass.

None of these escape a checker: they are captured into ``Report.error``.
"""

from __future__ import annotations

from typing import Any

from dephealth.errors.base import BaseError


class ProbeError(BaseError):
    """A sub-check found its dependency unhealthy."""

    default_code = "check_failed"


class TransportError(ProbeError):
    """The dependency could not be reached (connection refused, DNS, TLS, …)."""

    default_code = "transport_failure"

    def __init__(
        self,
        service: str,
        cause: BaseException,
        *,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"could not ping {service}: {reason if reason is not None else cause}",
            cause=cause,
            **kwargs,
        )
        self.service = service


class ProbeTimeoutError(TransportError):
    """The probe did not complete before its deadline."""

    default_code = "check_timeout"

    def __init__(
        self,
        service: str,
        cause: BaseException,
        *,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> None:
        reason = "timed out" if timeout is None else f"timed out after {timeout}s"
        super().__init__(service, cause, reason=reason, **kwargs)
        self.timeout = timeout


class UnexpectedStatusError(ProbeError):
    """The dependency answered with a non-success HTTP status."""

    default_code = "unexpected_status"

    def __init__(
        self,
        service: str,
        status_code: int,
        reason: str = "",
        **kwargs: Any,
    ) -> None:
        status = f"{status_code} {reason}".rstrip()
        super().__init__(
            f"could not ping {service}: http response status code: {status}",
            detail={"status_code": status_code},
            **kwargs,
        )
        self.service = service
        self.status_code = status_code


class ContentMismatchError(ProbeError):
    """The dependency answered, but not with the expected sentinel body."""

    default_code = "content_mismatch"

    def __init__(self, service: str, expected: str, actual: str, **kwargs: Any) -> None:
        super().__init__(
            f"could not ping {service}: response should be '{expected}' but is: {actual}",
            **kwargs,
        )
        self.service = service
        self.expected = expected
        self.actual = actual


class DegradedError(ProbeError):
    """The dependency works but not within acceptable bounds."""

    default_code = "degraded"


__all__ = [
    "ContentMismatchError",
    "DegradedError",
    "ProbeError",
    "ProbeTimeoutError",
    "TransportError",
    "UnexpectedStatusError",
]
