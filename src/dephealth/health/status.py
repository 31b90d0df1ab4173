from __future__ import annotations

from enum import IntEnum
from typing import Any

__all__ = ["Status"]

UNKNOWN = "Unknown"


class Status(IntEnum):
    """Outcome of a sub-check.

    The values are identifiers, not magnitudes. Escalation precedence is
    ``DEACTIVATED > KO > DEGRADED > OK`` (see ``escalation``).
    """

    OK = 0
    KO = 1
    # still usable, but slow or partially failing
    DEGRADED = 2
    # the check was bypassed by configuration, nothing was probed
    DEACTIVATED = 3

    @property
    def label(self) -> str:
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label

    @classmethod
    def render(cls, value: Any) -> str:
        """Return the label of *value*, or ``"Unknown"`` when out of range.

        Only integers are accepted: ``True`` or ``2.0`` are not statuses.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            return UNKNOWN
        try:
            return cls(value).label
        except ValueError:
            return UNKNOWN


_LABELS = {
    Status.OK: "OK",
    Status.KO: "KO",
    Status.DEGRADED: "Degraded",
    Status.DEACTIVATED: "Deactivated",
}
