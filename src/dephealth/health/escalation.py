from __future__ import annotations

from typing import Iterable

from dephealth.health.report import DisplayReport
from dephealth.health.status import Status

__all__ = ["determine_status"]


def determine_status(reports: Iterable[DisplayReport]) -> str:
    """Fold the reports of one dependency kind into a single status.

    ``Deactivated`` wins over ``KO``, which wins over ``Degraded``, which
    wins over ``OK``, whatever the order of *reports*. An empty sequence
    is ``OK``.
    """
    ko = False
    degraded = False
    for report in reports:
        if report.status == Status.DEACTIVATED.label:
            return Status.DEACTIVATED.label
        # KO keeps scanning: a later Deactivated still takes precedence
        if report.status == Status.KO.label:
            ko = True
        elif report.status == Status.DEGRADED.label:
            degraded = True
    if ko:
        return Status.KO.label
    if degraded:
        return Status.DEGRADED.label
    return Status.OK.label
