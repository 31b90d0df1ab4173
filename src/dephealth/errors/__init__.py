"""Error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ProbeError                 (probe.py)
    │   ├── TransportError
    │   │   └── ProbeTimeoutError
    │   ├── UnexpectedStatusError
    │   ├── ContentMismatchError
    │   └── DegradedError
    └── ConfigError                (config.py)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from dephealth.errors.base import BaseError
from dephealth.errors.config import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from dephealth.errors.probe import (
    ContentMismatchError,
    DegradedError,
    ProbeError,
    ProbeTimeoutError,
    TransportError,
    UnexpectedStatusError,
)

__all__ = [
    "BaseError",
    "ConfigError",
    "ContentMismatchError",
    "DegradedError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ProbeError",
    "ProbeTimeoutError",
    "TransportError",
    "UnexpectedStatusError",
]
