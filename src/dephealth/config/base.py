"""Dataclass settings bound to a prefix of environment variables."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Each field ``foo`` is read from ``<_prefix>_FOO``.

    Subclasses override ``_validate`` to reject values that parse but cannot
    be used, such as a zero timeout.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        pass


__all__ = ["Settings"]
