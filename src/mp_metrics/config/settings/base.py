"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    A field ``foo`` of a subclass with ``_prefix = "APP"`` is read from the
    ``APP_FOO`` environment variable.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    @classmethod
    def env_keys(cls) -> dict[str, str]:
        """Map each field name to the environment variable it is read from."""
        prefix = cls._prefix.upper()
        return {
            field.name: f"{prefix}_{field.name}".upper().lstrip("_")
            for field in dataclasses.fields(cls)
        }


__all__ = ["Settings"]
