"""Config settings – Settings base class and ProfileSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from profile_es.config.validation import InvalidSettingValueError

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ProfileSettings(Settings):
    """Runtime settings, read from ``PROFILE_*`` environment variables.

    ``snapshot_every`` of 0 disables threshold snapshots; explicit
    snapshots still work.
    """

    _prefix: ClassVar[str] = "PROFILE"

    log_level: str = "INFO"
    json_logs: bool = True
    snapshot_every: int = 0
    redact_fields: list[str] = dataclasses.field(default_factory=lambda: ["email_address"])

    def _validate(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )
        if self.snapshot_every < 0:
            raise InvalidSettingValueError("snapshot_every", self.snapshot_every, "must be >= 0")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["ProfileSettings", "Settings"]
