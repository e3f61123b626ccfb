"""Config settings – Settings base class and LoggingSettings."""
from __future__ import annotations

import dataclasses

from mp_option.config.validation import InvalidSettingValueError

_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Logging setup read from ``MP_OPTION_LOG_LEVEL`` / ``MP_OPTION_LOG_JSON``."""

    _prefix: dataclasses.ClassVar[str] = "MP_OPTION_LOG"

    level: str = "INFO"
    json: bool = True

    def _validate(self) -> None:
        self.level = self.level.upper()
        if self.level not in _LEVELS:
            raise InvalidSettingValueError(
                "level", self.level, f"expected one of {sorted(_LEVELS)}"
            )


__all__ = ["LoggingSettings", "Settings"]
