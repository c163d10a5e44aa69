"""Config – the library's logging settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from either_commons.config.errors import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class EitherSettings:
    """Logging knobs, read from ``EITHER_*`` environment variables.

    ``log_level`` is normalised to upper case on construction.
    """

    prefix: ClassVar[str] = "EITHER"

    log_level: str = "INFO"
    json_logs: bool = True

    def __post_init__(self) -> None:
        level = self.log_level.upper()
        if level not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError(
                "log_level",
                self.log_level,
                allowed=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
            )
        object.__setattr__(self, "log_level", level)

    @property
    def level(self) -> int:
        """Numeric stdlib logging level."""
        return logging.getLevelNamesMapping()[self.log_level]


__all__ = ["EitherSettings"]
