"""Config errors."""
from __future__ import annotations

from typing import Any

from either_commons.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be read from the environment."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value is not one of the accepted ones.

    ``allowed`` lists the accepted spellings, when the set is closed.
    """

    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        *,
        allowed: tuple[str, ...] = (),
        **kwargs: Any,
    ) -> None:
        message = f"{setting_name}={value!r} is not accepted"
        if allowed:
            message += f" (expected one of: {', '.join(allowed)})"
        kwargs.setdefault("detail", {"setting": setting_name, "allowed": list(allowed)})
        super().__init__(message, **kwargs)
        self.setting_name = setting_name
        self.value = value
        self.allowed = allowed


__all__ = ["ConfigError", "InvalidSettingValueError"]
