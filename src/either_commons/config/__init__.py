"""Config – logging settings read from the environment."""

from either_commons.config.errors import ConfigError, InvalidSettingValueError
from either_commons.config.loader import EnvSettingsLoader
from either_commons.config.settings import EitherSettings

__all__ = [
    "ConfigError",
    "EitherSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
]
