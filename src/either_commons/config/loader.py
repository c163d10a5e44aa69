"""Config – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
from typing import Any, Mapping, TypeVar

from either_commons.config.errors import ConfigError, InvalidSettingValueError
from either_commons.config.settings import EitherSettings

T = TypeVar("T")

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


class EnvSettingsLoader:
    """Build a settings dataclass from ``<PREFIX>_<FIELD>`` variables.

    Fields may be ``str`` or ``bool``; absent variables keep the field default.
    Booleans accept only the spellings in ``_TRUE``/``_FALSE`` so a typo such
    as ``EITHER_JSON_LOGS=flase`` fails loudly instead of reading as false.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T] = EitherSettings) -> T:  # type: ignore[assignment]
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "prefix", "")
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper()
            raw = environ.get(env_key)
            if raw is not None:
                kwargs[field.name] = self._coerce(env_key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}", cause=exc) from exc

    @staticmethod
    def _coerce(env_key: str, raw: str, type_hint: Any) -> Any:
        if type_hint in (bool, "bool"):
            token = raw.strip().lower()
            if token in _TRUE:
                return True
            if token in _FALSE:
                return False
            raise InvalidSettingValueError(env_key, raw, allowed=_TRUE + _FALSE)
        if type_hint in (str, "str"):
            return raw.strip()
        raise ConfigError(f"{env_key}: unsupported setting type {type_hint!r}")


__all__ = ["EnvSettingsLoader"]
