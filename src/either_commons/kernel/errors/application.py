"""Application errors — failures outside the core value types."""

from __future__ import annotations

from either_commons.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Raised by the library's supporting layers (configuration, wiring)."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
