"""Contract errors — the caller used the API in a way it does not allow."""

from __future__ import annotations

from typing import Any

from either_commons.kernel.errors.base import BaseError


class ContractError(BaseError):
    """Raised when a caller violates the documented usage contract."""

    default_code = "contract_error"


class InvalidStateError(ContractError, ValueError):
    """An operation was requested on the wrong variant.

    ``variant`` is the name of the variant that actually received the call.
    """

    default_code = "invalid_state"

    def __init__(self, message: str, *, variant: str | None = None, **kwargs: Any) -> None:
        if variant is not None:
            kwargs.setdefault("detail", {"variant": variant})
        super().__init__(message, **kwargs)
        self.variant = variant


class NullArgumentError(ContractError, TypeError):
    """A required callable argument was ``None``."""

    default_code = "null_argument"

    def __init__(self, argument: str, **kwargs: Any) -> None:
        kwargs.setdefault("detail", {"argument": argument})
        super().__init__(f"{argument} is None", **kwargs)
        self.argument = argument


def require_not_none(value: Any, argument: str) -> None:
    """Raise :class:`NullArgumentError` when *value* is ``None``."""
    if value is None:
        raise NullArgumentError(argument)


__all__ = ["ContractError", "InvalidStateError", "NullArgumentError", "require_not_none"]
