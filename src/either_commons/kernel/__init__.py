"""Kernel – framework-agnostic building blocks."""

from either_commons.kernel.errors import (
    ApplicationError,
    BaseError,
    ContractError,
    InvalidStateError,
    NullArgumentError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ContractError",
    "InvalidStateError",
    "NullArgumentError",
]
