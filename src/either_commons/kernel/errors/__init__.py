"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ContractError        (contract.py)
    │   ├── InvalidStateError
    │   └── NullArgumentError
    └── ApplicationError     (application.py)
"""

from either_commons.kernel.errors.application import ApplicationError
from either_commons.kernel.errors.base import BaseError
from either_commons.kernel.errors.contract import (
    ContractError,
    InvalidStateError,
    NullArgumentError,
    require_not_none,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ContractError",
    "InvalidStateError",
    "NullArgumentError",
    "require_not_none",
]
