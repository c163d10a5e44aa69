"""Kernel value types — public re-export surface.

Standard library only; ``either_commons.application.attempt`` is the
logging-aware counterpart that lives outside the kernel.

Modules:
  either.py       — Either, Left, Right, left, right
  either_tools.py — sequence, traverse, partition, lefts, rights
"""

from either_commons.kernel.types.either import Either, Left, Right, left, right
from either_commons.kernel.types.either_tools import (
    lefts,
    partition,
    rights,
    sequence,
    traverse,
)

__all__ = [
    "Either",
    "Left",
    "Right",
    "left",
    "lefts",
    "partition",
    "right",
    "rights",
    "sequence",
    "traverse",
]
