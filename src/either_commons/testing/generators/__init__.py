"""Testing generators – property-based test data."""
from either_commons.testing.generators.strategies import (
    either_strategy,
    left_strategy,
    right_strategy,
)

__all__ = ["either_strategy", "left_strategy", "right_strategy"]
