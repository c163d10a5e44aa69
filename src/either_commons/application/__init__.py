"""Application – helpers that combine Either values with logging."""

from either_commons.application.attempt import attempt

__all__ = ["attempt"]
