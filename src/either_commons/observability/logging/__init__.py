"""Observability – structured logging helpers."""
from either_commons.observability.logging.protocol import Logger
from either_commons.observability.logging.factory import JsonLoggerFactory
from either_commons.observability.logging.processors import get_logger

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "get_logger",
]
