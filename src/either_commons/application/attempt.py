"""Application – run a callable and capture its failure in the Left channel."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from either_commons.kernel.errors import require_not_none
from either_commons.kernel.types import Either, Left, Right
from either_commons.observability.logging import get_logger

R = TypeVar("R")

_logger = get_logger(__name__)


def attempt(
    func: Callable[..., R],
    *args: Any,
    catch: tuple[type[BaseException], ...] = (Exception,),
    **kwargs: Any,
) -> Either[BaseException, R]:
    """Call *func* and capture a raised exception in the Left channel.

    Only exceptions that are instances of *catch* are captured; anything else
    propagates to the caller.  A captured exception is logged at debug level.

    Example::

        attempt(int, "42")         # Right(42)
        attempt(int, "forty-two")  # Left(ValueError(...))
    """
    require_not_none(func, "func")
    try:
        result = func(*args, **kwargs)
    except catch as exc:
        _logger.debug(
            "either.attempt.captured",
            func=getattr(func, "__qualname__", repr(func)),
            error_type=type(exc).__name__,
        )
        return Left(exc)
    return Right(result)


__all__ = ["attempt"]
