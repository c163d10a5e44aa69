"""Either[L, R] — Left and Right variants."""

from __future__ import annotations

import abc
import dataclasses
from typing import Any, Callable, Generic, TypeVar, final

from either_commons.kernel.errors import InvalidStateError, require_not_none

L = TypeVar("L")
R = TypeVar("R")
U = TypeVar("U")


class Either(abc.ABC, Generic[L, R]):
    """A value that is exactly one of :class:`Left` or :class:`Right`.

    ``Left`` conventionally carries the error / alternative channel and
    ``Right`` the success / primary channel.  Instances never change after
    construction, so they can be shared between threads without locking.

    Every combinator checks its callable arguments *before* looking at the
    variant: ``left(1).map(None)`` raises
    :class:`~either_commons.kernel.errors.NullArgumentError` even though a
    ``Left`` never calls the mapper.

    Usage::

        parsed = right("42").map(int).flat_map(
            lambda n: right(n) if n > 0 else left("must be positive")
        )
        parsed.fold(lambda err: f"error: {err}", lambda n: f"ok: {n}")
    """

    __slots__ = ()

    @abc.abstractmethod
    def is_left(self) -> bool: ...

    @abc.abstractmethod
    def is_right(self) -> bool: ...

    def left(self) -> L:
        """Return the Left payload; raise :class:`InvalidStateError` on a Right."""
        raise InvalidStateError("Not a left", variant=type(self).__name__)

    def right(self) -> R:
        """Return the Right payload; raise :class:`InvalidStateError` on a Left."""
        raise InvalidStateError("Not a right", variant=type(self).__name__)

    @abc.abstractmethod
    def fold(self, left_mapper: Callable[[L], U], right_mapper: Callable[[R], U]) -> U:
        """Collapse both channels into one result; exactly one mapper runs."""

    @abc.abstractmethod
    def map(self, mapper: Callable[[R], U]) -> Either[L, U]: ...

    @abc.abstractmethod
    def map_left(self, mapper: Callable[[L], U]) -> Either[U, R]: ...

    @abc.abstractmethod
    def flat_map(self, mapper: Callable[[R], Either[L, U]]) -> Either[L, U]:
        """Chain a computation that may itself switch to ``Left``."""

    @abc.abstractmethod
    def flat_map_left(self, mapper: Callable[[L], Either[U, R]]) -> Either[U, R]: ...

    @abc.abstractmethod
    def peek(self, action: Callable[[R], Any]) -> Either[L, R]:
        """Run *action* on the Right payload for its side effect; return ``self``."""

    @abc.abstractmethod
    def peek_left(self, action: Callable[[L], Any]) -> Either[L, R]: ...

    @abc.abstractmethod
    def swap(self) -> Either[R, L]: ...

    @abc.abstractmethod
    def left_or(self, default: L) -> L: ...

    @abc.abstractmethod
    def right_or(self, default: R) -> R: ...


@final
@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Left(Either[L, R]):
    """Alternative / error variant."""

    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def left(self) -> L:
        return self.value

    def fold(self, left_mapper: Callable[[L], U], right_mapper: Callable[[R], U]) -> U:
        require_not_none(left_mapper, "left_mapper")
        require_not_none(right_mapper, "right_mapper")
        return left_mapper(self.value)

    def map(self, mapper: Callable[[R], U]) -> Either[L, U]:
        require_not_none(mapper, "mapper")
        return self  # type: ignore[return-value]

    def map_left(self, mapper: Callable[[L], U]) -> Either[U, R]:
        require_not_none(mapper, "mapper")
        return Left(mapper(self.value))

    def flat_map(self, mapper: Callable[[R], Either[L, U]]) -> Either[L, U]:
        require_not_none(mapper, "mapper")
        return self  # type: ignore[return-value]

    def flat_map_left(self, mapper: Callable[[L], Either[U, R]]) -> Either[U, R]:
        require_not_none(mapper, "mapper")
        return mapper(self.value)

    def peek(self, action: Callable[[R], Any]) -> Either[L, R]:
        require_not_none(action, "action")
        return self

    def peek_left(self, action: Callable[[L], Any]) -> Either[L, R]:
        require_not_none(action, "action")
        action(self.value)
        return self

    def swap(self) -> Either[R, L]:
        return Right(self.value)

    def left_or(self, default: L) -> L:  # noqa: ARG002
        return self.value

    def right_or(self, default: R) -> R:
        return default

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@final
@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Right(Either[L, R]):
    """Primary / success variant."""

    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def right(self) -> R:
        return self.value

    def fold(self, left_mapper: Callable[[L], U], right_mapper: Callable[[R], U]) -> U:
        require_not_none(left_mapper, "left_mapper")
        require_not_none(right_mapper, "right_mapper")
        return right_mapper(self.value)

    def map(self, mapper: Callable[[R], U]) -> Either[L, U]:
        require_not_none(mapper, "mapper")
        return Right(mapper(self.value))

    def map_left(self, mapper: Callable[[L], U]) -> Either[U, R]:
        require_not_none(mapper, "mapper")
        return self  # type: ignore[return-value]

    def flat_map(self, mapper: Callable[[R], Either[L, U]]) -> Either[L, U]:
        require_not_none(mapper, "mapper")
        return mapper(self.value)

    def flat_map_left(self, mapper: Callable[[L], Either[U, R]]) -> Either[U, R]:
        require_not_none(mapper, "mapper")
        return self  # type: ignore[return-value]

    def peek(self, action: Callable[[R], Any]) -> Either[L, R]:
        require_not_none(action, "action")
        action(self.value)
        return self

    def peek_left(self, action: Callable[[L], Any]) -> Either[L, R]:
        require_not_none(action, "action")
        return self

    def swap(self) -> Either[R, L]:
        return Left(self.value)

    def left_or(self, default: L) -> L:
        return default

    def right_or(self, default: R) -> R:  # noqa: ARG002
        return self.value

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


def left(value: L) -> Either[L, Any]:
    """Wrap *value* in the Left channel."""
    return Left(value)


def right(value: R) -> Either[Any, R]:
    """Wrap *value* in the Right channel."""
    return Right(value)


__all__ = ["Either", "Left", "Right", "left", "right"]
