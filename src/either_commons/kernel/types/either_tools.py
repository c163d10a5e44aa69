"""Helpers that consume collections of :class:`Either` values."""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from either_commons.kernel.errors import require_not_none
from either_commons.kernel.types.either import Either, Right

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")
U = TypeVar("U")


def sequence(eithers: Iterable[Either[L, R]]) -> Either[L, list[R]]:
    """Collect Right payloads in order; the first Left short-circuits."""
    values: list[R] = []
    for item in eithers:
        if item.is_left():
            return item  # type: ignore[return-value]
        values.append(item.right())
    return Right(values)


def traverse(items: Iterable[T], mapper: Callable[[T], Either[L, U]]) -> Either[L, list[U]]:
    """Map every item through *mapper* and :func:`sequence` the results.

    *mapper* is not called again after it first returns a Left.
    """
    require_not_none(mapper, "mapper")
    return sequence(mapper(item) for item in items)


def partition(eithers: Iterable[Either[L, R]]) -> tuple[list[L], list[R]]:
    """Split into ``(lefts, rights)``, each keeping input order."""
    lefts_: list[L] = []
    rights_: list[R] = []
    for item in eithers:
        if item.is_left():
            lefts_.append(item.left())
        else:
            rights_.append(item.right())
    return lefts_, rights_


def lefts(eithers: Iterable[Either[L, Any]]) -> list[L]:
    return [item.left() for item in eithers if item.is_left()]


def rights(eithers: Iterable[Either[Any, R]]) -> list[R]:
    return [item.right() for item in eithers if item.is_right()]


__all__ = ["lefts", "partition", "rights", "sequence", "traverse"]
