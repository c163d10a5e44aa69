"""Unit tests for Either collection helpers."""

from __future__ import annotations

import pytest

from either_commons.kernel.errors import NullArgumentError
from either_commons.kernel.types import (
    Either,
    left,
    lefts,
    partition,
    right,
    rights,
    sequence,
    traverse,
)


# ---------------------------------------------------------------------------
# sequence / traverse
# ---------------------------------------------------------------------------


class TestSequence:
    def test_all_right(self) -> None:
        assert sequence([right(1), right(2), right(3)]) == right([1, 2, 3])

    def test_first_left_wins(self) -> None:
        assert sequence([right(1), left("a"), left("b")]) == left("a")

    def test_empty_is_right_empty_list(self) -> None:
        assert sequence([]) == right([])

    def test_stops_consuming_after_left(self) -> None:
        consumed: list[int] = []

        def gen():
            for i in range(5):
                consumed.append(i)
                yield left(i) if i == 1 else right(i)

        assert sequence(gen()) == left(1)
        assert consumed == [0, 1]


class TestTraverse:
    @staticmethod
    def _positive(n: int) -> Either[str, int]:
        return right(n) if n > 0 else left(f"{n} is not positive")

    def test_all_valid(self) -> None:
        assert traverse([1, 2, 3], self._positive) == right([1, 2, 3])

    def test_first_failure_reported(self) -> None:
        assert traverse([1, -2, 0], self._positive) == left("-2 is not positive")

    def test_none_mapper_raises_even_for_empty_input(self) -> None:
        with pytest.raises(NullArgumentError):
            traverse([], None)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# partition / lefts / rights
# ---------------------------------------------------------------------------


class TestPartition:
    def test_splits_preserving_order(self) -> None:
        items = [right(1), left("a"), right(2), left("b")]
        assert partition(items) == (["a", "b"], [1, 2])

    def test_lefts(self) -> None:
        assert lefts([right(1), left("a"), left("b")]) == ["a", "b"]

    def test_rights(self) -> None:
        assert rights([right(1), left("a"), right(2)]) == [1, 2]

    def test_empty(self) -> None:
        assert partition([]) == ([], [])
