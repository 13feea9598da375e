"""Tests for grouped k-fold assignment."""

from __future__ import annotations

import pytest

from complex_split.engine.folds import assign_folds
from complex_split.errors import InvalidConfigError


def _assignment(sizes: list[int]) -> dict[str, int]:
    return {f"c{k}_{i}": k for k, size in enumerate(sizes) for i in range(size)}


class TestAssignFolds:
    """Tests for grouped k-fold assignment."""

    def test_component_never_spans_folds(self) -> None:
        """Test all members of a component share one fold."""
        assignment = _assignment([6, 4, 3, 3, 2, 1, 1, 1])
        fold_of = assign_folds(assignment, n_folds=3)
        folds_per_component: dict[int, set[int]] = {}
        for cid, component in assignment.items():
            folds_per_component.setdefault(component, set()).add(fold_of[cid])
        assert all(len(f) == 1 for f in folds_per_component.values())

    def test_every_fold_used_and_in_range(self) -> None:
        """Test fold ids cover 0..k-1."""
        fold_of = assign_folds(_assignment([2, 2, 2, 2, 2]), n_folds=5)
        assert set(fold_of.values()) == {0, 1, 2, 3, 4}

    def test_keeps_input_order(self) -> None:
        """Test result keys follow the input order."""
        assignment = {"z": 1, "a": 2, "m": 1}
        assert list(assign_folds(assignment, n_folds=2)) == ["z", "a", "m"]

    def test_too_many_folds(self) -> None:
        """Test more folds than components is rejected."""
        with pytest.raises(InvalidConfigError, match="number of components"):
            assign_folds(_assignment([3, 3]), n_folds=3)

    @pytest.mark.parametrize("n_folds", [1, 0, True])
    def test_invalid_fold_count(self, n_folds: int) -> None:
        """Test fold counts below 2 and booleans are rejected."""
        with pytest.raises(InvalidConfigError, match="n_folds"):
            assign_folds(_assignment([1, 1, 1]), n_folds=n_folds)
