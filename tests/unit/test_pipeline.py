"""Tests for the end-to-end split pipeline."""

from __future__ import annotations

import logging

import pytest

from complex_split.core.complex import Complex, Split
from complex_split.engine.allocator import SplitConfig
from complex_split.engine.pipeline import SplitPipeline
from complex_split.errors import EmptyComplexError, OutOfRangeError

# Antibody-antigen style complexes (heavy, light, antigen). Shared antigen
# clusters tie complexes together; 1KB5 is a lone monomer.
COMPLEXES: dict[str, list[int]] = {
    "1A2Y": [0, 1, 2],
    "1FDL": [3, 4, 2],
    "2VIR": [5, 6, 7],
    "3HFM": [8, 9, 2],
    "1MLC": [10, 11, 2],
    "1VFB": [12, 13, 7],
    "1JRH": [14, 15, 16],
    "1NCA": [17, 18, 19],
    "1NMB": [20, 21, 19],
    "1OSP": [22, 23, 24],
    "2JEL": [25, 26, 27],
    "1BQL": [28, 29, 30],
    "1DQJ": [31, 32, 30],
    "1G7H": [33, 34, 30],
    "1MHP": [35, 36, 37],
    "1KB5": [38],
    "1JPS": [39, 40, 41],
    "1AHW": [42, 43, 41],
    "1EO8": [44, 45, 46],
    "2HMI": [47, 48, 49],
}


@pytest.mark.parametrize("engine", ["relabel", "compressed"])
class TestSplitPipeline:
    """Tests for SplitPipeline with each engine."""

    def test_components_follow_shared_clusters(self, engine: str) -> None:
        """Test shared antigen clusters tie complexes together."""
        result = SplitPipeline(SplitConfig(engine=engine)).components(COMPLEXES)
        a = result.assignment
        assert a["1A2Y"] == a["1FDL"] == a["3HFM"] == a["1MLC"]
        assert a["2VIR"] == a["1VFB"]
        assert a["1BQL"] == a["1DQJ"] == a["1G7H"]
        assert a["1KB5"] != a["1A2Y"]
        assert len(result.components) == 12
        assert result.universe_size == 50
        assert result.pair_count == 38
        assert result.merges == 38

    def test_run_respects_components(self, engine: str) -> None:
        """Test no component is split across splits."""
        result = SplitPipeline(SplitConfig(engine=engine)).run(COMPLEXES)
        membership = result.split.membership
        assert set(membership) == set(COMPLEXES)
        for members in result.components.components.values():
            assert len({membership[m] for m in members}) == 1
        assert result.leakage is not None and result.leakage.ok

    def test_largest_component_lands_in_train(self, engine: str) -> None:
        """Test the largest component goes to train."""
        result = SplitPipeline(SplitConfig(engine=engine)).run(COMPLEXES)
        assert result.split.membership["1A2Y"] is Split.TRAIN


class TestSplitPipelineBehaviour:
    """Tests for pipeline options and outputs."""

    def test_engines_give_same_split(self) -> None:
        """Test both engines produce identical splits."""
        relabel = SplitPipeline(SplitConfig(engine="relabel")).run(COMPLEXES)
        compressed = SplitPipeline(SplitConfig(engine="compressed")).run(COMPLEXES)
        assert relabel.split.membership == compressed.split.membership

    def test_reproducible(self) -> None:
        """Test repeated runs agree."""
        first = SplitPipeline().run(COMPLEXES)
        second = SplitPipeline().run(COMPLEXES)
        assert first.components.assignment == second.components.assignment
        assert first.split.membership == second.split.membership

    def test_accepts_complex_objects(self) -> None:
        """Test Complex objects are accepted as input."""
        items = [Complex.create("AB", [0, 1]), Complex.create("BC", [1, 2])]
        result = SplitPipeline().components(items)
        assert result.assignment["AB"] == result.assignment["BC"]

    def test_verify_disabled(self) -> None:
        """Test the leakage check can be skipped."""
        result = SplitPipeline(SplitConfig(verify=False)).run(COMPLEXES)
        assert result.leakage is None
        assert "leakage" not in result.summary()

    def test_summary(self) -> None:
        """Test the run summary totals."""
        summary = SplitPipeline().run(COMPLEXES).summary()
        assert summary["total"] == 20
        assert summary["universe_size"] == 50
        assert summary["leakage"]["ok"] is True
        assert sum(s["complexes"] for s in summary["splits"].values()) == 20

    def test_negative_cluster_id(self) -> None:
        """Test negative cluster ids are rejected."""
        with pytest.raises(OutOfRangeError):
            SplitPipeline().run({"A": [0, -3]})

    def test_empty_complex(self) -> None:
        """Test an empty complex is rejected."""
        with pytest.raises(EmptyComplexError):
            SplitPipeline().run({"A": [0], "B": []})

    def test_folds(self) -> None:
        """Test fold labels keep components together."""
        fold_of = SplitPipeline(SplitConfig(n_folds=4)).folds(COMPLEXES)
        assert set(fold_of.values()) == {0, 1, 2, 3}
        assert fold_of["1A2Y"] == fold_of["1FDL"] == fold_of["3HFM"]

    def test_logs_milestones(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test component and allocation milestones are logged."""
        with caplog.at_level(logging.INFO, logger="complex_split"):
            SplitPipeline().run(COMPLEXES)
        assert "Found 12 components" in caplog.text
        assert "Allocated 20 complexes" in caplog.text
