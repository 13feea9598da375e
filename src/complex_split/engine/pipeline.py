"""End-to-end splitting: complexes -> pairs -> union-find -> components -> splits.

Runs single-threaded in one deterministic order. Pair order only changes
which representative label survives, never which complexes share a
component, but a fixed order keeps the labels reproducible run over run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from complex_split.core.complex import Complex, ComplexTable, as_complexes, universe_size
from complex_split.engine.allocator import SplitConfig, SplitResult, allocate_splits
from complex_split.engine.clustering import make_union_find
from complex_split.engine.components import assign_components, group_components
from complex_split.engine.folds import assign_folds
from complex_split.engine.leakage import LeakageReport, assert_no_leakage
from complex_split.engine.pairs import generate_pairs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComponentResult:
    """Connected components of a set of complexes.

    Attributes:
        assignment: complex_id -> component_id, in input order
        components: component_id -> complex ids
        universe_size: Number of cluster ids the disjoint set was built over
        pair_count: Pairs applied, self-pairs included
        merges: Unions that joined two distinct cluster components
    """

    assignment: dict[str, int]
    components: dict[int, list[str]]
    universe_size: int
    pair_count: int
    merges: int


@dataclass(frozen=True)
class PipelineResult:
    """Components, split and (when verified) leakage report of one run."""

    components: ComponentResult
    split: SplitResult
    leakage: LeakageReport | None = None

    def summary(self) -> dict[str, object]:
        summary = self.split.summary()
        summary["universe_size"] = self.components.universe_size
        summary["pairs"] = self.components.pair_count
        summary["merges"] = self.components.merges
        if self.leakage is not None:
            summary["leakage"] = self.leakage.to_dict()
        return summary


class SplitPipeline:
    """Partition complexes into leakage-free train/validation/test splits.

    Each run builds its own disjoint set sized to that run's cluster ids;
    nothing is shared between runs.
    """

    def __init__(self, config: SplitConfig | None = None) -> None:
        self._config = config or SplitConfig()

    @property
    def config(self) -> SplitConfig:
        return self._config

    def components(self, complexes: ComplexTable | Iterable[Complex]) -> ComponentResult:
        """Resolve every complex to its connected component."""
        items = as_complexes(complexes)
        n = universe_size(items)
        pairs = generate_pairs(items)
        logger.info(
            "Building components: %d complexes, %d cluster ids, %d pairs (%s engine)",
            len(items),
            n,
            len(pairs),
            self._config.engine,
        )

        union_find = make_union_find(n, self._config.engine)
        merges = union_find.union_all(pairs)
        assignment = assign_components(items, union_find)
        groups = group_components(assignment)

        logger.info(
            "Found %d components (%d cluster components after %d merges)",
            len(groups),
            union_find.component_count(),
            merges,
        )
        return ComponentResult(
            assignment=assignment,
            components=groups,
            universe_size=n,
            pair_count=len(pairs),
            merges=merges,
        )

    def run(self, complexes: ComplexTable | Iterable[Complex]) -> PipelineResult:
        """Compute components and allocate them to splits."""
        components = self.components(complexes)
        split = allocate_splits(components.components, self._config)

        leakage = None
        if self._config.verify:
            leakage = assert_no_leakage(split.membership, components.assignment)

        return PipelineResult(components=components, split=split, leakage=leakage)

    def folds(self, complexes: ComplexTable | Iterable[Complex]) -> dict[str, int]:
        """Grouped k-fold labels over the components of ``complexes``."""
        components = self.components(complexes)
        return assign_folds(components.assignment, self._config.n_folds)
