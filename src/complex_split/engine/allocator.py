"""Greedy allocation of whole components to train/validation/test.

Components are taken largest first. Train is filled until it reaches
``floor(total * train_fraction)``, then validation until it reaches its
share of what the train target leaves, and everything else goes to test.
A component is never cut, so each split overshoots its target by less
than the size of the component that crossed the boundary.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from complex_split.core.complex import Split
from complex_split.engine.clustering import STRATEGIES
from complex_split.errors import InvalidConfigError

logger = logging.getLogger(__name__)

# Absorbs float error such as 100 * 0.29 == 28.999999999999996
_FLOOR_EPS = 1e-9


def _floor(value: float) -> int:
    return math.floor(value + _FLOOR_EPS)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class SplitConfig:
    """Configuration for a dataset-splitting run.

    Attributes:
        train_fraction: Target share of complexes in train, in (0, 1).
        valid_fraction: Target share in validation; test gets the rest.
        engine: Disjoint-set strategy ("relabel" | "compressed").
        n_folds: Number of folds for grouped k-fold labels.
        verify: Run the leakage check after allocation.
    """

    train_fraction: float = 0.8
    valid_fraction: float = 0.1
    engine: str = "relabel"
    n_folds: int = 5
    verify: bool = True

    def __post_init__(self) -> None:
        if not _is_number(self.train_fraction) or not 0.0 < self.train_fraction < 1.0:
            raise InvalidConfigError("train_fraction", self.train_fraction, "must be in (0, 1)")
        if not _is_number(self.valid_fraction) or not 0.0 <= self.valid_fraction < 1.0:
            raise InvalidConfigError("valid_fraction", self.valid_fraction, "must be in [0, 1)")
        if self.train_fraction + self.valid_fraction > 1.0 + _FLOOR_EPS:
            raise InvalidConfigError(
                "valid_fraction",
                self.valid_fraction,
                f"train_fraction + valid_fraction must not exceed 1, "
                f"got {self.train_fraction + self.valid_fraction}",
            )
        if self.engine not in STRATEGIES:
            raise InvalidConfigError("engine", self.engine, f"must be one of {STRATEGIES}")
        if isinstance(self.n_folds, bool) or not isinstance(self.n_folds, int) or self.n_folds < 2:
            raise InvalidConfigError("n_folds", self.n_folds, "must be an integer >= 2")
        if not isinstance(self.verify, bool):
            raise InvalidConfigError("verify", self.verify, "must be true or false")

    @property
    def test_fraction(self) -> float:
        return max(0.0, 1.0 - self.train_fraction - self.valid_fraction)

    @property
    def valid_share(self) -> float:
        """Validation's share of the complexes left after train."""
        return min(1.0, self.valid_fraction / (1.0 - self.train_fraction))

    def to_dict(self) -> dict[str, Any]:
        return {
            "train_fraction": self.train_fraction,
            "valid_fraction": self.valid_fraction,
            "engine": self.engine,
            "n_folds": self.n_folds,
            "verify": self.verify,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SplitConfig:
        """Build from a plain mapping; unknown keys are rejected."""
        defaults = cls()
        unknown = set(data) - set(defaults.to_dict())
        if unknown:
            key = sorted(unknown)[0]
            raise InvalidConfigError(key, data[key], "unknown configuration key")
        return cls(
            train_fraction=data.get("train_fraction", defaults.train_fraction),
            valid_fraction=data.get("valid_fraction", defaults.valid_fraction),
            engine=data.get("engine", defaults.engine),
            n_folds=data.get("n_folds", defaults.n_folds),
            verify=data.get("verify", defaults.verify),
        )


@dataclass(frozen=True)
class SplitResult:
    """Outcome of a split allocation.

    Attributes:
        membership: complex_id -> split, grouped by component
        component_splits: component_id -> split
        targets: Size each split was filled up to (test has none: it takes the rest)
        config: Configuration the allocation ran with
    """

    membership: dict[str, Split]
    component_splits: dict[int, Split]
    targets: dict[Split, int]
    config: SplitConfig = field(default_factory=SplitConfig)

    def members(self, split: Split) -> list[str]:
        return [cid for cid, s in self.membership.items() if s == split]

    def counts(self) -> dict[Split, int]:
        counts = {split: 0 for split in Split}
        for split in self.membership.values():
            counts[split] += 1
        return counts

    @property
    def total(self) -> int:
        return len(self.membership)

    def summary(self) -> dict[str, Any]:
        counts = self.counts()
        requested = {
            Split.TRAIN: self.config.train_fraction,
            Split.VALIDATION: self.config.valid_fraction,
            Split.TEST: self.config.test_fraction,
        }
        return {
            "total": self.total,
            "components": len(self.component_splits),
            "splits": {
                split.value: {
                    "complexes": counts[split],
                    "components": sum(1 for s in self.component_splits.values() if s == split),
                    "fraction": round(counts[split] / self.total, 4) if self.total else 0.0,
                    "requested": round(requested[split], 4),
                    "target": self.targets.get(split),
                }
                for split in Split
            },
        }


def order_components(components: Mapping[int, Sequence[str]]) -> list[int]:
    """Component ids by descending size; ties keep first-seen order."""
    position = {cid: i for i, cid in enumerate(components)}
    return sorted(components, key=lambda cid: (-len(components[cid]), position[cid]))


def allocate_splits(
    components: Mapping[int, Sequence[str]],
    config: SplitConfig | None = None,
) -> SplitResult:
    """Assign whole components to train, validation and test.

    Args:
        components: component_id -> complex ids. Read only.
        config: Target fractions; defaults to 80/10/10.

    Returns:
        SplitResult with every complex id in exactly one split.
    """
    config = config or SplitConfig()
    total = sum(len(members) for members in components.values())
    train_target = _floor(total * config.train_fraction)
    valid_target = _floor((total - train_target) * config.valid_share)

    counts = {split: 0 for split in Split}
    component_splits: dict[int, Split] = {}
    current = Split.TRAIN

    for cid in order_components(components):
        if current is Split.TRAIN and counts[Split.TRAIN] >= train_target:
            current = Split.VALIDATION
        if current is Split.VALIDATION and counts[Split.VALIDATION] >= valid_target:
            current = Split.TEST
        component_splits[cid] = current
        counts[current] += len(components[cid])

    membership: dict[str, Split] = {}
    for cid, members in components.items():
        for complex_id in members:
            membership[complex_id] = component_splits[cid]

    requested = {
        Split.TRAIN: config.train_fraction,
        Split.VALIDATION: config.valid_fraction,
        Split.TEST: config.test_fraction,
    }
    for split in Split:
        if counts[split] == 0 and requested[split] > 0 and total > 0:
            logger.warning(
                "Split '%s' is empty (requested %.2f of %d complexes in %d components)",
                split.value,
                requested[split],
                total,
                len(components),
            )

    logger.info(
        "Allocated %d complexes: train=%d (target %d) validation=%d (target %d) test=%d",
        total,
        counts[Split.TRAIN],
        train_target,
        counts[Split.VALIDATION],
        valid_target,
        counts[Split.TEST],
    )

    return SplitResult(
        membership=membership,
        component_splits=component_splits,
        targets={Split.TRAIN: train_target, Split.VALIDATION: valid_target},
        config=config,
    )
