"""Grouped k-fold labels with components as groups."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import numpy as np
from sklearn.model_selection import GroupKFold

from complex_split.errors import InvalidConfigError

logger = logging.getLogger(__name__)


def assign_folds(component_assignment: Mapping[str, int], n_folds: int = 5) -> dict[str, int]:
    """Give each complex the index of the fold in which it is held out.

    Every member of a component lands in the same fold, so a model trained
    on the other k-1 folds never sees a subunit cluster of the held-out one.

    Args:
        component_assignment: complex_id -> component_id.
        n_folds: Number of folds, at least 2 and at most the number of components.

    Returns:
        complex_id -> fold index in ``[0, n_folds)``, in input order.
    """
    if isinstance(n_folds, bool) or not isinstance(n_folds, int) or n_folds < 2:
        raise InvalidConfigError("n_folds", n_folds, "must be an integer >= 2")

    complex_ids = list(component_assignment)
    groups = np.array([component_assignment[cid] for cid in complex_ids], dtype=np.int64)
    n_groups = len(np.unique(groups))
    if n_groups < n_folds:
        raise InvalidConfigError(
            "n_folds", n_folds, f"cannot exceed the number of components ({n_groups})"
        )

    placeholder = np.zeros((len(complex_ids), 1))
    fold_of: dict[str, int] = {}
    splitter = GroupKFold(n_splits=n_folds)
    for fold, (_, held_out) in enumerate(splitter.split(placeholder, groups=groups)):
        for index in held_out:
            fold_of[complex_ids[index]] = fold

    logger.info(
        "Assigned %d complexes in %d components to %d folds", len(complex_ids), n_groups, n_folds
    )
    return {cid: fold_of[cid] for cid in complex_ids}
