"""Resolve each complex to its connected component."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from complex_split.core.complex import Complex
from complex_split.engine.clustering import DisjointSet
from complex_split.errors import InconsistentComponentError

logger = logging.getLogger(__name__)


def assign_components(
    complexes: Iterable[Complex],
    union_find: DisjointSet,
    *,
    check_consistency: bool = True,
) -> dict[str, int]:
    """Map every complex id to the representative of its first subunit.

    Args:
        complexes: Complexes whose pairs have all been applied to ``union_find``.
        union_find: The finalized disjoint set. Only read, never mutated
            (the compressed engine may still shorten paths internally).
        check_consistency: Verify all subunits of a complex share one
            representative and raise InconsistentComponentError otherwise.

    Returns:
        ``complex_id -> component_id`` in input order.
    """
    assignment: dict[str, int] = {}
    for cx in complexes:
        component_id = union_find.find(cx.anchor)
        if check_consistency and cx.is_multimer:
            reps = {cluster_id: union_find.find(cluster_id) for cluster_id in cx.subunits}
            if any(rep != component_id for rep in reps.values()):
                raise InconsistentComponentError(cx.id, reps)
        assignment[cx.id] = component_id
    return assignment


def group_components(assignment: Mapping[str, int]) -> dict[int, list[str]]:
    """Invert ``complex_id -> component_id`` into ``component_id -> complex ids``.

    Components appear in order of their first complex; members keep input order.
    """
    groups: dict[int, list[str]] = {}
    for complex_id, component_id in assignment.items():
        groups.setdefault(component_id, []).append(complex_id)
    logger.debug("Grouped %d complexes into %d components", len(assignment), len(groups))
    return groups
