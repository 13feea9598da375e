"""Turn complexes into must-connect cluster pairs.

Each multi-subunit complex contributes a star: its first subunit paired
with every later one. That is enough to join all of its subunits into one
component; pairwise edges between the later subunits add nothing.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from complex_split.core.complex import Complex
from complex_split.engine.clustering import Pair


def complex_pairs(cx: Complex) -> Iterator[Pair]:
    """Yield ``(c0, ck)`` for every subunit after the first.

    Repeated cluster ids are kept, so ``[750, 750]`` yields ``(750, 750)``.
    """
    anchor = cx.anchor
    for cluster_id in cx.subunits[1:]:
        yield (anchor, cluster_id)


def generate_pairs(complexes: Iterable[Complex]) -> list[Pair]:
    """Flatten the star pairs of all complexes, in input order."""
    return [pair for cx in complexes for pair in complex_pairs(cx)]
