"""Complex and split data structures."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum

from complex_split.errors import EmptyComplexError


class Split(StrEnum):
    """Dataset partitions a complex can be assigned to."""

    TRAIN = "train"
    VALIDATION = "validation"
    TEST = "test"


@dataclass(frozen=True)
class Complex:
    """
    A structural entity made of one or more subunits.

    Attributes:
        id: External identifier, e.g. a PDB structure id
        subunits: Cluster id of each subunit, in chain order
    """

    id: str
    subunits: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.subunits:
            raise EmptyComplexError(self.id)

    @classmethod
    def create(cls, complex_id: str, subunits: Iterable[int]) -> Complex:
        """Build a Complex from any iterable of cluster ids."""
        return cls(id=str(complex_id), subunits=tuple(subunits))

    @property
    def anchor(self) -> int:
        """Cluster id of the first subunit; every other subunit is paired with it."""
        return self.subunits[0]

    @property
    def is_multimer(self) -> bool:
        return len(self.subunits) > 1


ComplexTable = Mapping[str, Sequence[int]]


def as_complexes(complexes: ComplexTable | Iterable[Complex]) -> list[Complex]:
    """Normalize a ``complex_id -> cluster ids`` mapping into Complex objects.

    Input order is preserved; it decides tie-breaks further down the line.
    """
    if isinstance(complexes, Mapping):
        return [Complex.create(cid, subunits) for cid, subunits in complexes.items()]
    return list(complexes)


def universe_size(complexes: Iterable[Complex]) -> int:
    """Number of cluster ids the disjoint-set must hold: ``max(cluster id) + 1``."""
    highest = -1
    for cx in complexes:
        for cluster_id in cx.subunits:
            if isinstance(cluster_id, int) and cluster_id > highest:
                highest = cluster_id
    return highest + 1
