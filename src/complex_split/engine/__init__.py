"""Splitting engine: union-find, component assignment and split allocation."""

from complex_split.engine.allocator import SplitConfig, SplitResult, allocate_splits
from complex_split.engine.clustering import (
    CompressedUnionFind,
    DisjointSet,
    UnionFind,
    make_union_find,
)
from complex_split.engine.components import assign_components, group_components
from complex_split.engine.folds import assign_folds
from complex_split.engine.leakage import LeakageReport, assert_no_leakage, verify_partition
from complex_split.engine.pairs import complex_pairs, generate_pairs
from complex_split.engine.pipeline import ComponentResult, PipelineResult, SplitPipeline

__all__ = [
    # Disjoint set
    "CompressedUnionFind",
    "DisjointSet",
    "UnionFind",
    "make_union_find",
    # Pairs and components
    "assign_components",
    "complex_pairs",
    "generate_pairs",
    "group_components",
    # Allocation
    "SplitConfig",
    "SplitResult",
    "allocate_splits",
    "assign_folds",
    # Verification
    "LeakageReport",
    "assert_no_leakage",
    "verify_partition",
    # Pipeline
    "ComponentResult",
    "PipelineResult",
    "SplitPipeline",
]
