"""complex-split - leakage-free train/validation/test splits for protein complexes.

Complexes that share a subunit sequence cluster, directly or through a
chain of other complexes, always end up in the same split.
"""

from complex_split.core.complex import Complex, Split
from complex_split.engine.allocator import SplitConfig, allocate_splits
from complex_split.engine.clustering import CompressedUnionFind, UnionFind
from complex_split.engine.pipeline import SplitPipeline
from complex_split.errors import (
    ComplexSplitError,
    EmptyComplexError,
    InconsistentComponentError,
    InvalidConfigError,
    InvalidSizeError,
    LeakageError,
    OutOfRangeError,
    TableFormatError,
)

__version__ = "0.1.0"

__all__ = [
    "Complex",
    "ComplexSplitError",
    "CompressedUnionFind",
    "EmptyComplexError",
    "InconsistentComponentError",
    "InvalidConfigError",
    "InvalidSizeError",
    "LeakageError",
    "OutOfRangeError",
    "Split",
    "SplitConfig",
    "SplitPipeline",
    "TableFormatError",
    "UnionFind",
    "__version__",
    "allocate_splits",
]
