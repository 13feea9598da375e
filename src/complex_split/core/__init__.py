"""Core data models for complex-split."""

from complex_split.core.complex import Complex, ComplexTable, Split, as_complexes, universe_size

__all__ = [
    "Complex",
    "ComplexTable",
    "Split",
    "as_complexes",
    "universe_size",
]
