"""Error types raised by complex-split.

Every error is a structural or programmer error. None of them is retried:
they abort the computation and carry the offending ids so the caller can
see exactly what went wrong.
"""

from __future__ import annotations

from typing import Any


class ComplexSplitError(Exception):
    """Base class for all complex-split errors."""


class InvalidSizeError(ComplexSplitError, ValueError):
    """Disjoint-set universe constructed with a negative or non-integer size."""

    def __init__(self, size: Any) -> None:
        self.size = size
        super().__init__(f"Universe size must be a non-negative integer, got {size!r}")


class OutOfRangeError(ComplexSplitError, IndexError):
    """Item outside ``[0, size)`` passed to ``find`` or ``union``."""

    def __init__(self, item: Any, size: int) -> None:
        self.item = item
        self.size = size
        super().__init__(f"Item {item!r} out of range for universe of size {size}")


class InvalidConfigError(ComplexSplitError, ValueError):
    """Split configuration rejected before any allocation work begins."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}={value!r}: {reason}")


class InconsistentComponentError(ComplexSplitError, RuntimeError):
    """Subunits of one complex resolved to different representatives."""

    def __init__(self, complex_id: str, representatives: dict[int, int]) -> None:
        self.complex_id = complex_id
        self.representatives = dict(representatives)
        super().__init__(
            f"Complex {complex_id!r} spans several components: "
            f"cluster -> representative {self.representatives}"
        )


class LeakageError(ComplexSplitError, RuntimeError):
    """A component straddles splits, or the splits do not cover every complex."""

    def __init__(
        self,
        straddling: dict[int, frozenset[str]],
        missing: tuple[str, ...] = (),
        unknown: tuple[str, ...] = (),
    ) -> None:
        self.straddling = dict(straddling)
        self.missing = missing
        self.unknown = unknown
        parts = []
        if straddling:
            parts.append(f"components across splits: {sorted(straddling)}")
        if missing:
            parts.append(f"complexes without a split: {list(missing)}")
        if unknown:
            parts.append(f"complexes without a component: {list(unknown)}")
        super().__init__("Leakage detected; " + "; ".join(parts))


class TableFormatError(ComplexSplitError, ValueError):
    """Malformed input table."""

    def __init__(self, path: str, line: int, reason: str) -> None:
        self.path = path
        self.line = line
        super().__init__(f"{path}:{line}: {reason}")


class EmptyComplexError(ComplexSplitError, ValueError):
    """Complex declared with no subunits."""

    def __init__(self, complex_id: str) -> None:
        self.complex_id = complex_id
        super().__init__(f"Complex {complex_id!r} has no subunits")
