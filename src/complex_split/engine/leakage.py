"""Post-hoc verification that a split leaks no component."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from complex_split.errors import LeakageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeakageReport:
    """Result of checking a split against its component assignment.

    Attributes:
        straddling: component_id -> splits it appears in, for components in more than one
        missing: Complexes with a component but no split
        unknown: Complexes with a split but no component
    """

    straddling: dict[int, frozenset[str]]
    missing: tuple[str, ...] = ()
    unknown: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not (self.straddling or self.missing or self.unknown)

    def to_dict(self) -> dict[str, object]:
        return {
            "ok": self.ok,
            "straddling": {
                str(cid): sorted(splits) for cid, splits in sorted(self.straddling.items())
            },
            "missing": list(self.missing),
            "unknown": list(self.unknown),
        }


def verify_partition(
    split_membership: Mapping[str, str],
    component_assignment: Mapping[str, int],
) -> LeakageReport:
    """Check no-leakage and coverage of a split.

    Split labels are compared as strings, so both ``Split`` members and
    labels read back from a table work.
    """
    seen: dict[int, set[str]] = {}
    missing: list[str] = []
    for complex_id, component_id in component_assignment.items():
        split = split_membership.get(complex_id)
        if split is None:
            missing.append(complex_id)
            continue
        seen.setdefault(component_id, set()).add(str(split))

    unknown = [cid for cid in split_membership if cid not in component_assignment]
    straddling = {cid: frozenset(splits) for cid, splits in seen.items() if len(splits) > 1}

    report = LeakageReport(straddling=straddling, missing=tuple(missing), unknown=tuple(unknown))
    if report.ok:
        logger.debug("No leakage across %d components", len(seen))
    else:
        logger.warning(
            "Leakage check failed: %d straddling components, %d missing, %d unknown",
            len(straddling),
            len(missing),
            len(unknown),
        )
    return report


def assert_no_leakage(
    split_membership: Mapping[str, str],
    component_assignment: Mapping[str, int],
) -> LeakageReport:
    """Like ``verify_partition`` but raise LeakageError when the check fails."""
    report = verify_partition(split_membership, component_assignment)
    if not report.ok:
        raise LeakageError(report.straddling, report.missing, report.unknown)
    return report
