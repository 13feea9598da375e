"""Plain-text adapters for subunit tables and assignment tables.

Subunit table: one row per chain, columns ``structure_id``, ``chain_id``,
``cluster_id``. Rows of a structure are kept in file order, which decides
its first (anchor) subunit. Assignment table: two columns, ``complex_id``
and a value (component id, split or fold).
"""

from __future__ import annotations

import csv
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from complex_split.errors import TableFormatError

SUBUNIT_COLUMNS: tuple[str, ...] = ("structure_id", "chain_id", "cluster_id")


def _delimiter(path: Path) -> str:
    return "," if path.suffix.lower() == ".csv" else "\t"


def _parse_cluster_id(value: Any, path: Path, line: int) -> int:
    if isinstance(value, bool):
        raise TableFormatError(str(path), line, f"cluster id must be an integer, got {value!r}")
    try:
        cluster_id = int(str(value).strip())
    except ValueError:
        raise TableFormatError(
            str(path), line, f"cluster id must be an integer, got {value!r}"
        ) from None
    if cluster_id < 0:
        raise TableFormatError(str(path), line, f"cluster id must be >= 0, got {cluster_id}")
    return cluster_id


def read_subunit_table(path: str | Path) -> dict[str, list[int]]:
    """Read ``structure_id -> [cluster ids]`` from a TSV (or ``.csv``) table."""
    path = Path(path)
    complexes: dict[str, list[int]] = {}
    seen_chains: set[tuple[str, str]] = set()

    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f, delimiter=_delimiter(path))
        missing = [c for c in SUBUNIT_COLUMNS if c not in (reader.fieldnames or [])]
        if missing:
            raise TableFormatError(str(path), 1, f"missing columns {missing}")

        for row in reader:
            line = reader.line_num
            structure_id = (row["structure_id"] or "").strip()
            chain_id = (row["chain_id"] or "").strip()
            if not structure_id:
                raise TableFormatError(str(path), line, "empty structure_id")
            if (structure_id, chain_id) in seen_chains:
                raise TableFormatError(
                    str(path), line, f"duplicate chain {chain_id!r} for {structure_id!r}"
                )
            seen_chains.add((structure_id, chain_id))
            cluster_id = _parse_cluster_id(row["cluster_id"], path, line)
            complexes.setdefault(structure_id, []).append(cluster_id)

    return complexes


def read_complex_json(path: str | Path) -> dict[str, list[int]]:
    """Read ``{complex_id: [cluster ids]}`` from a JSON file."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise TableFormatError(str(path), e.lineno, f"invalid JSON: {e.msg}") from e
    if not isinstance(raw, dict):
        raise TableFormatError(str(path), 1, "expected an object of complex_id -> cluster ids")

    complexes: dict[str, list[int]] = {}
    for complex_id, subunits in raw.items():
        if not isinstance(subunits, list):
            raise TableFormatError(str(path), 1, f"{complex_id!r}: expected a list of cluster ids")
        complexes[str(complex_id)] = [_parse_cluster_id(v, path, 1) for v in subunits]
    return complexes


def load_complexes(path: str | Path) -> dict[str, list[int]]:
    """Read complexes from ``.json`` or from a subunit table."""
    path = Path(path)
    if path.suffix.lower() == ".json":
        return read_complex_json(path)
    return read_subunit_table(path)


def write_assignment(
    path: str | Path,
    mapping: Mapping[str, Any],
    value_header: str,
) -> Path:
    """Write a two-column ``complex_id<TAB>value_header`` table."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, delimiter="\t", lineterminator="\n")
        writer.writerow(["complex_id", value_header])
        for complex_id, value in mapping.items():
            writer.writerow([complex_id, str(value)])
    return path


def read_assignment(path: str | Path) -> dict[str, str]:
    """Read a two-column table written by ``write_assignment``."""
    path = Path(path)
    result: dict[str, str] = {}
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.reader(f, delimiter="\t")
        header = next(reader, None)
        if header is None or len(header) < 2 or header[0] != "complex_id":
            raise TableFormatError(str(path), 1, "expected header 'complex_id<TAB><value>'")
        for row in reader:
            if not row:
                continue
            if len(row) < 2:
                raise TableFormatError(str(path), reader.line_num, "expected two columns")
            if row[0] in result:
                raise TableFormatError(
                    str(path), reader.line_num, f"duplicate complex_id {row[0]!r}"
                )
            result[row[0]] = row[1]
    return result
