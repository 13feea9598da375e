"""Table readers and writers."""

from complex_split.io.tables import (
    load_complexes,
    read_assignment,
    read_complex_json,
    read_subunit_table,
    write_assignment,
)

__all__ = [
    "load_complexes",
    "read_assignment",
    "read_complex_json",
    "read_subunit_table",
    "write_assignment",
]
