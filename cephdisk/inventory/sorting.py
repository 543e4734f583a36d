"""Deterministic row ordering for rendered inventories."""
from typing import Tuple

from cephdisk.models.rowset import RowSet


def _name_key(row: Tuple[str, ...]) -> Tuple[bool, str]:
    # Rows without a name go last
    name = row[0] if row else ""
    return (name == "", name)


def sort_rowset(rowset: RowSet) -> RowSet:
    """Return a copy of ``rowset`` ordered by its first column.

    The sort is stable, so rows sharing a first column keep their
    relative order. Records move together with their rows.
    """
    pairs = sorted(zip(rowset.rows, rowset.records), key=lambda pair: _name_key(pair[0]))
    return RowSet(
        header=list(rowset.header),
        rows=[row for row, _ in pairs],
        records=[record for _, record in pairs],
        caption=rowset.caption,
    )
