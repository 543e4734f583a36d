"""Header-labelled rows ready for rendering."""
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple


@dataclass
class RowSet:
    """Tabular view of a list of records.

    ``rows[i]`` is the string flattening of ``records[i]``; table output
    uses the rows, structured output uses the records.
    """
    header: List[str]
    rows: List[Tuple[str, ...]] = field(default_factory=list)
    records: List[Any] = field(default_factory=list)
    caption: Optional[str] = None

    def __post_init__(self):
        if len(self.rows) != len(self.records):
            raise ValueError(
                f"RowSet has {len(self.rows)} rows but {len(self.records)} records"
            )

    def __len__(self) -> int:
        return len(self.rows)

    def add(self, row: Tuple[str, ...], record: Any) -> None:
        if len(row) != len(self.header):
            raise ValueError(f"Row {row!r} does not match header {self.header!r}")
        self.rows.append(tuple(row))
        self.records.append(record)
