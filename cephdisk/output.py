"""Render row-sets as a table, JSON or YAML."""
from __future__ import annotations

import json
from enum import Enum
from typing import Callable, Dict, List, Union

import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

from cephdisk.core.errors import FormatError
from cephdisk.models.rowset import RowSet


class OutputFormat(Enum):
    """Output encodings accepted by --format."""
    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


DEFAULT_FORMAT = OutputFormat.TABLE


def parse_format(value: Union[str, OutputFormat, None]) -> OutputFormat:
    """Resolve a --format value, raising FormatError if it is unknown."""
    if isinstance(value, OutputFormat):
        return value
    if value is None or value == "":
        return DEFAULT_FORMAT
    try:
        return OutputFormat(value)
    except ValueError:
        choices = "|".join(f.value for f in OutputFormat)
        raise FormatError(f"Invalid format '{value}' (expected {choices})") from None


def _structured(rowset: RowSet) -> List[dict]:
    return [record.to_dict() for record in rowset.records]


def _table_width(rowset: RowSet) -> int:
    columns = len(rowset.header)
    widths = [len(title) for title in rowset.header]
    for row in rowset.rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    # One space of padding each side plus a border between and around columns
    return sum(widths) + 3 * columns + 1


def render_table(rowset: RowSet, console: Console) -> None:
    """Print the caption and an aligned grid of the flattened rows."""
    if rowset.caption:
        console.print(rowset.caption, highlight=False, markup=False)

    table = Table(show_header=True, header_style="bold")
    for title in rowset.header:
        table.add_column(title, no_wrap=True)
    for row in rowset.rows:
        table.add_row(*(Text(cell) for cell in row))

    # Never wrap or truncate cells; paths must stay copy-pasteable
    needed = _table_width(rowset)
    if needed > console.width:
        console = Console(
            file=console.file,
            width=needed,
            color_system=console.color_system,
        )
    console.print(table)


def render_json(rowset: RowSet, console: Console) -> None:
    console.out(json.dumps(_structured(rowset), indent=2), highlight=False)


def render_yaml(rowset: RowSet, console: Console) -> None:
    # Each row-set is its own YAML document
    rendered = yaml.safe_dump(
        _structured(rowset),
        sort_keys=False,
        default_flow_style=False,
        explicit_start=True,
    )
    console.out(rendered, highlight=False, end="")


RENDERERS: Dict[OutputFormat, Callable[[RowSet, Console], None]] = {
    OutputFormat.TABLE: render_table,
    OutputFormat.JSON: render_json,
    OutputFormat.YAML: render_yaml,
}


def render(
    rowset: RowSet,
    output_format: Union[str, OutputFormat],
    console: Console,
) -> None:
    """Write ``rowset`` to ``console`` in the requested format.

    Table output flattens records to strings; JSON and YAML serialize the
    records themselves so numeric fields keep their type.

    Raises:
        FormatError: ``output_format`` is not a known format. Nothing is
            written in that case.
    """
    fmt = parse_format(output_format)
    RENDERERS[fmt](rowset, console)
