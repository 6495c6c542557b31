"""Output formatting for CLI results.

Decoded response bodies are plain JSON values; they are printed either as
JSON or, for objects and lists of objects, as a rich table.
"""

import json
from io import StringIO
from pathlib import Path
from typing import Any, Optional

import click


def format_output(
    data: Any,
    fmt: str = "json",
    output: Optional[str] = None,
    no_color: bool = False,
) -> None:
    """Format and output data to stdout or file.

    Args:
        data: Data to format
        fmt: Output format (json, table)
        output: Optional file path to write to
        no_color: Disable colored output for table format

    Example:
        >>> format_output([{"name": "shoe"}, {"name": "boot"}], fmt="table")
    """
    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")

    if output and fmt == "table":
        no_color = True

    if fmt == "json":
        text = _format_json(data)
    elif fmt == "table":
        text = _format_table(data, no_color=no_color)
    else:
        text = str(data)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        click.echo(f"Output written to {output}", err=True)
    else:
        click.echo(text)


def _format_json(data: Any) -> str:
    return json.dumps(data, indent=2, default=str, ensure_ascii=False)


def _format_table(data: Any, no_color: bool = False) -> str:
    """Format data as a table using rich.

    Scalars and non-object items are rendered in a single ``value`` column.
    """
    from rich.console import Console
    from rich.table import Table

    items = data if isinstance(data, list) else [data]
    if not items:
        return "No results"

    if not all(isinstance(item, dict) for item in items):
        items = [{"value": item} for item in items]

    columns: list[str] = []
    for item in items:
        columns.extend(str(key) for key in item if str(key) not in columns)

    table = Table(show_header=True, header_style="bold")
    for col in columns:
        table.add_column(col)

    for item in items:
        table.add_row(*[_cell(item.get(col, "")) for col in columns])

    buffer = StringIO()
    console = Console(file=buffer, force_terminal=not no_color, width=120)
    console.print(table)

    return buffer.getvalue()


def _cell(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str, ensure_ascii=False)
    return str(value)
