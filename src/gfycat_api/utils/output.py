"""Output formatting utilities for agent-friendly CLI output."""

from __future__ import annotations

import json
import sys
from enum import Enum
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

console = Console(stderr=True)


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


def to_data(value: Any) -> Any:
    """Convert pydantic records into plain dicts for printing."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


def print_output(
    data: BaseModel | dict[str, Any],
    fmt: OutputFormat = OutputFormat.TABLE,
    title: str | None = None,
) -> None:
    """Print a record in the requested format.

    Args:
        data: A pydantic record or a plain dict.
        fmt: Output format (table or json).
        title: Optional title for table output.
    """
    data = to_data(data)
    if fmt == OutputFormat.JSON:
        print_json(data)
    else:
        print_record(data, title)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    json.dump(data, sys.stdout, indent=2, default=str)
    sys.stdout.write("\n")


def print_record(data: dict[str, Any], title: str | None = None) -> None:
    """Print one record as a two-column Rich table."""
    if not data:
        console.print("[dim]No results.[/dim]")
        return

    table = Table(title=title, show_lines=False)
    table.add_column("field")
    table.add_column("value", overflow="fold")

    for key, value in data.items():
        table.add_row(key, "" if value is None else str(value))

    console.print(table)
