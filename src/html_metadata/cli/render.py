# ABOUTME: Rendering helpers that turn extracted metadata into rich tables or JSON text.
# ABOUTME: Shared by the scrape and coins commands.

import json
from typing import Any

from rich.markup import escape
from rich.table import Table


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _cell(value: Any) -> str:
    if isinstance(value, str):
        return escape(value)
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return escape("\n".join(value))
    return escape(json.dumps(value, ensure_ascii=False))


def metadata_table(title: str, data: Any) -> Table:
    """Two-column table of a format's fields; lists of records get one row each."""
    table = Table(title=title, show_header=False, pad_edge=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")

    if isinstance(data, dict):
        for key, value in data.items():
            table.add_row(escape(key), _cell(value))
    elif isinstance(data, list):
        for index, record in enumerate(data, start=1):
            table.add_row(f"#{index}", _cell(record))
    else:
        table.add_row("", _cell(data))
    return table
