"""Shared utility functions for entitygen.

Provides JSON input helpers, file-system helpers and Rich-based console
output.  The inferencer and emitter never print; only hosts use the console.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# JSON input
# ---------------------------------------------------------------------------


def parse_json_text(text: str) -> Any:
    """Parse user-supplied JSON text.

    Raises:
        json.JSONDecodeError: If *text* is not valid JSON.
        ValueError: If a number in *text* exceeds the interpreter's
            integer-conversion limit.
        RecursionError: If *text* nests deeper than the parser allows.
    """
    return json.loads(text)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_file_preview(identifier: str, content: str) -> None:
    """Print a generated file with Dart syntax highlighting."""
    console.rule(f"[bold cyan]{identifier}[/bold cyan]")
    console.print(Syntax(content, "dart", line_numbers=False))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
