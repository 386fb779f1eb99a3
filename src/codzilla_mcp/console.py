"""Terminal output helpers for the CLI (rich, stderr for status)."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.table import Table

out = Console()
err = Console(stderr=True)


def error(message: str) -> None:
    err.print(f"[bold red]error:[/] {message}")


def info(message: str) -> None:
    err.print(f"[cyan]{message}[/]")


def dim(message: str) -> None:
    err.print(f"[dim]{message}[/]")


def success(message: str) -> None:
    err.print(f"[green]{message}[/]")


def print_json(data: Any) -> None:
    # plain print keeps stdout pipeable into jq
    print(json.dumps(data, indent=2))


def table(title: str, columns: list[str], rows: list[list[str]]) -> None:
    t = Table(title=title, show_lines=False)
    for col in columns:
        t.add_column(col, overflow="fold")
    for row in rows:
        t.add_row(*row)
    out.print(t)
