"""Component commands - inspect what the server would expose."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from codzilla_mcp import console
from codzilla_mcp.cli._common import build_state, run_async
from codzilla_mcp.errors import NotFoundError


@dataclass
class Components:
    """List parsed components."""

    directory: Path | None = field(
        default=None,
        metadata={"help": "Project root (default: cwd)"},
    )
    components_dir: Path | None = field(
        default=None,
        metadata={"help": "Components directory (default: src/components)"},
    )
    category: Literal["ui", "layout", "forms", "all"] = field(
        default="all",
        metadata={"help": "Only show components in this category"},
    )
    json: bool = field(
        default=False,
        metadata={"help": "Print JSON instead of a table"},
    )

    def run(self) -> int:
        """Execute the components command."""
        state = build_state(self.directory, self.components_dir)
        result = run_async(state.operations.get_components(self.category))
        components = result["components"]

        if self.json:
            console.print_json(components)
            return 0

        rows = [
            [
                c["name"],
                c["path"],
                ", ".join(
                    f"{n}?" if p["optional"] else n
                    for n, p in c["props"].items()
                )
                or "-",
                c["usage"],
            ]
            for c in components
        ]
        console.table(
            f"{len(rows)} components ({self.category})",
            ["name", "path", "props", "usage"],
            rows,
        )
        if state.cache.components_dir.is_dir():
            console.dim(f"scanned {state.cache.components_dir}")
        else:
            console.dim(
                f"{state.cache.components_dir} not found, showing defaults"
            )
        return 0


@dataclass
class Show:
    """Show one component as JSON."""

    name: str = field(metadata={"help": "Component name (case-insensitive)"})
    directory: Path | None = field(
        default=None,
        metadata={"help": "Project root (default: cwd)"},
    )
    components_dir: Path | None = field(
        default=None,
        metadata={"help": "Components directory (default: src/components)"},
    )

    def run(self) -> int:
        """Execute the show command."""
        state = build_state(self.directory, self.components_dir)
        try:
            record = run_async(
                state.operations.get_component_by_name(self.name)
            )
        except NotFoundError as e:
            console.error(str(e))
            return 1
        console.print_json(record)
        return 0
