"""Tokens command - print the design system tokens."""

from __future__ import annotations

from dataclasses import dataclass

from codzilla_mcp import console
from codzilla_mcp.design_tokens import get_design_tokens


@dataclass
class Tokens:
    """Print design tokens as JSON."""

    def run(self) -> int:
        console.print_json(get_design_tokens())
        return 0
