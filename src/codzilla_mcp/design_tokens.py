"""Design system tokens served by the get_design_tokens tool."""

from __future__ import annotations

import copy
from typing import Any

DESIGN_TOKENS: dict[str, Any] = {
    "colors": {
        "primary": {
            "50": "#eff6ff",
            "500": "#3b82f6",
            "600": "#2563eb",
            "700": "#1d4ed8",
        },
        "secondary": {
            "50": "#f8fafc",
            "500": "#64748b",
            "600": "#475569",
            "700": "#334155",
        },
        "success": "#10b981",
        "warning": "#f59e0b",
        "error": "#ef4444",
    },
    "spacing": {
        "xs": "0.5rem",
        "sm": "0.75rem",
        "md": "1rem",
        "lg": "1.5rem",
        "xl": "2rem",
    },
    "typography": {
        "fontFamily": "Inter, sans-serif",
        "fontSize": {
            "xs": "0.75rem",
            "sm": "0.875rem",
            "base": "1rem",
            "lg": "1.125rem",
            "xl": "1.25rem",
        },
    },
    "borderRadius": {
        "sm": "0.375rem",
        "md": "0.5rem",
        "lg": "0.75rem",
        "xl": "1rem",
    },
}


def get_design_tokens() -> dict[str, Any]:
    """Return a copy of the token tree; callers may mutate it freely."""
    return copy.deepcopy(DESIGN_TOKENS)
