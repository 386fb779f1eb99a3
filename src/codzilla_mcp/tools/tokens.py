"""Design token tool for the codzilla MCP server."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from codzilla_mcp.server.state import ServerState


def register_token_tools(
    mcp: FastMCP,
    state: ServerState,
    tool_if_enabled: Callable,
) -> None:
    @tool_if_enabled
    async def get_design_tokens() -> dict[str, Any]:
        """Get design system tokens (colors, spacing, typography)."""
        return await state.operations.get_design_tokens()
