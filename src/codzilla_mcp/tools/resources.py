"""Component resources for the codzilla MCP server."""

from __future__ import annotations

from typing import TYPE_CHECKING

from codzilla_mcp.server.resources import (
    ALL_COMPONENTS_URI,
    COMPONENT_URI_TEMPLATE,
    JSON_MIME_TYPE,
)

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from codzilla_mcp.server.state import ServerState


def register_component_resources(mcp: FastMCP, state: ServerState) -> None:
    """Register the component listing and per-component resources."""

    # -----------------------------------------------------------------
    # MCP Resource: components
    # Full component list, readable without a tool call.
    # -----------------------------------------------------------------
    @mcp.resource(
        ALL_COMPONENTS_URI,
        name="components",
        description="JSON list of all available components",
        mime_type=JSON_MIME_TYPE,
    )
    async def all_components() -> str:
        """All Components."""
        return await state.resources.read_all()

    # -----------------------------------------------------------------
    # MCP Resource: component by name, e.g. component://Button
    # Absent names produce an error payload, not a failed read.
    # -----------------------------------------------------------------
    @mcp.resource(
        COMPONENT_URI_TEMPLATE,
        name="component",
        description="Returns a single component definition by name",
        mime_type=JSON_MIME_TYPE,
    )
    async def component_by_name(name: str) -> str:
        """Component by Name."""
        return await state.resources.read_component(name)
