"""Component lookup tools for the codzilla MCP server."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import Field

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from codzilla_mcp.server.state import ServerState

from codzilla_mcp.models import Category


def register_component_tools(
    mcp: FastMCP,
    state: ServerState,
    tool_if_enabled: Callable,
) -> None:
    """Register the component query tools.

    Args:
        mcp: FastMCP server instance
        state: Server state with the operation registry
        tool_if_enabled: Decorator for conditional tool registration
    """

    @tool_if_enabled
    async def get_components(category: Category = "all") -> dict[str, Any]:
        """Get all available component definitions.

        Args:
            category: One of "ui", "layout", "forms" or "all". Anything but
                "all" keeps components whose path has a matching directory
                or whose name contains the category.

        Returns:
            Matching components with props, usage example and imports,
            plus the project's usage guidelines
        """
        return await state.operations.get_components(category)

    @tool_if_enabled
    async def get_component_by_name(
        name: Annotated[str, Field(min_length=2, max_length=100)],
    ) -> dict[str, Any]:
        """Get specific component definition by name.

        Matching is case-insensitive. Fails if no component has this name.
        """
        return await state.operations.get_component_by_name(name)
