"""MCP tool and resource modules.

Each module exports a register_* function that registers handlers with
the MCP server using the provided state (and, for tools, the
conditional-registration decorator).
"""

from codzilla_mcp.tools.components import register_component_tools
from codzilla_mcp.tools.resources import register_component_resources
from codzilla_mcp.tools.tokens import register_token_tools

__all__ = [
    "register_component_resources",
    "register_component_tools",
    "register_token_tools",
]
