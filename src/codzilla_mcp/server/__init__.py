"""Server infrastructure: configuration, state, registries and sessions."""

from codzilla_mcp.server.config import (
    DEFAULT_HOST,
    DEFAULT_MCP_PATH,
    DEFAULT_PORT,
    SERVER_NAME,
    SERVER_VERSION,
    TOOL_CATEGORIES,
    ServerConfig,
    get_enabled_categories,
    get_enabled_tools,
)
from codzilla_mcp.server.operations import OperationRegistry
from codzilla_mcp.server.resources import (
    ALL_COMPONENTS_URI,
    COMPONENT_URI_TEMPLATE,
    ResourceRegistry,
)
from codzilla_mcp.server.sessions import (
    Session,
    SessionMultiplexer,
    SessionStore,
)
from codzilla_mcp.server.state import ComponentCache, ServerState

__all__ = [
    "ALL_COMPONENTS_URI",
    "COMPONENT_URI_TEMPLATE",
    "DEFAULT_HOST",
    "DEFAULT_MCP_PATH",
    "DEFAULT_PORT",
    "SERVER_NAME",
    "SERVER_VERSION",
    "TOOL_CATEGORIES",
    "ComponentCache",
    "OperationRegistry",
    "ResourceRegistry",
    "ServerConfig",
    "ServerState",
    "Session",
    "SessionMultiplexer",
    "SessionStore",
    "get_enabled_categories",
    "get_enabled_tools",
]
