from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from mcp.server.fastmcp import FastMCP
from starlette.applications import Starlette
from starlette.routing import Route

from codzilla_mcp.logging_config import configure_logging, get_logger
from codzilla_mcp.server import (
    SERVER_NAME,
    ServerConfig,
    ServerState,
    SessionMultiplexer,
    SessionStore,
    get_enabled_categories,
    get_enabled_tools,
)
from codzilla_mcp.tools import (
    register_component_resources,
    register_component_tools,
    register_token_tools,
)

logger = get_logger("mcp_server")

INSTRUCTIONS = """\
Codezilla exposes the UI components of this project: their props, a usage
example with the required props filled in, and their imports.

<tool_selection>
- get_components(category) lists components; category is ui, layout,
  forms or all
- get_component_by_name(name) returns one component (case-insensitive)
- get_design_tokens() returns colors, spacing, typography and radii
</tool_selection>

<resources>
- components://all is the full component list as JSON
- component://{name} is one component, or an error object if absent
</resources>
"""


def create_server(state: ServerState | None = None) -> FastMCP:
    """Create and configure the codzilla MCP server.

    Args:
        state: Shared server state (default: built from the environment)

    Returns:
        Configured FastMCP server instance
    """
    if state is None:
        state = ServerState()

    mcp = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS)

    # -----------------------------------------------------------------
    # Conditional tool registration based on CODZILLA_TOOLS env var
    # -----------------------------------------------------------------
    _enabled_tools = get_enabled_tools()
    logger.info(
        "tool categories enabled: %s (%d tools)",
        ", ".join(sorted(get_enabled_categories())),
        len(_enabled_tools),
    )

    def tool_if_enabled(func):
        """Decorator that only registers tool if its category is enabled.

        Uses the function name to look up whether it should be registered.
        Disabled tools are returned as-is without MCP registration.
        """
        if func.__name__ in _enabled_tools:
            return mcp.tool()(func)
        return func

    register_component_tools(mcp, state, tool_if_enabled)
    register_token_tools(mcp, state, tool_if_enabled)
    register_component_resources(mcp, state)

    return mcp


def create_app(
    config: ServerConfig | None = None,
    state: ServerState | None = None,
) -> Starlette:
    """Build the Streamable HTTP application.

    The session multiplexer is reachable as ``app.state.multiplexer``;
    the app's lifespan runs it, so callers driving the ASGI app without
    lifespan support must enter ``multiplexer.run()`` themselves.
    """
    if state is None:
        state = ServerState(config)
    config = state.config

    mcp = create_server(state)
    # per-session run() needs the low-level Server behind FastMCP
    multiplexer = SessionMultiplexer(
        mcp._mcp_server,
        store=SessionStore(),
        allowed_hosts=config.allowed_hosts(),
        allowed_origins=config.allowed_origins(),
        json_response=config.json_response,
    )

    @asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        async with multiplexer.run():
            yield

    app = Starlette(
        routes=[
            Route(
                config.path,
                endpoint=multiplexer,
                methods=["GET", "POST", "DELETE"],
            )
        ],
        lifespan=lifespan,
    )
    app.state.multiplexer = multiplexer
    app.state.server_state = state
    app.state.mcp = mcp
    return app


def run_server(config: ServerConfig | None = None) -> None:
    """Run the codzilla MCP server over Streamable HTTP.

    Args:
        config: Server settings (default: from environment)
    """
    import uvicorn

    configure_logging()

    if config is None:
        config = ServerConfig.from_env()

    app = create_app(config)
    logger.info(
        "Codezilla Components MCP server (Streamable HTTP) at %s",
        config.url,
        components_dir=str(config.resolved_components_dir),
    )
    uvicorn.run(app, host=config.host, port=config.port, log_level="warning")


if __name__ == "__main__":
    run_server()
