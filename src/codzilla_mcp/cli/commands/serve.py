"""Serve command - run the MCP server over Streamable HTTP."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from codzilla_mcp.server.config import ServerConfig


@dataclass
class Serve:
    """Run the MCP server (Streamable HTTP)."""

    host: str | None = field(
        default=None,
        metadata={"help": "Bind address (default: $HOST or 127.0.0.1)"},
    )
    port: int | None = field(
        default=None,
        metadata={"help": "Port (default: $CODZILLA_MCP_PORT, $PORT, 3333)"},
    )
    directory: Path | None = field(
        default=None,
        metadata={"help": "Project root (default: cwd)"},
    )
    components_dir: Path | None = field(
        default=None,
        metadata={"help": "Components directory (default: src/components)"},
    )

    def run(self) -> int:
        """Execute the serve command."""
        from codzilla_mcp.mcp_server import run_server

        config = ServerConfig.from_env(
            host=self.host,
            port=self.port,
            project_root=self.directory,
            components_dir=self.components_dir,
        )
        run_server(config)
        return 0
