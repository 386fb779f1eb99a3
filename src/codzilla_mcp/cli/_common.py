"""Shared helpers for CLI commands."""

from __future__ import annotations

import asyncio
from pathlib import Path

from codzilla_mcp.server.config import ServerConfig
from codzilla_mcp.server.state import ServerState


def build_state(
    directory: Path | None, components_dir: Path | None
) -> ServerState:
    """Server state for a project root, as the server would resolve it."""
    config = ServerConfig.from_env(
        project_root=directory, components_dir=components_dir
    )
    return ServerState(config)


def run_async(coro):
    return asyncio.run(coro)
