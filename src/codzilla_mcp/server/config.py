"""Server configuration constants and tool category management."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from codzilla_mcp.paths import get_components_dir, get_project_root

SERVER_NAME = "codezilla-components"
SERVER_VERSION = "1.0.0"

# Environment variable names
ENV_HOST = "HOST"
ENV_PORT = "CODZILLA_MCP_PORT"
ENV_PORT_FALLBACK = "PORT"
ENV_MCP_PATH = "CODZILLA_MCP_PATH"
ENV_JSON_RESPONSE = "CODZILLA_JSON_RESPONSE"
ENV_TOOLS = "CODZILLA_TOOLS"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3333
DEFAULT_MCP_PATH = "/mcp"

# Hosts that are always accepted for session initialization
LOOPBACK_HOSTS = ("127.0.0.1", "localhost")

# ---------------------------------------------------------------------------
# Tool Categories - controls which tools are exposed via CODZILLA_TOOLS env
# ---------------------------------------------------------------------------
# Default: all categories
# e.g., CODZILLA_TOOLS=components to hide design tokens

TOOL_CATEGORIES: dict[str, set[str]] = {
    # Component metadata lookups
    "components": {
        "get_components",
        "get_component_by_name",
    },
    # Static design system values
    "tokens": {
        "get_design_tokens",
    },
}

DEFAULT_TOOL_CATEGORIES: set[str] = set(TOOL_CATEGORIES)


def get_enabled_categories() -> set[str]:
    """Get enabled tool categories from CODZILLA_TOOLS env var.

    Returns:
        Set of enabled category names. Defaults to every category.
    """
    env = os.environ.get(ENV_TOOLS, "").strip()
    if not env or env.lower() == "all":
        return DEFAULT_TOOL_CATEGORIES.copy()
    return {c.strip().lower() for c in env.split(",") if c.strip()}


def get_enabled_tools() -> set[str]:
    """Get set of enabled tool names based on enabled categories."""
    tools: set[str] = set()
    for cat in get_enabled_categories():
        if cat in TOOL_CATEGORIES:
            tools.update(TOOL_CATEGORIES[cat])
    return tools


def get_host() -> str:
    return os.environ.get(ENV_HOST) or DEFAULT_HOST


def get_port() -> int:
    """Port from CODZILLA_MCP_PORT, then PORT, then 3333."""
    raw = os.environ.get(ENV_PORT) or os.environ.get(ENV_PORT_FALLBACK)
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"invalid port {raw!r} in environment") from e


def get_mcp_path() -> str:
    path = os.environ.get(ENV_MCP_PATH) or DEFAULT_MCP_PATH
    return path if path.startswith("/") else f"/{path}"


def get_json_response() -> bool:
    env_val = os.environ.get(ENV_JSON_RESPONSE, "").lower()
    # only disable if explicitly set to false/0/no
    return env_val not in ("0", "false", "no")


@dataclass(frozen=True)
class ServerConfig:
    """Resolved settings for one server process."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    path: str = DEFAULT_MCP_PATH
    project_root: Path = field(default_factory=Path.cwd)
    components_dir: Path | None = None
    json_response: bool = True

    @classmethod
    def from_env(
        cls,
        host: str | None = None,
        port: int | None = None,
        project_root: Path | None = None,
        components_dir: Path | None = None,
    ) -> ServerConfig:
        """Build a config from the environment; arguments take precedence."""
        root = get_project_root(project_root)
        return cls(
            host=host or get_host(),
            port=port if port is not None else get_port(),
            path=get_mcp_path(),
            project_root=root,
            components_dir=get_components_dir(root, components_dir),
            json_response=get_json_response(),
        )

    @property
    def resolved_components_dir(self) -> Path:
        return get_components_dir(self.project_root, self.components_dir)

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}{self.path}"

    def allowed_hosts(self) -> list[str]:
        """Host header values accepted for new sessions.

        The configured host and the loopback names, each bare and with the
        port appended.
        """
        hosts: list[str] = []
        for name in (self.host, *LOOPBACK_HOSTS):
            for variant in (name, f"{name}:{self.port}"):
                if variant not in hosts:
                    hosts.append(variant)
        return hosts

    def allowed_origins(self) -> list[str]:
        return [f"http://{h}" for h in self.allowed_hosts()]
