"""codzilla CLI - inspect components and run the MCP server.

Uses tyro for type-driven CLI generation from dataclasses.
"""

from __future__ import annotations

from typing import Annotated

import tyro

from codzilla_mcp.cli.commands.components import Components, Show
from codzilla_mcp.cli.commands.serve import Serve
from codzilla_mcp.cli.commands.tokens import Tokens

# Type aliases for subcommand annotations
_Serve = Annotated[Serve, tyro.conf.subcommand("serve")]
_Components = Annotated[Components, tyro.conf.subcommand("components")]
_Show = Annotated[Show, tyro.conf.subcommand("show")]
_Tokens = Annotated[Tokens, tyro.conf.subcommand("tokens")]

Command = _Serve | _Components | _Show | _Tokens


def main() -> int:
    """Entry point for the CLI."""
    # configure structlog (respects CODZILLA_DEBUG env var)
    from codzilla_mcp.logging_config import configure_logging

    configure_logging()

    try:
        cmd = tyro.cli(
            Command,
            prog="codzilla-mcp",
            description="Expose UI component metadata over MCP.",
        )
        return cmd.run()
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        from codzilla_mcp import console

        console.error(str(e))
        return 1
