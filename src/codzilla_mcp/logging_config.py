"""structlog configuration for codzilla.

All output goes to stderr (or a log file) so that stdout stays free for
tooling that pipes the CLI's JSON output.

Environment variables:
    CODZILLA_LOG_LEVEL: debug, info, warning, error (default: info)
    CODZILLA_DEBUG: shorthand for CODZILLA_LOG_LEVEL=debug
    CODZILLA_LOG_FILE: append logs to this file instead of stderr
    CODZILLA_LOG_JSON: render one JSON object per line
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import IO, Any

import structlog

ENV_LOG_LEVEL = "CODZILLA_LOG_LEVEL"
ENV_DEBUG = "CODZILLA_DEBUG"
ENV_LOG_FILE = "CODZILLA_LOG_FILE"
ENV_LOG_JSON = "CODZILLA_LOG_JSON"

_TRUTHY = ("1", "true", "yes", "on")

_log_stream: IO[str] | None = None


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    if level is None:
        if _env_flag(ENV_DEBUG):
            return logging.DEBUG
        level = os.environ.get(ENV_LOG_LEVEL, "info")
    resolved = logging.getLevelName(level.strip().upper())
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # looked up per call so a replaced sys.stderr is honoured
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(
    level: str | int | None = None,
    log_file: Path | None = None,
    json_logs: bool | None = None,
) -> None:
    """Configure structlog for the process.

    Safe to call more than once; the last call wins.

    Args:
        level: Log level name or number (default: from environment)
        log_file: Write logs to this file (default: CODZILLA_LOG_FILE or
            stderr)
        json_logs: Render JSON lines instead of console output
    """
    global _log_stream

    if log_file is None:
        env_file = os.environ.get(ENV_LOG_FILE)
        if env_file:
            log_file = Path(env_file)
    if json_logs is None:
        json_logs = _env_flag(ENV_LOG_JSON)

    if _log_stream is not None:
        _log_stream.close()
        _log_stream = None

    logger_factory: Callable[..., Any]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _log_stream = log_file.open("a", encoding="utf-8")
        logger_factory = structlog.PrintLoggerFactory(file=_log_stream)
        colors = False
    else:
        logger_factory = _stderr_logger
        colors = sys.stderr.isatty()

    renderer: structlog.typing.Processor
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _resolve_level(level)
        ),
        logger_factory=logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a named logger.

    Loggers accept both printf-style arguments and key/value pairs:
    ``logger.info("loaded %d components", n, root=str(root))``.
    """
    return structlog.get_logger(f"codzilla.{name}")
