"""Exception types raised by the component registries."""

from __future__ import annotations

from pydantic import ValidationError


class CodzillaError(Exception):
    """Base class for errors surfaced to MCP callers."""


class NotFoundError(CodzillaError, LookupError):
    """A named component or resource does not exist."""

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class UnknownOperationError(CodzillaError, KeyError):
    """An operation name has no registered handler."""

    def __init__(self, operation: str) -> None:
        super().__init__(operation)
        self.operation = operation

    def __str__(self) -> str:
        return f"Unknown operation: {self.operation}"


__all__ = [
    "CodzillaError",
    "NotFoundError",
    "UnknownOperationError",
    "ValidationError",
]
