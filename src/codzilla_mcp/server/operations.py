"""Named, argument-validated operations over the component cache."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from codzilla_mcp.design_tokens import get_design_tokens
from codzilla_mcp.errors import NotFoundError, UnknownOperationError
from codzilla_mcp.logging_config import get_logger
from codzilla_mcp.models import (
    USAGE_GUIDELINES,
    Category,
    ComponentRecord,
    GetComponentByNameArgs,
    GetComponentsArgs,
    GetDesignTokensArgs,
)

if TYPE_CHECKING:
    from codzilla_mcp.server.state import ComponentCache

logger = get_logger("operations")


def matches_category(record: ComponentRecord, category: str) -> bool:
    """True if a directory in the record's path, or its name, matches."""
    if category == "all":
        return True
    directories = PurePosixPath(record.path.replace("\\", "/")).parts[:-1]
    return category in directories or category in record.name.lower()


def find_by_name(
    records: list[ComponentRecord], name: str
) -> ComponentRecord | None:
    """Case-insensitive exact lookup by component name."""
    wanted = name.lower()
    for record in records:
        if record.name.lower() == wanted:
            return record
    return None


@dataclass(frozen=True)
class Operation:
    """An operation's argument schema and bound handler."""

    name: str
    args_model: type[BaseModel]
    handler: Callable[[Any], Awaitable[dict[str, Any]]]
    description: str = ""


class OperationRegistry:
    """Dispatches operation calls by name after validating arguments.

    Validation happens before any cache access, so a malformed call never
    triggers a component scan.
    """

    def __init__(self, cache: ComponentCache) -> None:
        self._cache = cache
        self._operations: dict[str, Operation] = {}
        self.register(
            "get_components",
            GetComponentsArgs,
            self._get_components,
            "Get all available component definitions",
        )
        self.register(
            "get_component_by_name",
            GetComponentByNameArgs,
            self._get_component_by_name,
            "Get specific component definition by name",
        )
        self.register(
            "get_design_tokens",
            GetDesignTokensArgs,
            self._get_design_tokens,
            "Get design system tokens (colors, spacing, typography)",
        )

    def register(
        self,
        name: str,
        args_model: type[BaseModel],
        handler: Callable[[Any], Awaitable[dict[str, Any]]],
        description: str = "",
    ) -> None:
        self._operations[name] = Operation(
            name=name,
            args_model=args_model,
            handler=handler,
            description=description,
        )

    @property
    def names(self) -> list[str]:
        return list(self._operations)

    def get(self, name: str) -> Operation:
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    async def call(
        self, name: str, arguments: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """Validate ``arguments`` against the operation's schema and run it.

        Raises:
            UnknownOperationError: no operation with this name
            ValidationError: arguments do not match the schema
            NotFoundError: the operation could not find its target
        """
        operation = self.get(name)
        args = operation.args_model.model_validate(dict(arguments or {}))
        logger.debug("calling operation %s", name, arguments=args.model_dump())
        return await operation.handler(args)

    # -------------------------------------------------------------------------
    # Typed entry points
    # -------------------------------------------------------------------------

    async def get_components(self, category: Category = "all") -> dict:
        return await self.call("get_components", {"category": category})

    async def get_component_by_name(self, name: str) -> dict:
        return await self.call("get_component_by_name", {"name": name})

    async def get_design_tokens(self) -> dict:
        return await self.call("get_design_tokens")

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    async def _get_components(self, args: GetComponentsArgs) -> dict:
        records = await self._cache.get_all()
        filtered = [r for r in records if matches_category(r, args.category)]
        return {
            "components": [r.model_dump() for r in filtered],
            "usage_guidelines": USAGE_GUIDELINES.model_dump(),
        }

    async def _get_component_by_name(
        self, args: GetComponentByNameArgs
    ) -> dict:
        records = await self._cache.get_all()
        record = find_by_name(records, args.name)
        if record is None:
            raise NotFoundError(
                f"Component {args.name} not found", name=args.name
            )
        return record.model_dump()

    async def _get_design_tokens(self, args: GetDesignTokensArgs) -> dict:
        return get_design_tokens()
