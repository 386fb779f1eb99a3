"""Read-only resource views over the component cache."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from codzilla_mcp.errors import NotFoundError
from codzilla_mcp.server.operations import find_by_name

if TYPE_CHECKING:
    from codzilla_mcp.server.state import ComponentCache

ALL_COMPONENTS_URI = "components://all"
COMPONENT_URI_TEMPLATE = "component://{name}"
JSON_MIME_TYPE = "application/json"

_COMPONENT_URI_RE = re.compile(r"^component://(?P<name>[^/]+)$")


@dataclass(frozen=True)
class ResourceContents:
    uri: str
    text: str
    mime_type: str = JSON_MIME_TYPE


def _dumps(payload: object) -> str:
    return json.dumps(payload, indent=2)


class ResourceRegistry:
    """Resolves resource URIs to JSON text.

    A missing component is reported inside the payload rather than raised,
    unlike the ``get_component_by_name`` operation.
    """

    def __init__(self, cache: ComponentCache) -> None:
        self._cache = cache

    async def read_all(self) -> str:
        records = await self._cache.get_all()
        return _dumps([r.model_dump() for r in records])

    async def read_component(self, name: str) -> str:
        records = await self._cache.get_all()
        record = find_by_name(records, name)
        if record is None:
            return _dumps({"error": f"Component {name} not found"})
        return _dumps(record.model_dump())

    async def read(self, uri: str) -> ResourceContents:
        """Read a resource by URI.

        Raises:
            NotFoundError: ``uri`` matches neither the fixed address nor
                the component template
        """
        if uri == ALL_COMPONENTS_URI:
            return ResourceContents(uri=uri, text=await self.read_all())

        match = _COMPONENT_URI_RE.match(uri)
        if match:
            text = await self.read_component(match.group("name"))
            return ResourceContents(uri=uri, text=text)

        raise NotFoundError(f"Unknown resource: {uri}", name=uri)
