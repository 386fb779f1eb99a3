"""Server state management."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Literal

from codzilla_mcp.component_parser import parse_component
from codzilla_mcp.component_scanner import scan_directory
from codzilla_mcp.logging_config import get_logger
from codzilla_mcp.models import DEFAULT_COMPONENTS, ComponentRecord
from codzilla_mcp.server.config import ServerConfig
from codzilla_mcp.server.operations import OperationRegistry
from codzilla_mcp.server.resources import ResourceRegistry

logger = get_logger("state")

CacheState = Literal["empty", "loading", "populated"]


class ComponentCache:
    """Lazily loaded, process-lifetime list of component records.

    The first ``get_all()`` scans and parses the components directory;
    concurrent first callers wait for that single load instead of starting
    their own. Nothing invalidates the cache automatically.
    """

    def __init__(
        self,
        components_dir: Path,
        project_root: Path,
        scanner: Callable[[Path], list[Path]] = scan_directory,
        parser: Callable[[Path, Path], ComponentRecord] = parse_component,
        defaults: Sequence[ComponentRecord] = DEFAULT_COMPONENTS,
    ) -> None:
        self._components_dir = components_dir
        self._project_root = project_root
        self._scanner = scanner
        self._parser = parser
        self._defaults = tuple(defaults)
        self._records: list[ComponentRecord] = []
        self._state: CacheState = "empty"
        self._load_lock: asyncio.Lock | None = None
        self._loaded_at: float | None = None
        self.load_count = 0

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def loaded_at(self) -> float | None:
        return self._loaded_at

    @property
    def components_dir(self) -> Path:
        return self._components_dir

    async def get_all(self) -> list[ComponentRecord]:
        """Return every cached record, loading them on first use."""
        if self._state == "populated":
            return self._records

        if self._load_lock is None:
            self._load_lock = asyncio.Lock()

        async with self._load_lock:
            # another caller may have finished the load while we waited
            if self._state != "populated":
                self._state = "loading"
                try:
                    self._records = await self._load()
                except BaseException:
                    self._state = "empty"
                    raise
                self._loaded_at = time.time()
                self._state = "populated"
        return self._records

    def invalidate(self) -> None:
        """Drop cached records so the next read rescans.

        Not called by the server itself; kept for callers that need a
        refresh after the component tree changes.
        """
        self._records = []
        self._loaded_at = None
        self._state = "empty"

    async def _load(self) -> list[ComponentRecord]:
        self.load_count += 1
        start = time.perf_counter()
        try:
            files = await asyncio.to_thread(
                self._scanner, self._components_dir
            )
            # gather keeps discovery order regardless of completion order
            records = list(
                await asyncio.gather(
                    *(
                        asyncio.to_thread(self._parser, f, self._project_root)
                        for f in files
                    )
                )
            )
        except Exception as e:
            logger.error(
                "error loading components, using defaults",
                components_dir=str(self._components_dir),
                error=str(e),
            )
            return list(self._defaults)

        if not records:
            logger.warning(
                "no components found, using defaults",
                components_dir=str(self._components_dir),
            )
            return list(self._defaults)

        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "loaded %d components in %.0fms", len(records), elapsed_ms
        )
        return records


class ServerState:
    """Core server state shared by tools, resources and the HTTP layer."""

    def __init__(
        self,
        config: ServerConfig | None = None,
        cache: ComponentCache | None = None,
    ) -> None:
        self._config = config or ServerConfig.from_env()
        if cache is None:
            cache = ComponentCache(
                components_dir=self._config.resolved_components_dir,
                project_root=self._config.project_root,
            )
        self._cache = cache
        self._operations = OperationRegistry(self._cache)
        self._resources = ResourceRegistry(self._cache)
        self.started_at = time.time()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def config(self) -> ServerConfig:
        return self._config

    @property
    def cache(self) -> ComponentCache:
        return self._cache

    @property
    def operations(self) -> OperationRegistry:
        return self._operations

    @property
    def resources(self) -> ResourceRegistry:
        return self._resources
