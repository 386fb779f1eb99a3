"""Tests for the operation registry."""

from pathlib import Path

import pytest

from codzilla_mcp.design_tokens import DESIGN_TOKENS
from codzilla_mcp.errors import (
    NotFoundError,
    UnknownOperationError,
    ValidationError,
)
from codzilla_mcp.models import USAGE_GUIDELINES, ComponentRecord
from codzilla_mcp.server.operations import (
    OperationRegistry,
    find_by_name,
    matches_category,
)
from codzilla_mcp.server.state import ComponentCache


def _record(name: str, path: str) -> ComponentRecord:
    return ComponentRecord(name=name, path=path, usage=f"<{name} />")


class TestMatchesCategory:
    def test_all_matches_everything(self):
        assert matches_category(_record("X", "a/b/X.tsx"), "all")

    def test_directory_segment(self):
        record = _record("Button", "src/components/ui/Button.tsx")
        assert matches_category(record, "ui")
        assert not matches_category(record, "forms")

    def test_partial_segment_does_not_match(self):
        record = _record("Button", "src/components/uikit/Button.tsx")
        assert not matches_category(record, "ui")

    def test_name_contains_category(self):
        record = _record("PageLayout", "src/components/PageLayout.tsx")
        assert matches_category(record, "layout")

    def test_file_name_is_not_a_directory_segment(self):
        record = _record("Thing", "src/components/ui")
        assert not matches_category(record, "ui")


class TestFindByName:
    def test_case_insensitive(self):
        records = [_record("Button", "Button.tsx")]
        assert find_by_name(records, "bUtToN") is records[0]

    def test_exact_only(self):
        records = [_record("Button", "Button.tsx")]
        assert find_by_name(records, "Butt") is None


@pytest.mark.asyncio
class TestOperationRegistry:
    @pytest.fixture
    def registry(self, cache: ComponentCache) -> OperationRegistry:
        return OperationRegistry(cache)

    async def test_names(self, registry: OperationRegistry):
        assert registry.names == [
            "get_components",
            "get_component_by_name",
            "get_design_tokens",
        ]

    async def test_get_components_all(
        self, registry: OperationRegistry, cache: ComponentCache
    ):
        result = await registry.get_components("all")
        assert len(result["components"]) == len(await cache.get_all())
        assert result["usage_guidelines"] == USAGE_GUIDELINES.model_dump()
        assert len(result["usage_guidelines"]["conventions"]) == 4

    async def test_get_components_default_category(
        self, registry: OperationRegistry
    ):
        result = await registry.call("get_components", {})
        assert len(result["components"]) == 4

    @pytest.mark.parametrize(
        ("category", "expected"),
        [("ui", ["Button"]), ("layout", ["Header"]), ("forms", ["LoginForm"])],
    )
    async def test_get_components_filtered(
        self, registry: OperationRegistry, category: str, expected: list[str]
    ):
        result = await registry.get_components(category)
        names = [c["name"] for c in result["components"]]
        assert names == expected
        for c in result["components"]:
            assert f"/{category}/" in c["path"] or category in c["name"].lower()

    async def test_get_components_bad_category(
        self, registry: OperationRegistry, cache: ComponentCache
    ):
        with pytest.raises(ValidationError):
            await registry.call("get_components", {"category": "widgets"})
        # rejected before the cache was touched
        assert cache.state == "empty"

    async def test_get_components_unexpected_argument(
        self, registry: OperationRegistry
    ):
        with pytest.raises(ValidationError):
            await registry.call("get_components", {"kind": "ui"})

    @pytest.mark.parametrize("name", ["button", "BUTTON", "Button"])
    async def test_get_component_by_name(
        self, registry: OperationRegistry, name: str
    ):
        record = await registry.get_component_by_name(name)
        assert record["name"] == "Button"
        assert record["path"] == "src/components/ui/Button.tsx"

    async def test_get_component_by_name_not_found(
        self, registry: OperationRegistry
    ):
        with pytest.raises(NotFoundError, match="Component Nope not found"):
            await registry.get_component_by_name("Nope")

    @pytest.mark.parametrize("name", ["x", "y" * 101])
    async def test_get_component_by_name_length_bounds(
        self, registry: OperationRegistry, cache: ComponentCache, name: str
    ):
        with pytest.raises(ValidationError):
            await registry.get_component_by_name(name)
        assert cache.state == "empty"

    async def test_get_component_by_name_length_limits_inclusive(
        self, tmp_path: Path
    ):
        for name in ("Ab", "Z" * 100):
            (tmp_path / f"{name}.tsx").write_text("")
        registry = OperationRegistry(ComponentCache(tmp_path, tmp_path))
        assert (await registry.get_component_by_name("ab"))["name"] == "Ab"
        long_name = "z" * 100
        assert (await registry.get_component_by_name(long_name))["name"] == (
            "Z" * 100
        )

    async def test_lookup_is_total_over_cache(
        self, registry: OperationRegistry, cache: ComponentCache
    ):
        for record in await cache.get_all():
            found = await registry.get_component_by_name(record.name.upper())
            assert found == record.model_dump()

    async def test_get_design_tokens(
        self, registry: OperationRegistry, cache: ComponentCache
    ):
        tokens = await registry.get_design_tokens()
        assert tokens == DESIGN_TOKENS
        assert tokens["colors"]["primary"]["500"] == "#3b82f6"
        assert tokens["typography"]["fontFamily"] == "Inter, sans-serif"
        assert cache.state == "empty"

    async def test_design_tokens_are_copies(self, registry: OperationRegistry):
        tokens = await registry.get_design_tokens()
        tokens["colors"]["success"] = "#000000"
        assert DESIGN_TOKENS["colors"]["success"] == "#10b981"

    async def test_unknown_operation(self, registry: OperationRegistry):
        with pytest.raises(UnknownOperationError, match="explode"):
            await registry.call("explode", {})

    async def test_defaults_when_no_components(self, tmp_path: Path):
        registry = OperationRegistry(ComponentCache(tmp_path, tmp_path))
        result = await registry.get_components("all")
        assert [c["name"] for c in result["components"]] == [
            "Preview",
            "FileExplorer",
        ]
        preview = await registry.get_component_by_name("preview")
        assert preview["usage"] == "<Preview code={generatedCode} />"
