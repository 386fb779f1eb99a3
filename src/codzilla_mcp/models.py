"""Pydantic models for component metadata and operation arguments."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Category = Literal["ui", "layout", "forms", "all"]


class PropInfo(BaseModel):
    """A single property declared in a component's props interface."""

    type: str = Field(description="Type expression as written in source")
    optional: bool = Field(description="True when declared with '?'")


class ComponentRecord(BaseModel):
    """Structural metadata extracted for one component source file."""

    name: str = Field(min_length=1, description="File base name")
    path: str = Field(
        min_length=1, description="Path relative to the project root"
    )
    props: dict[str, PropInfo] = Field(default_factory=dict)
    usage: str = Field(description="Example invocation, required props only")
    dependencies: list[str] = Field(
        default_factory=list, description="Import specifiers in source order"
    )

    def required_props(self) -> list[str]:
        return [n for n, p in self.props.items() if not p.optional]


class UsageGuidelines(BaseModel):
    """Project conventions returned next to component listings."""

    import_pattern: str
    styling: str
    conventions: list[str]


class GetComponentsArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    category: Category = "all"


class GetComponentByNameArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=2, max_length=100)


class GetDesignTokensArgs(BaseModel):
    model_config = ConfigDict(extra="forbid")


USAGE_GUIDELINES = UsageGuidelines(
    import_pattern=(
        "import ComponentName from '@/components/path/ComponentName';"
    ),
    styling="Use Tailwind CSS classes for styling",
    conventions=[
        "Use TypeScript interfaces for props",
        "Export default for main component",
        "Use functional components with hooks",
        "Follow Next.js 13+ App Router conventions",
    ],
)

DEFAULT_COMPONENTS: tuple[ComponentRecord, ...] = (
    ComponentRecord(
        name="Preview",
        path="src/components/Preview.tsx",
        props={"code": PropInfo(type="string", optional=False)},
        usage="<Preview code={generatedCode} />",
        dependencies=["react"],
    ),
    ComponentRecord(
        name="FileExplorer",
        path="src/components/FileExplorer.tsx",
        props={
            "files": PropInfo(type="GeneratedFile[]", optional=False),
            "onOpenFile": PropInfo(
                type="(file: GeneratedFile) => void", optional=False
            ),
            "onDeleteFile": PropInfo(
                type="(path: string) => void", optional=False
            ),
        },
        usage=(
            "<FileExplorer files={files} onOpenFile={handleOpenFile}"
            " onDeleteFile={handleDeleteFile} />"
        ),
        dependencies=["react"],
    ),
)
