"""Regex-based extraction of component metadata from TypeScript sources.

This is a pattern matcher, not a TypeScript parser. The props interface is
located with a single non-nested brace match, so a props block containing
an inline object type such as ``style: { color: string }`` is cut off at
the first closing brace. Lines that do not look like ``name?: type`` are
ignored.
"""

from __future__ import annotations

import re
from pathlib import Path

from codzilla_mcp.logging_config import get_logger
from codzilla_mcp.models import ComponentRecord, PropInfo
from codzilla_mcp.paths import relative_to_root

logger = get_logger("parser")

# first `interface XxxProps { ... }`, body stops at the first '}'
PROPS_INTERFACE_RE = re.compile(r"interface\s+(\w+Props)\s*{([^}]+)}")

# `name: type` or `name?: type`, type runs to ';' or end of line
PROP_RE = re.compile(r"(\w+)(\?)?:\s*([^;]+)")

# one import per line: import ... from 'module'
IMPORT_RE = re.compile(r"""import\s+.*\s+from\s+['"]([^'"]+)['"]""")

COMMENT_PREFIX = "//"


def parse_props(content: str) -> dict[str, PropInfo]:
    """Extract props from the first ``*Props`` interface in ``content``."""
    match = PROPS_INTERFACE_RE.search(content)
    if not match:
        return {}

    props: dict[str, PropInfo] = {}
    for raw_line in match.group(2).split("\n"):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            continue
        for prop in PROP_RE.finditer(line):
            props[prop.group(1)] = PropInfo(
                type=prop.group(3).strip(),
                optional=prop.group(2) is not None,
            )
    return props


def example_value(type_expr: str) -> str:
    """Pick a placeholder JSX expression for a prop of ``type_expr``."""
    if "string" in type_expr:
        return '"example"'
    if "number" in type_expr:
        return "42"
    if "boolean" in type_expr:
        return "true"
    if "function" in type_expr or "=>" in type_expr:
        return "() => {}"
    if "[]" in type_expr:
        return "[]"
    return "{}"


def format_attribute(name: str, type_expr: str) -> str:
    value = example_value(type_expr)
    # string literals are plain JSX attributes, everything else is braced
    if value.startswith('"'):
        return f"{name}={value}"
    return f"{name}={{{value}}}"


def generate_usage(component_name: str, props: dict[str, PropInfo]) -> str:
    """Build ``<Name a={..} b="example" />`` from the required props."""
    attrs = " ".join(
        format_attribute(name, info.type)
        for name, info in props.items()
        if not info.optional
    )
    if attrs:
        return f"<{component_name} {attrs} />"
    return f"<{component_name} />"


def extract_dependencies(content: str) -> list[str]:
    """Import specifiers in order of appearance, duplicates kept."""
    return IMPORT_RE.findall(content)


def fallback_record(path: Path, project_root: Path) -> ComponentRecord:
    """Minimal record used when a file cannot be read or parsed."""
    name = path.stem
    return ComponentRecord(
        name=name,
        path=relative_to_root(path, project_root),
        props={},
        usage=f"<{name} />",
        dependencies=[],
    )


def parse_component(path: Path, project_root: Path) -> ComponentRecord:
    """Parse one component file. Never raises.

    Args:
        path: Component source file
        project_root: Root that the record's ``path`` is made relative to

    Returns:
        The extracted record, or a fallback record on any error
    """
    try:
        content = path.read_text(encoding="utf-8")
        name = path.stem
        props = parse_props(content)
        return ComponentRecord(
            name=name,
            path=relative_to_root(path, project_root),
            props=props,
            usage=generate_usage(name, props),
            dependencies=extract_dependencies(content),
        )
    except Exception as e:
        logger.warning("error parsing component %s: %s", path, e)
        return fallback_record(path, project_root)
