"""Path resolution for the scanned project.

codzilla reads component sources from a single directory inside a project:

Environment variables:
    CODZILLA_PROJECT_ROOT: Project root that record paths are made
        relative to (default: current working directory).
    CODZILLA_COMPONENTS_DIR: Directory to scan for components. Relative
        values are resolved against the project root
        (default: <root>/src/components).
"""

from __future__ import annotations

import os
from pathlib import Path

# Environment variable names
ENV_PROJECT_ROOT = "CODZILLA_PROJECT_ROOT"
ENV_COMPONENTS_DIR = "CODZILLA_COMPONENTS_DIR"

# Default components location inside a project
DEFAULT_COMPONENTS_SUBDIR = Path("src") / "components"


def get_project_root(root: Path | None = None) -> Path:
    """Get the project root.

    Priority:
    1. Explicit ``root`` argument
    2. CODZILLA_PROJECT_ROOT env var
    3. Current working directory
    """
    if root is not None:
        return root.resolve()

    env_root = os.environ.get(ENV_PROJECT_ROOT)
    if env_root:
        return Path(env_root).resolve()

    return Path.cwd()


def get_components_dir(
    project_root: Path | None = None,
    components_dir: Path | None = None,
) -> Path:
    """Get the directory that holds component sources.

    Args:
        project_root: Project root (default: from get_project_root())
        components_dir: Explicit override; relative paths are resolved
            against the project root

    Returns:
        Absolute path to the components directory. The directory is not
        required to exist.
    """
    root = get_project_root(project_root)

    if components_dir is None:
        env_dir = os.environ.get(ENV_COMPONENTS_DIR)
        if env_dir:
            components_dir = Path(env_dir)

    if components_dir is None:
        return root / DEFAULT_COMPONENTS_SUBDIR
    if not components_dir.is_absolute():
        return root / components_dir
    return components_dir


def relative_to_root(path: Path, project_root: Path) -> str:
    """Render ``path`` relative to the project root, POSIX separators.

    Paths outside the root keep their ``..`` segments.
    """
    return Path(os.path.relpath(path, project_root)).as_posix()
