"""Discovery of component source files under a directory tree."""

from __future__ import annotations

from pathlib import Path

from codzilla_mcp.logging_config import get_logger

logger = get_logger("scanner")


class ComponentScanner:
    """Walks a directory tree collecting TypeScript component sources."""

    # plain and JSX-flavoured TypeScript
    COMPONENT_EXTS = (".ts", ".tsx")

    def __init__(self, extensions: tuple[str, ...] | None = None) -> None:
        self.extensions = extensions or self.COMPONENT_EXTS

    def is_component_file(self, path: Path) -> bool:
        return path.name.endswith(self.extensions)

    def scan(self, root: Path) -> list[Path]:
        """Recursively collect component files below ``root``.

        Entries are visited in name order, depth first, so the result is
        stable across runs. A missing or unreadable directory contributes
        nothing; scanning never raises for filesystem errors.
        """
        files: list[Path] = []

        try:
            entries = sorted(root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            # directory doesn't exist or can't be read
            logger.debug("skipping directory %s: %s", root, e)
            return files

        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError:
                continue
            if is_dir:
                files.extend(self.scan(entry))
            elif self.is_component_file(entry):
                files.append(entry)

        return files


def scan_directory(root: Path) -> list[Path]:
    """Scan ``root`` for component files with the default extensions."""
    return ComponentScanner().scan(root)
