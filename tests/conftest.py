"""Shared fixtures: a small component tree on disk."""

from pathlib import Path
from textwrap import dedent

import pytest

from codzilla_mcp.server.config import ServerConfig
from codzilla_mcp.server.state import ComponentCache, ServerState

BUTTON_TSX = dedent("""
    import React from 'react';
    import clsx from "clsx";

    interface ButtonProps {
      // visible text
      label: string;
      onClick: () => void;
      disabled?: boolean;
    }

    export default function Button({ label, onClick }: ButtonProps) {
      return <button onClick={onClick}>{label}</button>;
    }
""").lstrip()

HEADER_TSX = dedent("""
    import React from 'react';

    interface HeaderProps {
      title: string;
      subtitle?: string;
    }

    export default function Header({ title }: HeaderProps) {
      return <h1>{title}</h1>;
    }
""").lstrip()

LOGIN_FORM_TSX = dedent("""
    import React from 'react';
    import { useForm } from 'react-hook-form';

    export default function LoginForm() {
      return <form />;
    }
""").lstrip()

UTILS_TS = dedent("""
    export const cx = (...names: string[]) => names.join(" ");
""").lstrip()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project with ui/, layout/ and forms/ components plus a helper."""
    components = tmp_path / "src" / "components"
    (components / "ui").mkdir(parents=True)
    (components / "layout").mkdir()
    (components / "forms").mkdir()
    (components / "ui" / "Button.tsx").write_text(BUTTON_TSX)
    (components / "layout" / "Header.tsx").write_text(HEADER_TSX)
    (components / "forms" / "LoginForm.tsx").write_text(LOGIN_FORM_TSX)
    (components / "utils.ts").write_text(UTILS_TS)
    (components / "README.md").write_text("# not a component\n")
    return tmp_path


@pytest.fixture
def config(project_root: Path) -> ServerConfig:
    return ServerConfig(
        host="127.0.0.1",
        port=3333,
        project_root=project_root,
        components_dir=project_root / "src" / "components",
    )


@pytest.fixture
def cache(config: ServerConfig) -> ComponentCache:
    return ComponentCache(
        components_dir=config.resolved_components_dir,
        project_root=config.project_root,
    )


@pytest.fixture
def state(config: ServerConfig, cache: ComponentCache) -> ServerState:
    return ServerState(config, cache=cache)
