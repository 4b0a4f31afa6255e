"""Shared pytest fixtures for the create-fullstack-app test suite.

Provides reusable fixtures for:
- Generator settings pointing at a temporary output directory
- Ready-made project configs for both style libraries
- A fake ``npm create vite`` that writes a minimal client skeleton
- A helper that snapshots a generated tree for comparison
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock, patch

import pytest

from create_fullstack_app.config import GeneratorSettings
from create_fullstack_app.scaffolder import ProjectConfig, StyleLibrary


# ---------------------------------------------------------------------------
# Vite skeleton
# ---------------------------------------------------------------------------

VITE_PACKAGE_JSON: dict[str, Any] = {
    "name": "client",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {
        "dev": "vite",
        "build": "tsc -b && vite build",
        "lint": "eslint .",
        "preview": "vite preview",
    },
    "dependencies": {
        "react": "^18.3.1",
        "react-dom": "^18.3.1",
    },
    "devDependencies": {
        "@vitejs/plugin-react": "^4.3.1",
        "typescript": "^5.5.3",
        "vite": "^5.4.1",
    },
}

VITE_TSCONFIG: dict[str, Any] = {
    "files": [],
    "references": [
        {"path": "./tsconfig.app.json"},
        {"path": "./tsconfig.node.json"},
    ],
}


async def _fake_vite(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: float | None = None,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Stand-in for ``run_command`` that mimics what Vite leaves on disk."""
    client = Path(cwd) / cmd[3]
    (client / "src").mkdir(parents=True)
    (client / "package.json").write_text(
        json.dumps(VITE_PACKAGE_JSON, indent=2) + "\n", encoding="utf-8"
    )
    (client / "tsconfig.json").write_text(
        json.dumps(VITE_TSCONFIG, indent=2) + "\n", encoding="utf-8"
    )
    (client / "src" / "App.tsx").write_text(
        "export default function App() {\n  return <h1>Vite + React</h1>\n}\n",
        encoding="utf-8",
    )
    return (0, "", "")


@pytest.fixture
def fake_vite() -> AsyncMock:
    """Patch the frontend tool so no real ``npm`` process is started."""
    mock = AsyncMock(side_effect=_fake_vite)
    with patch("create_fullstack_app.scaffolder.frontend.run_command", mock):
        yield mock


# ---------------------------------------------------------------------------
# Configs
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path: Path) -> GeneratorSettings:
    """Settings that generate projects inside ``tmp_path``."""
    return GeneratorSettings(output_dir=tmp_path)


@pytest.fixture
def mantine_config() -> ProjectConfig:
    return ProjectConfig(project_name="demo", style_library=StyleLibrary.MANTINE)


@pytest.fixture
def shadcn_config() -> ProjectConfig:
    return ProjectConfig(project_name="demo", style_library=StyleLibrary.SHADCN)


# ---------------------------------------------------------------------------
# Tree helpers
# ---------------------------------------------------------------------------

def _snapshot(root: Path) -> dict[str, bytes | None]:
    """Map every path under *root* to its bytes (``None`` for directories)."""
    tree: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        tree[rel] = None if path.is_dir() else path.read_bytes()
    return tree


@pytest.fixture
def snapshot_tree() -> Callable[[Path], dict[str, bytes | None]]:
    return _snapshot
