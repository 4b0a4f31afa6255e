"""Tests for the ``npm create vite`` invocation.

Covers:
- Command construction from settings
- Child process inherits the terminal with no timeout
- Non-zero exit and missing executable become ScaffoldToolFailedError
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from create_fullstack_app.config import GeneratorSettings
from create_fullstack_app.scaffolder.errors import ErrorKind, ScaffoldToolFailedError
from create_fullstack_app.scaffolder.frontend import FrontendScaffolder

pytestmark = pytest.mark.unit

RUN_COMMAND = "create_fullstack_app.scaffolder.frontend.run_command"


class TestCommand:
    def test_default_command(self):
        scaffolder = FrontendScaffolder(GeneratorSettings())
        assert scaffolder.command() == [
            "npm", "create", "vite@latest", "client", "--", "--template", "react-ts",
        ]

    def test_command_from_settings(self):
        settings = GeneratorSettings(
            npm_command="pnpm", vite_package="vite@5", client_template="react-swc-ts"
        )
        cmd = FrontendScaffolder(settings).command()
        assert cmd == ["pnpm", "create", "vite@5", "client", "--", "--template", "react-swc-ts"]


class TestRun:
    async def test_success_returns_client_root(self, tmp_path: Path):
        mock = AsyncMock(return_value=(0, "", ""))
        scaffolder = FrontendScaffolder(GeneratorSettings())

        with patch(RUN_COMMAND, mock):
            client_root = await scaffolder.run(tmp_path)

        assert client_root == tmp_path / "client"
        mock.assert_awaited_once_with(
            scaffolder.command(), cwd=tmp_path, timeout=None, capture=False
        )

    async def test_nonzero_exit_raises(self, tmp_path: Path):
        scaffolder = FrontendScaffolder(GeneratorSettings())

        with patch(RUN_COMMAND, AsyncMock(return_value=(1, "", ""))):
            with pytest.raises(ScaffoldToolFailedError) as exc_info:
                await scaffolder.run(tmp_path)

        err = exc_info.value
        assert err.kind is ErrorKind.SCAFFOLD_TOOL_FAILED
        assert err.stage == "frontend-scaffold"
        assert err.returncode == 1
        assert err.command == "npm create vite@latest client -- --template react-ts"

    async def test_missing_executable_raises(self, tmp_path: Path):
        scaffolder = FrontendScaffolder(GeneratorSettings(npm_command="no-such-npm"))
        missing = AsyncMock(side_effect=FileNotFoundError("no-such-npm"))

        with patch(RUN_COMMAND, missing):
            with pytest.raises(ScaffoldToolFailedError) as exc_info:
                await scaffolder.run(tmp_path)

        assert exc_info.value.returncode is None
        assert "no-such-npm not found" in exc_info.value.message
