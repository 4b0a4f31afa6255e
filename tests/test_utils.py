"""Unit tests for utility functions (create_fullstack_app.utils).

Tests cover:
- run_command (success, failure, timeout, env vars, capture=False, missing program)
- Rich output helpers
"""

from __future__ import annotations

import sys

import pytest

from create_fullstack_app.utils import (
    print_banner,
    print_error,
    print_step,
    print_success,
    print_warning,
    run_command,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    async def test_successful_command(self):
        returncode, stdout, stderr = await run_command(["echo", "hello"])
        assert returncode == 0
        assert stdout == "hello"
        assert stderr == ""

    @pytest.mark.unit
    async def test_failing_command(self):
        returncode, _, stderr = await run_command(
            [sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"]
        )
        assert returncode == 3
        assert stderr == "boom"

    @pytest.mark.unit
    async def test_cwd(self, tmp_path):
        _, stdout, _ = await run_command(["pwd"], cwd=tmp_path)
        assert stdout == str(tmp_path)

    @pytest.mark.unit
    async def test_env_merged(self):
        script = "import os; print(os.environ['CFA_TEST_VAR'], bool(os.environ.get('PATH')))"
        _, stdout, _ = await run_command(
            [sys.executable, "-c", script],
            env={"CFA_TEST_VAR": "value"},
        )
        assert stdout == "value True"

    @pytest.mark.unit
    async def test_timeout_kills_process(self):
        returncode, _, stderr = await run_command(["sleep", "10"], timeout=0.2)
        assert returncode == -1
        assert "timed out" in stderr

    @pytest.mark.unit
    async def test_no_capture(self):
        returncode, stdout, stderr = await run_command(["true"], capture=False)
        assert (returncode, stdout, stderr) == (0, "", "")

    @pytest.mark.unit
    async def test_missing_program_raises(self):
        with pytest.raises(FileNotFoundError):
            await run_command(["definitely-not-a-real-program-cfa"])


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    def test_stdout_helpers(self, capsys):
        print_banner("Create App")
        print_step("Setting up backend...")
        print_success("done")
        print_warning("careful")
        out = capsys.readouterr().out
        assert "Create App" in out
        assert "Setting up backend..." in out
        assert "done" in out
        assert "careful" in out

    @pytest.mark.unit
    def test_error_goes_to_stderr(self, capsys):
        print_error("broken")
        captured = capsys.readouterr()
        assert "broken" in captured.err
        assert "broken" not in captured.out
