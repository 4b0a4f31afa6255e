"""External frontend scaffold invocation.

Delegates the client skeleton to ``npm create vite@latest``.  The child
inherits the terminal so the user sees its output and can answer any of its
prompts; there is no timeout because the tool may download packages.
"""

from __future__ import annotations

from pathlib import Path

from ..config import GeneratorSettings
from ..utils import run_command
from .blueprint import CLIENT_DIR
from .errors import ScaffoldToolFailedError


class FrontendScaffolder:
    """Runs the Vite project generator inside the project root."""

    def __init__(self, settings: GeneratorSettings) -> None:
        self.settings = settings

    def command(self) -> list[str]:
        """Return the argv that creates the client package."""
        s = self.settings
        return [
            s.npm_command,
            "create",
            s.vite_package,
            CLIENT_DIR,
            "--",
            "--template",
            s.client_template,
        ]

    async def run(self, project_root: Path) -> Path:
        """Create ``<project_root>/client`` and block until the tool exits.

        Returns:
            Path to the created client package.

        Raises:
            ScaffoldToolFailedError: If the command is missing or exits non-zero.
        """
        cmd = self.command()
        cmd_str = " ".join(cmd)
        try:
            returncode, _, _ = await run_command(
                cmd, cwd=project_root, timeout=None, capture=False
            )
        except FileNotFoundError as exc:
            raise ScaffoldToolFailedError(cmd_str, None, f"{cmd[0]} not found: {exc}") from exc

        if returncode != 0:
            raise ScaffoldToolFailedError(cmd_str, returncode)

        return project_root / CLIENT_DIR
