"""create-fullstack-app configuration.

Typed settings for a generation run.  Everything uses Pydantic v2 models so
values are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GeneratorSettings(BaseModel):
    """Tunable parameters of the scaffolding engine.

    Instances are created once by the CLI entry point and then passed to
    ``ProjectGenerator``; nothing reads them from a global.
    """

    model_config = ConfigDict(frozen=True)

    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Parent directory; the project root is created inside it",
    )
    npm_command: str = Field(default="npm", min_length=1)
    vite_package: str = Field(default="vite@latest", min_length=1)
    client_template: str = Field(default="react-ts", min_length=1)

    def project_root(self, project_name: str) -> Path:
        """Absolute path of the root for *project_name*.

        Only the parent is resolved; a symlink at the root itself is left
        unfollowed so the collision guard sees it.
        """
        return self.output_dir.resolve() / project_name

    @classmethod
    def from_env(cls) -> "GeneratorSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            CFA_OUTPUT_DIR, CFA_NPM_COMMAND, CFA_VITE_PACKAGE,
            CFA_CLIENT_TEMPLATE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CFA_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["CFA_OUTPUT_DIR"])
        if os.environ.get("CFA_NPM_COMMAND"):
            kwargs["npm_command"] = os.environ["CFA_NPM_COMMAND"]
        if os.environ.get("CFA_VITE_PACKAGE"):
            kwargs["vite_package"] = os.environ["CFA_VITE_PACKAGE"]
        if os.environ.get("CFA_CLIENT_TEMPLATE"):
            kwargs["client_template"] = os.environ["CFA_CLIENT_TEMPLATE"]
        return cls(**kwargs)
