"""Main scaffolding orchestrator.

Takes a resolved ``ProjectConfig`` and generates a client/server project
directory: a Vite React client (created by ``npm create vite``, then patched),
an Express server, and the root-level manifest, lint/format config and README.

The run is strictly sequential.  Every stage awaits its writes before the
next one starts, and any failure ends the run; nothing is retried or rolled
back.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import GeneratorSettings
from ..utils import print_error, print_step, print_success, print_warning
from . import blueprint
from .blueprint import SERVER_DIR, TemplateFile
from .errors import DirectoryExistsError, ScaffoldError, ScaffoldIOError
from .frontend import FrontendScaffolder
from .guard import guard_target
from .manifest import merge_manifest, write_manifest
from .planner import create_directories
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------

_PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


class StyleLibrary(str, Enum):
    """UI component library baked into the generated client docs."""
    SHADCN = "shadcn"
    MANTINE = "mantine"


class ProjectConfig(BaseModel):
    """Pydantic model describing the project to scaffold."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory and package name of the project")
    style_library: StyleLibrary = Field(..., description="shadcn or mantine")

    @field_validator("project_name")
    @classmethod
    def _filesystem_safe(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("Project name is required")
        if not _PROJECT_NAME_PATTERN.match(name):
            raise ValueError(
                "Project name may only contain letters, digits, '.', '_' and '-' "
                "and must start with a letter or digit"
            )
        return name


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectConfig``, generates:
    - ``client/`` from the Vite react-ts template, with test scripts, path
      aliases, services, hooks and example components added
    - ``server/`` with an Express app split into user and health modules
    - root ``package.json``, ``.gitignore``, ESLint/Prettier config and README
    """

    def __init__(
        self,
        config: ProjectConfig,
        settings: GeneratorSettings | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or GeneratorSettings()
        self.renderer = TemplateRenderer()
        self.frontend = FrontendScaffolder(self.settings)

    @property
    def project_root(self) -> Path:
        return self.settings.project_root(self.config.project_name)

    # -- Public API --------------------------------------------------------

    async def generate(self) -> Path:
        """Generate the complete project structure.

        Returns:
            Path to the generated project root.

        Raises:
            DirectoryExistsError: The project root already exists.  Nothing
                has been written.
            ScaffoldToolFailedError: ``npm create vite`` failed.
            ScaffoldIOError: A filesystem operation failed in some stage.
        """
        root = self.project_root
        context = self._build_context()

        # 1. Nothing may be written before this check
        with _stage("guard"):
            guard_target(root)

        # 2. Project root
        print_step(f"Creating project at {root}...")
        with _stage("create-root"):
            await asyncio.to_thread(root.mkdir)

        # 3. Frontend skeleton from the external tool
        print_step("Setting up frontend...")
        with _stage("frontend-scaffold"):
            client_root = await self.frontend.run(root)

        # 4. Patch the manifests Vite just wrote
        with _stage("client-manifest"):
            await merge_manifest(client_root / "package.json", blueprint.CLIENT_MANIFEST_PATCH)
            await merge_manifest(client_root / "tsconfig.json", blueprint.CLIENT_TSCONFIG_PATCH)

        # 5. Client directories and source files
        with _stage("client-files"):
            await create_directories(client_root, _under_src(blueprint.CLIENT_SRC_DIRS))
            await self._render_all(blueprint.CLIENT_TEMPLATES, client_root, context)

        # 6. Server package and its manifest (fresh, nothing to merge)
        print_step("Setting up backend...")
        server_root = root / SERVER_DIR
        with _stage("server-manifest"):
            await asyncio.to_thread(server_root.mkdir)
            await write_manifest(
                server_root / "package.json",
                blueprint.server_manifest(self.config.project_name),
            )
            await write_manifest(server_root / "tsconfig.json", blueprint.server_tsconfig())

        # 7. Server directories and source files
        with _stage("server-files"):
            await create_directories(server_root, _under_src(blueprint.SERVER_SRC_DIRS))
            await self._render_all(blueprint.SERVER_TEMPLATES, server_root, context)

        # 8. Root-level files
        with _stage("root-files"):
            await self._render_root(root, context)

        return root

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the project config."""
        name = self.config.project_name
        return {
            "project_name": name,
            "style_library": self.config.style_library.value,
        }

    # -- Rendering ---------------------------------------------------------

    async def _render_all(
        self,
        templates: Sequence[TemplateFile],
        package_root: Path,
        ctx: dict[str, Any],
    ) -> list[Path]:
        """Render each template to its output under *package_root*, in order."""
        written: list[Path] = []
        for item in templates:
            out = package_root.joinpath(*item.output.split("/"))
            written.append(await self.renderer.render_to_file(item.template, out, ctx))
        return written

    async def _render_root(self, root: Path, ctx: dict[str, Any]) -> None:
        """Render the root manifest, lint/format configs, ignore file and README."""
        await write_manifest(
            root / "package.json", blueprint.root_manifest(self.config.project_name)
        )
        await write_manifest(root / ".eslintrc.json", blueprint.eslint_config())
        await write_manifest(root / ".prettierrc.json", blueprint.prettier_config())
        await self._render_all(blueprint.ROOT_TEMPLATES, root, ctx)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

async def run_generation(
    config: ProjectConfig,
    settings: GeneratorSettings | None = None,
) -> int:
    """Run one generation and translate the outcome into a process exit code.

    Returns:
        ``0`` on success, ``1`` on any ``ScaffoldError``.
    """
    generator = ProjectGenerator(config, settings)
    try:
        root = await generator.generate()
    except ScaffoldError as exc:
        print_error(f"\n✖ {exc.kind.value} during {exc.stage}: {exc.message}")
        if not isinstance(exc, DirectoryExistsError) and generator.project_root.exists():
            print_warning(f"Partially generated files were left in {generator.project_root}")
        return 1

    print_success(f"\n✅ Project created successfully at {root}")
    return 0


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@contextmanager
def _stage(name: str) -> Iterator[None]:
    """Convert an ``OSError`` raised inside a stage into ``ScaffoldIOError``."""
    try:
        yield
    except ScaffoldError:
        raise
    except OSError as exc:
        raise ScaffoldIOError(name, str(exc)) from exc


def _under_src(dirs: Sequence[str]) -> list[str]:
    return [f"src/{d}" for d in dirs]
