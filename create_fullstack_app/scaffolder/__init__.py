"""create-fullstack-app scaffolder -- generates client/server project trees.

This module takes a resolved ``ProjectConfig`` and renders a project
directory with a Vite React client, an Express server and root-level tooling
configuration.

Quick usage::

    from create_fullstack_app.scaffolder import ProjectConfig, ProjectGenerator

    config = ProjectConfig(project_name="demo", style_library="mantine")
    generator = ProjectGenerator(config)
    project_path = await generator.generate()
"""

from create_fullstack_app.scaffolder.errors import (
    DirectoryExistsError,
    ErrorKind,
    ManifestParseError,
    ScaffoldError,
    ScaffoldIOError,
    ScaffoldToolFailedError,
)
from create_fullstack_app.scaffolder.generator import (
    ProjectConfig,
    ProjectGenerator,
    StyleLibrary,
    run_generation,
)
from create_fullstack_app.scaffolder.templates import TemplateRenderer

__all__ = [
    "DirectoryExistsError",
    "ErrorKind",
    "ManifestParseError",
    "ProjectConfig",
    "ProjectGenerator",
    "ScaffoldError",
    "ScaffoldIOError",
    "ScaffoldToolFailedError",
    "StyleLibrary",
    "TemplateRenderer",
    "run_generation",
]
