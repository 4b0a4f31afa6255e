"""Command-line entry point for create-fullstack-app.

Collects the project name and style library (from arguments or interactive
prompts), runs the scaffolder and prints the next steps.

Usage::

    create-fullstack-app my-app --mantine
    python -m create_fullstack_app my-app -s -o ~/code
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.prompt import Prompt

from create_fullstack_app import __version__
from create_fullstack_app.config import GeneratorSettings
from create_fullstack_app.scaffolder import ProjectConfig, StyleLibrary, run_generation
from create_fullstack_app.utils import console, print_banner, print_error

DEFAULT_PROJECT_NAME = "my-fullstack-app"


class Cancelled(Exception):
    """The user backed out of a prompt."""


# ---------------------------------------------------------------------------
# Config resolution
# ---------------------------------------------------------------------------


def _prompt_project_name() -> str:
    try:
        answer = Prompt.ask("Project name", default=DEFAULT_PROJECT_NAME, console=console)
    except (KeyboardInterrupt, EOFError) as exc:
        raise Cancelled from exc
    if not answer or not answer.strip():
        raise Cancelled
    return answer


def _prompt_style_library() -> StyleLibrary:
    try:
        answer = Prompt.ask(
            "Choose styling library",
            choices=[s.value for s in StyleLibrary],
            console=console,
        )
    except (KeyboardInterrupt, EOFError) as exc:
        raise Cancelled from exc
    if not answer:
        raise Cancelled
    return StyleLibrary(answer)


def resolve_config(
    project_name: str | None,
    style_library: StyleLibrary | None,
) -> ProjectConfig:
    """Fill in whatever the command line left out by prompting.

    Raises:
        Cancelled: A prompt was aborted or left empty.
        ValidationError: The project name is not filesystem-safe.
    """
    name = project_name or _prompt_project_name()
    style = style_library or _prompt_style_library()
    return ProjectConfig(project_name=name, style_library=style)


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


def print_next_steps(config: ProjectConfig) -> None:
    """Print the commands to run inside the new project."""
    console.print("\n[cyan]📂 Next steps:[/cyan]")
    console.print(f"   [bold]cd {config.project_name}[/bold]")
    console.print("   [bold]npm run install:all[/bold]")
    console.print("   [bold]npm run prepare[/bold]          # Setup Git hooks")
    if config.style_library is StyleLibrary.SHADCN:
        console.print("   [bold]cd client && npx shadcn@latest init && cd ..[/bold]")
    else:
        console.print("   [bold]cd client && npm install @mantine/core @mantine/hooks && cd ..[/bold]")
    console.print("   [bold]npm run dev[/bold]")
    console.print("\n[cyan]🧪 Run tests:[/cyan]")
    console.print("   [bold]npm test[/bold]")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-fullstack-app",
        description="Scaffold a full-stack TypeScript app (Vite React client + Express server)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-fullstack-app my-app --shadcn\n"
            "  create-fullstack-app my-app -m -o ~/code\n"
            "  create-fullstack-app            # prompts for everything\n"
        ),
    )
    parser.add_argument("project_name", nargs="?", default=None, help="Project name")
    style = parser.add_mutually_exclusive_group()
    style.add_argument(
        "-s", "--shadcn",
        dest="style_library", action="store_const", const=StyleLibrary.SHADCN,
        help="Use shadcn/ui",
    )
    style.add_argument(
        "-m", "--mantine",
        dest="style_library", action="store_const", const=StyleLibrary.MANTINE,
        help="Use Mantine",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-fullstack-app``."""
    args = build_parser().parse_args(argv)

    print_banner("🚀 Create My Fullstack App")

    try:
        config = resolve_config(args.project_name, args.style_library)
    except Cancelled:
        print_error("\n✖ Operation cancelled")
        sys.exit(0)
    except ValidationError as exc:
        message = exc.errors()[0]["msg"] if exc.errors() else str(exc)
        print_error(f"\n✖ Invalid project name: {message}")
        sys.exit(1)

    settings = GeneratorSettings.from_env()
    if args.output:
        settings = settings.model_copy(update={"output_dir": Path(args.output)})

    exit_code = asyncio.run(run_generation(config, settings))
    if exit_code == 0:
        print_next_steps(config)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
