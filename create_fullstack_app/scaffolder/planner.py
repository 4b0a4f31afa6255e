"""Directory planning for generated packages.

Expands a list of relative directories into an ordered plan where every
ancestor precedes its descendants, then creates the plan one level at a time.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from pathlib import Path, PurePosixPath


def expand_directories(relative_dirs: Iterable[str]) -> list[PurePosixPath]:
    """Return *relative_dirs* with all ancestors inserted parent-first.

    Duplicates are dropped and first-seen order is kept, e.g.
    ``["modules/user", "modules/health"]`` becomes
    ``[modules, modules/user, modules/health]``.

    Raises:
        ValueError: If an entry is absolute or climbs out of the root.
    """
    plan: list[PurePosixPath] = []
    seen: set[PurePosixPath] = set()

    for raw in relative_dirs:
        rel = PurePosixPath(raw)
        if rel.is_absolute() or ".." in rel.parts:
            raise ValueError(f"Directory must be relative to the package root: {raw!r}")

        parts = [p for p in rel.parts if p != "."]
        for depth in range(1, len(parts) + 1):
            candidate = PurePosixPath(*parts[:depth])
            if candidate not in seen:
                seen.add(candidate)
                plan.append(candidate)

    return plan


def _mkdir(path: Path) -> None:
    # Single level only; a missing parent means the plan is out of order.
    path.mkdir(exist_ok=True)


async def create_directories(
    root: str | Path,
    relative_dirs: Iterable[str],
    *,
    mkdir: Callable[[Path], None] = _mkdir,
) -> list[Path]:
    """Create every planned directory under *root*, in order.

    Already-existing directories are accepted.  *root* itself must exist.

    Args:
        root: Existing package directory the plan is relative to.
        relative_dirs: Directories to create (POSIX-style relative paths).
        mkdir: Callable that creates exactly one directory level.

    Returns:
        Absolute paths in the order they were created.
    """
    base = Path(root)
    if not base.is_dir():
        raise FileNotFoundError(f"Package root does not exist: {base}")

    created: list[Path] = []
    for rel in expand_directories(relative_dirs):
        target = base.joinpath(*rel.parts)
        await asyncio.to_thread(mkdir, target)
        created.append(target)
    return created
