"""Pre-flight collision check for the project root."""

from __future__ import annotations

from pathlib import Path

from .errors import DirectoryExistsError


def guard_target(root: str | Path) -> None:
    """Raise ``DirectoryExistsError`` if anything already lives at *root*.

    Must run before the first write of a generation run.  Nothing is created
    or modified here.
    """
    path = Path(root)
    if path.exists() or path.is_symlink():
        raise DirectoryExistsError(str(path))
