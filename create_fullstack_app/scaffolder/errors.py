"""Error taxonomy for the scaffolding engine.

Every failure the engine can produce is a ``ScaffoldError`` tagged with an
``ErrorKind`` and the name of the stage that failed.  The CLI converts any of
them into a single error line and exit status 1.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of engine failures."""
    DIRECTORY_EXISTS = "directory_exists"
    SCAFFOLD_TOOL_FAILED = "scaffold_tool_failed"
    IO_ERROR = "io_error"


class ScaffoldError(Exception):
    """Raised when a scaffolding stage fails irrecoverably."""

    kind: ErrorKind = ErrorKind.IO_ERROR

    def __init__(self, stage: str, message: str) -> None:
        self.stage = stage
        self.message = message
        super().__init__(f"[{stage}] {message}")


class DirectoryExistsError(ScaffoldError):
    """The target project root already exists."""

    kind = ErrorKind.DIRECTORY_EXISTS

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__("guard", f"Directory {path} already exists!")


class ScaffoldToolFailedError(ScaffoldError):
    """The external frontend scaffolding command did not succeed."""

    kind = ErrorKind.SCAFFOLD_TOOL_FAILED

    def __init__(self, command: str, returncode: int | None, detail: str = "") -> None:
        self.command = command
        self.returncode = returncode
        message = f"Command failed (exit {returncode}): {command}"
        if detail:
            message = f"{message}\n{detail}"
        super().__init__("frontend-scaffold", message)


class ScaffoldIOError(ScaffoldError):
    """A filesystem read or write failed during a stage."""

    kind = ErrorKind.IO_ERROR


class ManifestParseError(ScaffoldIOError):
    """An existing JSON manifest could not be parsed as an object."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__("manifest", f"Cannot parse {path}: {detail}")
