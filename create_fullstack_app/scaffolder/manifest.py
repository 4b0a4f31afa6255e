"""JSON manifest merging.

Patches ``package.json``/``tsconfig.json``-style files without destroying
keys the patch does not mention.  Merge rule: when both sides hold a mapping
the two are merged recursively; otherwise the patch value wins.  Keys that
only exist in the base are kept as they are.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .errors import ManifestParseError
from .templates import write_atomic


def deep_merge(base: Mapping[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new mapping with *patch* deep-merged over *base*.

    Neither argument is modified.  Base keys keep their position; keys new in
    *patch* are appended in patch order.  Lists and scalars are replaced, not
    concatenated.

    Example::

        deep_merge(
            {"scripts": {"build": "tsc"}, "dependencies": {"x": "1.0.0"}},
            {"scripts": {"test": "vitest"}},
        )
        -> {"scripts": {"build": "tsc", "test": "vitest"},
            "dependencies": {"x": "1.0.0"}}
    """
    merged: dict[str, Any] = {key: _copy(value) for key, value in base.items()}
    for key, value in patch.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = _copy(value)
    return merged


def _copy(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_copy(v) for v in value]
    return value


def dump_manifest(data: Mapping[str, Any]) -> str:
    """Serialise a manifest the same way every time (2-space indent, final newline)."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def load_manifest(path: str | Path) -> dict[str, Any] | None:
    """Load a JSON manifest, or return ``None`` if the file does not exist.

    Raises:
        ManifestParseError: If the file is not UTF-8 JSON or its top level
            is not an object.
    """
    file_path = Path(path)
    if not file_path.exists():
        return None

    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ManifestParseError(str(file_path), str(exc)) from exc

    if not isinstance(data, dict):
        raise ManifestParseError(
            str(file_path), f"expected a JSON object, got {type(data).__name__}"
        )
    return data


def _merge_file(path: Path, fields: Mapping[str, Any]) -> dict[str, Any]:
    existing = load_manifest(path)
    merged = deep_merge(existing or {}, fields)
    write_atomic(path, dump_manifest(merged))
    return merged


async def merge_manifest(path: str | Path, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Merge *fields* into the manifest at *path* and write it back.

    If no manifest exists the patch becomes the whole file.  A malformed
    existing manifest is reported, never overwritten.

    Returns:
        The merged manifest as written.
    """
    return await asyncio.to_thread(_merge_file, Path(path), fields)


async def write_manifest(path: str | Path, data: Mapping[str, Any]) -> Path:
    """Write a freshly created manifest using the stable serialiser."""
    out = Path(path)
    await asyncio.to_thread(write_atomic, out, dump_manifest(data))
    return out
