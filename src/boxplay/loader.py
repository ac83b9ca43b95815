"""Load playground documents: JSON descriptions of one or more editors.

A document is either one editor object or a list of them::

    {
      "mode": "snippet",
      "title": "justify-content",
      "item_count": 3,
      "snippets": [
        {"name": "start", "css": ".container { justify-content: flex-start; }"},
        {"name": "nested", "css": "", "structure": "[2[1]]"}
      ]
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from boxplay.config import DEFAULT_ITEM_COUNT, EditorConfig, EditorMode, MountConfig, SnippetSource
from boxplay.errors import ConfigError

__all__ = ["load_mounts", "mounts_from_data"]


def _optional_int(raw: dict[str, Any], key: str, where: str) -> int | None:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{where}: {key!r} must be an integer, got {value!r}")
    return value


def _optional_str(raw: dict[str, Any], key: str, where: str) -> str | None:
    value = raw.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"{where}: {key!r} must be a string, got {value!r}")
    return value


def _snippet(raw: Any, where: str) -> SnippetSource:
    if not isinstance(raw, dict):
        raise ConfigError(f"{where}: snippet must be an object")
    css = _optional_str(raw, "css", where)
    return SnippetSource(
        css=css or "",
        name=_optional_str(raw, "name", where),
        structure=_optional_str(raw, "structure", where),
        item_count=_optional_int(raw, "item_count", where),
    )


def _mount(raw: Any, where: str) -> MountConfig:
    if not isinstance(raw, dict):
        raise ConfigError(f"{where}: editor must be an object")
    try:
        mode = EditorMode(raw.get("mode", EditorMode.SNIPPET.value))
    except ValueError as exc:
        raise ConfigError(f"{where}: unknown mode {raw.get('mode')!r}") from exc

    item_count = _optional_int(raw, "item_count", where)
    config = EditorConfig(
        mode=mode,
        default_item_count=DEFAULT_ITEM_COUNT if item_count is None else item_count,
        title=_optional_str(raw, "title", where) or "",
    )

    snippets = raw.get("snippets", [])
    if not isinstance(snippets, list) or not snippets:
        raise ConfigError(f"{where}: 'snippets' must be a non-empty list")
    return MountConfig(
        config=config,
        snippets=tuple(
            _snippet(s, f"{where}.snippets[{i}]") for i, s in enumerate(snippets)
        ),
    )


def mounts_from_data(data: Any) -> list[MountConfig]:
    """Turn decoded document data into mount configurations."""
    editors = data if isinstance(data, list) else [data]
    return [_mount(raw, f"editor[{i}]") for i, raw in enumerate(editors)]


def load_mounts(path: str | Path) -> list[MountConfig]:
    """Read a playground document from *path*."""
    source = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON at line {exc.lineno}: {exc.msg}") from exc
    return mounts_from_data(data)
