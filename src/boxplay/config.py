"""Editor configuration, resolved once when a session is built."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from boxplay.errors import ConfigError

DEFAULT_ITEM_COUNT = 3
DEFAULT_STRUCTURE = "[3]"


class EditorMode(Enum):
    """How an editor presents and edits its stylesheet.

    SNIPPET: several named snippets, fixed-slot editing through choice lists.
    FREE: one stylesheet edited as text, plus an editable structure view.
    """

    SNIPPET = "snippet"
    FREE = "free"


@dataclass(frozen=True)
class EditorConfig:
    mode: EditorMode = EditorMode.SNIPPET
    default_item_count: int = DEFAULT_ITEM_COUNT
    title: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.mode, EditorMode):
            raise ConfigError(f"Unknown editor mode: {self.mode!r}")
        if self.default_item_count < 0:
            raise ConfigError("default_item_count must be non-negative")


@dataclass(frozen=True)
class SnippetSource:
    """Raw input for one snippet, as supplied by the host."""

    css: str
    name: str | None = None
    structure: str | None = None
    item_count: int | None = None

    def __post_init__(self) -> None:
        if self.item_count is not None and self.item_count < 0:
            raise ConfigError("item_count must be non-negative")


@dataclass(frozen=True)
class MountConfig:
    """One editor to build: its configuration and snippet sources."""

    config: EditorConfig = field(default_factory=EditorConfig)
    snippets: tuple[SnippetSource, ...] = ()
