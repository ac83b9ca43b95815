"""Snippet: one named variant of an editable example."""

from __future__ import annotations

from dataclasses import dataclass, field

from boxplay.model.node import PreviewNode
from boxplay.stylesheet.model import StyleRule


@dataclass
class Snippet:
    """A snippet's baseline forest and rule list.

    ``css`` is never edited; sessions work on a clone of it.
    """

    name: str
    html: list[PreviewNode] = field(default_factory=list)
    css: list[StyleRule] = field(default_factory=list)
