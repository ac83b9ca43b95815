"""Events emitted by an edit session."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SnippetSwitched:
    editor_id: int
    index: int
    name: str
    mutations: int


@dataclass(frozen=True)
class ItemCountChanged:
    editor_id: int
    delta: int
    item_count: int


@dataclass(frozen=True)
class StylesheetChanged:
    editor_id: int
    rule_count: int


@dataclass(frozen=True)
class StructureChanged:
    editor_id: int
    node_count: int


SessionEvent = Union[SnippetSwitched, ItemCountChanged, StylesheetChanged, StructureChanged]
