from boxplay.events.bus import EventBus, Listener
from boxplay.events.types import (
    ItemCountChanged,
    SessionEvent,
    SnippetSwitched,
    StructureChanged,
    StylesheetChanged,
)

__all__ = [
    "EventBus",
    "ItemCountChanged",
    "Listener",
    "SessionEvent",
    "SnippetSwitched",
    "StructureChanged",
    "StylesheetChanged",
]
