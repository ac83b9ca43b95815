"""Known CSS properties and the values the editor offers for each."""

from __future__ import annotations

from boxplay.errors import UnknownPropertyError

# ``None`` marks a property whose value is typed freely rather than picked.
_POSITIONS = (
    "center",
    "flex-end",
    "flex-start",
    "normal",
    "space-around",
    "space-between",
    "space-evenly",
)

CSS_PROPERTIES: dict[str, tuple[str, ...] | None] = {
    "align-content": _POSITIONS,
    "align-items": ("center", "flex-end", "flex-start", "normal"),
    "align-self": _POSITIONS,
    "column-gap": None,
    "display": ("block", "flex"),
    "flex": None,
    "flex-basis": None,
    "flex-direction": ("column", "column-reverse", "row", "row-reverse"),
    "flex-grow": None,
    "flex-shrink": None,
    "flex-wrap": ("nowrap", "wrap", "wrap-reverse"),
    "gap": None,
    "grid": None,
    "grid-area": (),
    "grid-auto-columns": (),
    "grid-auto-rows": (),
    "grid-column": (),
    "grid-column-end": (),
    "grid-column-start": (),
    "grid-template-areas": (),
    "grid-template-columns": (),
    "grid-template-rows": (),
    "grid-row": (),
    "grid-row-end": (),
    "grid-row-start": (),
    "height": None,
    "justify-content": _POSITIONS,
    "order": None,
    "row-gap": None,
    "width": None,
}


def _lookup(name: str) -> tuple[str, ...] | None:
    if name not in CSS_PROPERTIES:
        raise UnknownPropertyError(name)
    return CSS_PROPERTIES[name]


def property_names() -> list[str]:
    return list(CSS_PROPERTIES)


def accepts_free_text(name: str) -> bool:
    """Return True if *name* takes a typed value instead of a choice."""
    return _lookup(name) is None


def value_choices(name: str) -> list[str]:
    """Return the values offered for *name*; empty for free-text properties.

    Raises ``UnknownPropertyError`` when *name* is not in the table.
    """
    return list(_lookup(name) or ())
