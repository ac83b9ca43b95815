"""Serialize rule lists back into the line-oriented code view."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from boxplay.config import EditorMode
from boxplay.stylesheet.model import StyleRule

__all__ = [
    "BlankLine",
    "ClosingLine",
    "CodeLine",
    "EXTRA_CODE_LINES",
    "PropertyLine",
    "SelectorLine",
    "format_stylesheet",
    "render_css",
    "serialize",
]

# Trailing blank lines kept in snippet mode so there is always a slot to add a rule.
EXTRA_CODE_LINES = 3


@dataclass(frozen=True)
class SelectorLine:
    rule_index: int
    selector: str

    @property
    def text(self) -> str:
        return f"{self.selector} {{"


@dataclass(frozen=True)
class PropertyLine:
    rule_index: int
    property_index: int
    name: str
    value: str

    @property
    def text(self) -> str:
        return f"  {self.name}: {self.value};"


@dataclass(frozen=True)
class ClosingLine:
    rule_index: int

    @property
    def text(self) -> str:
        return "}"


@dataclass(frozen=True)
class BlankLine:
    """An empty line; ``rule_index`` is where a new rule would be inserted."""

    rule_index: int

    @property
    def text(self) -> str:
        return ""


CodeLine = Union[SelectorLine, PropertyLine, ClosingLine, BlankLine]


def serialize(rules: list[StyleRule], mode: EditorMode) -> list[CodeLine]:
    """Build the typed code view for *rules*.

    Each rule contributes a selector line, one line per declaration, a closing
    line and a blank separator. Snippet mode pads the view with
    ``EXTRA_CODE_LINES`` blanks; free mode only emits a single blank when
    there are no rules at all.
    """
    lines: list[CodeLine] = []
    for rule_index, rule in enumerate(rules):
        lines.append(SelectorLine(rule_index, rule.selector))
        for property_index, decl in enumerate(rule.properties):
            lines.append(PropertyLine(rule_index, property_index, decl.name, decl.value))
        lines.append(ClosingLine(rule_index))
        lines.append(BlankLine(rule_index + 1))

    if mode is EditorMode.SNIPPET:
        lines.extend(BlankLine(len(rules)) for _ in range(EXTRA_CODE_LINES))
    elif mode is EditorMode.FREE:
        if not lines:
            lines.append(BlankLine(0))
    else:
        raise ValueError(f"Unsupported editor mode: {mode!r}")
    return lines


def format_stylesheet(rules: list[StyleRule], mode: EditorMode = EditorMode.FREE) -> str:
    """Render the code view as editable text that parses back to *rules*."""
    return "\n".join(line.text for line in serialize(rules, mode))


def render_css(rules: list[StyleRule]) -> str:
    """Render rules as compact CSS, one rule per line."""
    return "\n".join(
        f"{rule.selector} {{ "
        + " ".join(f"{d.name}:{d.value};" for d in rule.properties)
        + " }"
        for rule in rules
    )
