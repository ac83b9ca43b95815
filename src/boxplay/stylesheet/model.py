"""Stylesheet model: Declaration and StyleRule dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field

# Placeholder text for freshly added rules and declarations; the host renders
# these as empty, clickable slots.
BLANK_SELECTOR = "." + "\u00a0" * 8
BLANK_TEXT = "\u00a0" * 4


@dataclass
class Declaration:
    """A single ``name: value`` pair inside a rule body."""

    name: str
    value: str

    @classmethod
    def blank(cls) -> Declaration:
        return cls(name=BLANK_TEXT, value=BLANK_TEXT)


@dataclass
class StyleRule:
    """A selector plus its ordered declarations.

    The selector keeps its leading dot (``.container``, ``.item2:hover``).
    Duplicate property names are allowed; the later one wins when applied.
    """

    selector: str
    properties: list[Declaration] = field(default_factory=list)

    @classmethod
    def blank(cls) -> StyleRule:
        return cls(selector=BLANK_SELECTOR, properties=[Declaration.blank()])

    @property
    def class_name(self) -> str:
        """The selector without its leading dot."""
        return self.selector[1:] if self.selector.startswith(".") else self.selector

    def declarations_text(self) -> str:
        """Render the declarations as inline style text (``a:b;c:d;``)."""
        return "".join(f"{d.name}:{d.value};" for d in self.properties)

    def clone(self) -> StyleRule:
        return StyleRule(
            selector=self.selector,
            properties=[Declaration(d.name, d.value) for d in self.properties],
        )


def clone_rules(rules: list[StyleRule]) -> list[StyleRule]:
    """Deep-copy a rule list so edits never reach the original."""
    return [rule.clone() for rule in rules]
