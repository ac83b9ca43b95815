"""Inline styling of live preview boxes from the working rule list."""

from __future__ import annotations

from boxplay.model.element import Element
from boxplay.stylesheet.model import StyleRule


def drop_empty_rules(rules: list[StyleRule]) -> None:
    """Remove, in place, every rule left without declarations."""
    rules[:] = [rule for rule in rules if rule.properties]


def apply_styles(root: Element, rules: list[StyleRule]) -> None:
    """Reset and recompute the inline style of every box under *root*.

    A rule applies only when its whole selector is a single ``.class`` token
    the box carries; compound selectors show in the code view but never
    style the preview.
    """
    boxes = list(root.iter_descendants())
    for elem in boxes:
        elem.style = ""
    for elem in boxes:
        tokens = {"." + name for name in elem.classes}
        elem.style = "".join(
            rule.declarations_text() for rule in rules if rule.selector in tokens
        )
