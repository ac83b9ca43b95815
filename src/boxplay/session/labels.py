"""Derived numbering and class labels for preview boxes."""

from __future__ import annotations

import re

from boxplay.model.element import Element
from boxplay.model.node import PreviewNode, walk_forest

_NUMBERED_RE = re.compile(r"^(?:item|container)\d+$")


def _set_number(elem: Element, role: str, number: int) -> None:
    elem.classes = [
        c for c in elem.classes if not (_NUMBERED_RE.match(c) and c.startswith(role))
    ]
    elem.add_class(f"{role}{number}")


def label_elements(root: Element) -> None:
    """Number the live boxes under *root* in document order.

    Items get ``itemN`` (and text ``N`` when childless); containers get
    ``containerN``. Numbers from an earlier pass are replaced.
    """
    for number, elem in enumerate(root.find_all("item"), 1):
        _set_number(elem, "item", number)
        if not elem.children:
            elem.text = str(number)
    for number, elem in enumerate(root.find_all("container"), 1):
        _set_number(elem, "container", number)


def relabel_forest(forest: list[PreviewNode]) -> None:
    """Reclassify every node of an editable forest from its shape.

    A node under a parent is an item; a node with children, or at the top
    level, is a container. Childless items show their text override, or
    their number when they have none.
    """
    items = containers = 1
    for node in walk_forest(forest):
        classes: list[str] = []
        if node.parent is not None:
            classes.append("item")
        if node.children or node.parent is None:
            classes += ["container", f"container{containers}"]
            containers += 1
        else:
            node.element.text = node.text if node.text is not None else str(items)
            classes.append(f"item{items}")
            items += 1
        node.element.classes = classes
