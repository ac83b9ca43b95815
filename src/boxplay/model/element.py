"""Element: the host-neutral presentation payload of the live preview."""

from __future__ import annotations

from typing import Iterator


class Element:
    """A rendered box: class names, text, inline style and child elements.

    Like a DOM node, an element lives under at most one parent; attaching it
    somewhere else detaches it first. Equality is identity, so elements can
    key dictionaries.
    """

    def __init__(self, classes: list[str] | None = None, text: str = "") -> None:
        self.classes: list[str] = list(classes or [])
        self.text = text
        self.style = ""
        self.children: list[Element] = []
        self.parent: Element | None = None

    def __repr__(self) -> str:
        return f"Element({' '.join(self.classes)!r}, children={len(self.children)})"

    @property
    def class_name(self) -> str:
        return " ".join(self.classes)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    # --- tree mutation ----------------------------------------------------------

    def _detach(self, child: Element) -> None:
        if child.parent is not None:
            child.parent.children.remove(child)
            child.parent = None

    def append_child(self, child: Element) -> None:
        self._detach(child)
        self.children.append(child)
        child.parent = self

    def insert_before(self, child: Element, ref: Element | None) -> None:
        """Insert *child* before *ref*, or at the end when *ref* is None."""
        self._detach(child)
        if ref is None:
            self.children.append(child)
        else:
            self.children.insert(self.children.index(ref), child)
        child.parent = self

    def remove_child(self, child: Element) -> None:
        if child.parent is not self:
            raise ValueError(f"{child!r} is not a child of {self!r}")
        self._detach(child)

    def remove_all_children(self) -> None:
        while self.children:
            self._detach(self.children[-1])

    @property
    def last_child(self) -> Element | None:
        return self.children[-1] if self.children else None

    # --- queries ----------------------------------------------------------------

    def iter_descendants(self) -> Iterator[Element]:
        """Yield every descendant in document (pre-)order, excluding self."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def find_all(self, class_name: str) -> list[Element]:
        return [e for e in self.iter_descendants() if e.has_class(class_name)]

    def find(self, class_name: str) -> Element | None:
        for elem in self.iter_descendants():
            if elem.has_class(class_name):
                return elem
        return None
