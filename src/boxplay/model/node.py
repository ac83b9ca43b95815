"""PreviewNode: one container or item box in a snippet's structure."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from boxplay.model.element import Element


class NodeKind(Enum):
    CONTAINER = "container"
    ITEM = "item"


class PreviewNode:
    """A node in a preview forest.

    A node exclusively owns its ``children``. ``parent`` is a lookup link
    only; removing a node from its parent severs it completely. ``text`` is
    a literal label override; ``None`` means the label comes from position.
    """

    def __init__(
        self,
        kind: NodeKind,
        *,
        nested: bool = False,
        text: str | None = None,
    ) -> None:
        if nested and kind is not NodeKind.CONTAINER:
            raise ValueError("Only containers can be nested")
        self.kind = kind
        self.nested = nested
        self.text = text
        self.children: list[PreviewNode] = []
        self.parent: PreviewNode | None = None
        self.element = Element(list(self.role_classes))

    @classmethod
    def container(cls, *, nested: bool = False) -> PreviewNode:
        return cls(NodeKind.CONTAINER, nested=nested)

    @classmethod
    def item(cls, text: str | None = None) -> PreviewNode:
        return cls(NodeKind.ITEM, text=text)

    def __repr__(self) -> str:
        return f"PreviewNode({' '.join(self.role_classes)!r}, children={len(self.children)})"

    @property
    def role_classes(self) -> tuple[str, ...]:
        """The classes fixed by the node's role, compared when diffing."""
        if self.kind is NodeKind.CONTAINER:
            return ("item", "container") if self.nested else ("container",)
        if self.kind is NodeKind.ITEM:
            return ("item",)
        raise ValueError(f"Unhandled node kind: {self.kind!r}")

    @property
    def is_container(self) -> bool:
        return self.kind is NodeKind.CONTAINER

    # --- ownership --------------------------------------------------------------

    def push(self, child: PreviewNode) -> None:
        """Append *child*, which must not belong to another node."""
        self.children.append(child)
        child.parent = self

    def insert(self, index: int, child: PreviewNode) -> None:
        self.children.insert(index, child)
        child.parent = self
        following = self.children[index + 1] if index + 1 < len(self.children) else None
        if following is not None and following.element.parent is self.element:
            self.element.insert_before(child.element, following.element)
        else:
            self.element.append_child(child.element)

    def remove_child(self, child: PreviewNode) -> None:
        """Remove *child* by identity; a no-op when it is not a child."""
        for index, candidate in enumerate(self.children):
            if candidate is child:
                del self.children[index]
                break
        else:
            return
        child.parent = None
        if child.element.parent is self.element:
            self.element.remove_child(child.element)

    # --- presentation -----------------------------------------------------------

    def render(self) -> Element:
        """Rebuild this node's element from its children, bottom-up.

        Always a full rebuild; incremental reuse only happens in
        ``boxplay.sync.synchronize``.
        """
        self.element.remove_all_children()
        for child in self.children:
            child.render()
            self.element.append_child(child.element)
        return self.element

    def walk(self) -> Iterator[PreviewNode]:
        """Yield this node and its descendants in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


def walk_forest(forest: list[PreviewNode]) -> Iterator[PreviewNode]:
    for root in forest:
        yield from root.walk()
