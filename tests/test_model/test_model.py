"""Tests for preview elements and nodes."""

import pytest

from boxplay.model import Element, NodeKind, PreviewNode, walk_forest
from boxplay.structure import parse_structure


# ---------------------------------------------------------------------------
# Element
# ---------------------------------------------------------------------------


class TestElement:
    def test_append_sets_parent(self):
        parent, child = Element(["container"]), Element(["item"])
        parent.append_child(child)
        assert parent.children == [child]
        assert child.parent is parent

    def test_append_moves_from_previous_parent(self):
        first, second, child = Element(), Element(), Element()
        first.append_child(child)
        second.append_child(child)
        assert first.children == []
        assert second.children == [child]
        assert child.parent is second

    def test_insert_before(self):
        parent = Element()
        a, b, c = Element(["a"]), Element(["b"]), Element(["c"])
        parent.append_child(a)
        parent.append_child(c)
        parent.insert_before(b, c)
        assert parent.children == [a, b, c]

    def test_insert_before_none_appends(self):
        parent, a = Element(), Element()
        parent.insert_before(a, None)
        assert parent.children == [a]

    def test_remove_child(self):
        parent, child = Element(), Element()
        parent.append_child(child)
        parent.remove_child(child)
        assert parent.children == []
        assert child.parent is None

    def test_remove_foreign_child_raises(self):
        with pytest.raises(ValueError):
            Element().remove_child(Element())

    def test_remove_all_children(self):
        parent = Element()
        kids = [Element() for _ in range(3)]
        for kid in kids:
            parent.append_child(kid)
        parent.remove_all_children()
        assert parent.children == []
        assert all(kid.parent is None for kid in kids)

    def test_document_order_queries(self):
        root = Element()
        outer = Element(["container"])
        inner = Element(["item", "container"])
        leaf = Element(["item"])
        root.append_child(outer)
        outer.append_child(inner)
        inner.append_child(leaf)
        assert list(root.iter_descendants()) == [outer, inner, leaf]
        assert root.find_all("item") == [inner, leaf]
        assert root.find("container") is outer
        assert root.find("missing") is None

    def test_identity_hashing(self):
        a, b = Element(["item"]), Element(["item"])
        assert a != b
        assert {a: 1, b: 2}[a] == 1

    def test_add_class_is_idempotent(self):
        elem = Element(["item"])
        elem.add_class("item1")
        elem.add_class("item1")
        assert elem.class_name == "item item1"


# ---------------------------------------------------------------------------
# PreviewNode
# ---------------------------------------------------------------------------


class TestPreviewNode:
    def test_role_classes(self):
        assert PreviewNode.container().role_classes == ("container",)
        assert PreviewNode.container(nested=True).role_classes == ("item", "container")
        assert PreviewNode.item().role_classes == ("item",)

    def test_element_starts_with_role_classes(self):
        assert PreviewNode.container(nested=True).element.classes == ["item", "container"]

    def test_only_containers_nest(self):
        with pytest.raises(ValueError):
            PreviewNode(NodeKind.ITEM, nested=True)

    def test_push_takes_ownership(self):
        parent, child = PreviewNode.container(), PreviewNode.item()
        parent.push(child)
        assert parent.children == [child]
        assert child.parent is parent

    def test_remove_child_severs(self):
        parent = parse_structure("[2]")[0]
        parent.render()
        child = parent.children[0]
        parent.remove_child(child)
        assert child not in parent.children
        assert child.parent is None
        assert child.element not in parent.element.children

    def test_remove_absent_child_is_noop(self):
        parent = parse_structure("[2]")[0]
        parent.remove_child(PreviewNode.item())
        assert len(parent.children) == 2

    def test_insert_places_element(self):
        parent = parse_structure("[2]")[0]
        parent.render()
        new = PreviewNode.item()
        parent.insert(1, new)
        assert parent.children[1] is new
        assert parent.element.children[1] is new.element
        assert new.parent is parent

    def test_render_builds_full_tree(self):
        root = parse_structure("[1[2]]")[0]
        elem = root.render()
        assert elem is root.element
        assert elem.children == [c.element for c in root.children]
        inner = root.children[1]
        assert inner.element.children == [c.element for c in inner.children]

    def test_render_is_full_rebuild(self):
        root = parse_structure("[2]")[0]
        root.render()
        root.children.append(PreviewNode.item())
        root.children[-1].parent = root
        root.render()
        assert len(root.element.children) == 3

    def test_walk_is_document_order(self):
        forest = parse_structure("[1[1]][1]")
        kinds = [n.kind for n in walk_forest(forest)]
        assert kinds == [
            NodeKind.CONTAINER,
            NodeKind.ITEM,
            NodeKind.CONTAINER,
            NodeKind.ITEM,
            NodeKind.CONTAINER,
            NodeKind.ITEM,
        ]
