"""Positional tree diff between two snippet forests.

Nodes are paired purely by sibling index: slot ``i`` of the outgoing forest
and slot ``i`` of the incoming one are assumed to be the same conceptual box.
Live elements in unchanged slots are kept, so in-flight transitions on them
survive a snippet switch. This is deliberately not a keyed diff.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from boxplay.model.element import Element
from boxplay.model.node import PreviewNode

__all__ = ["Appended", "Mutation", "Removed", "Replaced", "synchronize"]

log = logging.getLogger("boxplay.sync")


@dataclass(frozen=True)
class Removed:
    parent: Element
    element: Element


@dataclass(frozen=True)
class Appended:
    parent: Element
    element: Element


@dataclass(frozen=True)
class Replaced:
    parent: Element
    index: int
    old: Element
    new: Element


Mutation = Union[Removed, Appended, Replaced]


def synchronize(
    prev: list[PreviewNode], cur: list[PreviewNode], root: Element
) -> list[Mutation]:
    """Reshape the live children of *root* from *prev* into *cur*.

    *root*'s children must currently mirror *prev* slot for slot. Returns the
    mutations applied, in order; comparing a forest with itself returns ``[]``.

    A slot whose role classes differ is replaced by a full render of the
    incoming node, and the walk does not descend into it: the new subtree
    already mirrors *cur*, and pairing the old children against it would
    strip the fresh render.
    """
    mutations: list[Mutation] = []
    _sync_children(prev, cur, root, mutations)
    log.debug(
        "synchronized forest: %d removed, %d appended, %d replaced",
        sum(isinstance(m, Removed) for m in mutations),
        sum(isinstance(m, Appended) for m in mutations),
        sum(isinstance(m, Replaced) for m in mutations),
    )
    return mutations


def _sync_children(
    prev: list[PreviewNode],
    cur: list[PreviewNode],
    live: Element,
    mutations: list[Mutation],
) -> None:
    shared = min(len(prev), len(cur))

    for _ in range(len(prev) - shared):
        tail = live.last_child
        if tail is None:
            raise ValueError(f"{live!r} has fewer children than the forest it mirrors")
        live.remove_child(tail)
        mutations.append(Removed(live, tail))

    for node in cur[shared:]:
        live.append_child(node.render())
        mutations.append(Appended(live, node.element))

    for index in range(shared):
        before, after = prev[index], cur[index]
        if before.role_classes != after.role_classes:
            old = live.children[index]
            new = after.render()
            live.insert_before(new, old)
            live.remove_child(old)
            mutations.append(Replaced(live, index, old, new))
            # The fresh render already mirrors ``after``; nothing below it to pair.
            continue
        _sync_children(before.children, after.children, live.children[index], mutations)
