"""Line view of a preview forest as nested ``div`` markup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from boxplay.model.node import PreviewNode


class MarkupKind(Enum):
    OPEN = "open"
    CLOSE = "close"
    LEAF = "leaf"


@dataclass(frozen=True)
class MarkupLine:
    kind: MarkupKind
    depth: int
    node: PreviewNode

    @property
    def text(self) -> str:
        indent = "  " * self.depth
        elem = self.node.element
        if self.kind is MarkupKind.OPEN:
            return f'{indent}<div class="{elem.class_name}">'
        if self.kind is MarkupKind.CLOSE:
            return f"{indent}</div>"
        return f'{indent}<div class="{elem.class_name}">{elem.text}</div>'


def markup_lines(forest: list[PreviewNode], depth: int = 0) -> list[MarkupLine]:
    lines: list[MarkupLine] = []
    for node in forest:
        if node.children:
            lines.append(MarkupLine(MarkupKind.OPEN, depth, node))
            lines.extend(markup_lines(node.children, depth + 1))
            lines.append(MarkupLine(MarkupKind.CLOSE, depth, node))
        else:
            lines.append(MarkupLine(MarkupKind.LEAF, depth, node))
    return lines
