from boxplay.model.element import Element
from boxplay.model.node import NodeKind, PreviewNode, walk_forest
from boxplay.model.snippet import Snippet

__all__ = ["Element", "NodeKind", "PreviewNode", "Snippet", "walk_forest"]
