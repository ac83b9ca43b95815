"""Format a preview forest back into structure notation."""

from __future__ import annotations

from boxplay.model.node import PreviewNode


def format_structure(forest: list[PreviewNode]) -> str:
    """Render *forest* as structure notation, e.g. ``"[2[1]]"``.

    Runs of consecutive childless items collapse into their count. Text
    overrides are not represented.
    """
    parts: list[str] = []
    run = 0
    for node in forest:
        if node.is_container or node.children:
            if run:
                parts.append(str(run))
                run = 0
            parts.append("[" + format_structure(node.children) + "]")
        else:
            run += 1
    if run:
        parts.append(str(run))
    return "".join(parts)
