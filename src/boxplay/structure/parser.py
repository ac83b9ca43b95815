"""Parser for the compact bracket/digit structure notation."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Iterator

from lark import Lark, Token
from lark.exceptions import UnexpectedCharacters

from boxplay.errors import MalformedStructure
from boxplay.model.node import PreviewNode

__all__ = ["parse_structure", "single_container"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="basic",
        start="start",
        keep_all_tokens=True,
    )


def _tokens(source: str) -> Iterator[Token]:
    try:
        tree = _parser().parse(source)
    except UnexpectedCharacters as exc:
        raise MalformedStructure(exc.char, exc.pos_in_stream) from exc
    for child in tree.children:
        if isinstance(child, Token):
            yield child


def parse_structure(source: str) -> list[PreviewNode]:
    """Parse structure notation into a forest of top-level containers.

    ``"[3]"`` is one container holding three items; ``"[2[1]]"`` nests a
    container holding one item after two items. An unmatched ``]`` at the
    top level is ignored and unclosed containers are closed implicitly.
    Any other character raises ``MalformedStructure``.
    """
    forest: list[PreviewNode] = []
    scope: PreviewNode | None = None

    for token in _tokens(source):
        if token.type == "OPEN":
            node = PreviewNode.container(nested=scope is not None)
            if scope is None:
                forest.append(node)
            else:
                scope.push(node)
            scope = node
        elif token.type == "CLOSE":
            scope = scope.parent if scope is not None else None
        elif token.type == "COUNT":
            for _ in range(int(token.value)):
                item = PreviewNode.item()
                if scope is None:
                    forest.append(item)
                else:
                    scope.push(item)
        else:
            raise MalformedStructure(str(token), token.start_pos or 0)
    return forest


def single_container(item_count: int) -> list[PreviewNode]:
    """Build a forest of one container with *item_count* items."""
    container = PreviewNode.container()
    for _ in range(item_count):
        container.push(PreviewNode.item())
    return [container]
