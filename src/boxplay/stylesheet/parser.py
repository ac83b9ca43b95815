"""Hand-written parser for the restricted playground stylesheet language.

Only selectors built from ``.container``, ``.containerN``, ``.item`` and
``.itemN`` class tokens are recognised, optionally followed by one
pseudo-class and one pseudo-element::

    .container { display: flex; gap: 8px; }
    .item2:hover { flex-grow: 2; }

Anything else is skipped. Parsing never fails, so half-typed text simply
yields fewer rules.
"""

from __future__ import annotations

import re

from boxplay.stylesheet.model import Declaration, StyleRule

__all__ = ["RULE_RE", "normalize_whitespace", "parse_stylesheet", "scope_stylesheet"]

RULE_RE = re.compile(
    r"""
    (?:
        (?:\.(?:container\d*|item\d*))+   # one or more class tokens
        (?::[\w-]*)?                      # optional pseudo-class
        (?:::[\w-]*)?                     # optional pseudo-element
        \s*
    )+
    \{[^{}]*\}                            # declaration block
    """,
    re.VERBOSE,
)

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run into a single space."""
    return _WHITESPACE_RE.sub(" ", text)


def _parse_declarations(body: str) -> list[Declaration]:
    declarations: list[Declaration] = []
    for segment in body.split(";"):
        if ":" not in segment:
            continue
        name, value = segment.split(":", 1)
        declarations.append(Declaration(name=name.strip(), value=value.strip()))
    return declarations


def parse_stylesheet(source: str) -> list[StyleRule]:
    """Parse stylesheet text into rules, in source order."""
    rules: list[StyleRule] = []
    for match in RULE_RE.finditer(normalize_whitespace(source)):
        text = match.group(0)
        brace = text.index("{")
        rules.append(
            StyleRule(
                selector=text[:brace].strip(),
                properties=_parse_declarations(text[brace + 1 : -1]),
            )
        )
    return rules


def scope_stylesheet(source: str, scope: str) -> str:
    """Prefix every recognised rule with *scope* so it only hits one editor.

    >>> scope_stylesheet(".item { order: 1; }", ".fg-editor.editor-0")
    '.fg-editor.editor-0 .item { order: 1; }'
    """
    return RULE_RE.sub(lambda m: f"{scope} {m.group(0)}", normalize_whitespace(source))
