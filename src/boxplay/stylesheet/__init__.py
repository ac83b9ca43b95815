from boxplay.stylesheet.model import Declaration, StyleRule, clone_rules
from boxplay.stylesheet.parser import parse_stylesheet, scope_stylesheet
from boxplay.stylesheet.properties import (
    CSS_PROPERTIES,
    accepts_free_text,
    property_names,
    value_choices,
)
from boxplay.stylesheet.serializer import (
    BlankLine,
    ClosingLine,
    CodeLine,
    PropertyLine,
    SelectorLine,
    format_stylesheet,
    render_css,
    serialize,
)

__all__ = [
    "BlankLine",
    "CSS_PROPERTIES",
    "ClosingLine",
    "CodeLine",
    "Declaration",
    "PropertyLine",
    "SelectorLine",
    "StyleRule",
    "accepts_free_text",
    "clone_rules",
    "format_stylesheet",
    "parse_stylesheet",
    "property_names",
    "render_css",
    "scope_stylesheet",
    "serialize",
    "value_choices",
]
