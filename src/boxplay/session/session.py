"""EditSession: one editor's snippets, working stylesheet and live preview."""

from __future__ import annotations

import logging
from typing import Sequence

from boxplay.config import DEFAULT_STRUCTURE, EditorConfig, EditorMode, SnippetSource
from boxplay.errors import ConfigError, SessionError
from boxplay.events import (
    EventBus,
    ItemCountChanged,
    SnippetSwitched,
    StructureChanged,
    StylesheetChanged,
)
from boxplay.model import Element, PreviewNode, Snippet, walk_forest
from boxplay.session.labels import label_elements, relabel_forest
from boxplay.session.markup import MarkupLine, markup_lines
from boxplay.session.styling import apply_styles, drop_empty_rules
from boxplay.structure import parse_structure, single_container
from boxplay.stylesheet import (
    CodeLine,
    Declaration,
    StyleRule,
    clone_rules,
    format_stylesheet,
    parse_stylesheet,
    property_names,
    scope_stylesheet,
    serialize,
    value_choices,
)
from boxplay.sync import Mutation, synchronize

log = logging.getLogger("boxplay.session")

UNTITLED_SNIPPET = "Untitled"
FREE_SNIPPET = "main"


class EditSession:
    """State machine behind one playground editor.

    The session owns every snippet's baseline forest, the live preview
    ``root`` and ``cur_css``, a working copy of the active snippet's rules.
    Snippet switches restore the live preview to the outgoing baseline, then
    reconcile it positionally with the incoming one.
    """

    def __init__(
        self,
        sources: Sequence[SnippetSource],
        config: EditorConfig | None = None,
        *,
        editor_id: int = 0,
        bus: EventBus | None = None,
    ) -> None:
        if not sources:
            raise ConfigError("An editor needs at least one snippet")
        self.config = config or EditorConfig()
        self.editor_id = editor_id
        self.bus = bus or EventBus()

        self.snippets = [self._build_snippet(source) for source in sources]
        self.index = 0
        self.cur_css: list[StyleRule] = clone_rules(self.current.css)
        self.item_count_delta: dict[Element, int] = {}
        self.stylesheet = ""
        if self.mode is EditorMode.FREE:
            self.stylesheet = scope_stylesheet(sources[0].css, self.scope)

        self.root = Element(["wrapper-preview"])
        for node in self.current.html:
            self.root.append_child(node.render())

        self.code_lines: list[CodeLine] = []
        self._refresh_code()
        self._relabel()
        self._restyle()
        log.debug(
            "editor %d ready: mode=%s snippets=%d",
            editor_id,
            self.mode.value,
            len(self.snippets),
        )

    # --- construction -----------------------------------------------------------

    def _build_snippet(self, source: SnippetSource) -> Snippet:
        if source.name:
            name = source.name
        elif self.mode is EditorMode.SNIPPET:
            name = UNTITLED_SNIPPET
        else:
            name = FREE_SNIPPET
        return Snippet(name=name, html=self._build_forest(source), css=parse_stylesheet(source.css))

    def _build_forest(self, source: SnippetSource) -> list[PreviewNode]:
        if source.item_count is not None:
            return single_container(source.item_count)
        if source.structure is not None:
            return parse_structure(source.structure)
        if self.mode is EditorMode.FREE:
            return parse_structure(DEFAULT_STRUCTURE)
        return single_container(self.config.default_item_count)

    # --- properties -------------------------------------------------------------

    @property
    def mode(self) -> EditorMode:
        return self.config.mode

    @property
    def current(self) -> Snippet:
        return self.snippets[self.index]

    @property
    def scope(self) -> str:
        """Selector prefix confining free-mode styles to this editor."""
        return f".fg-editor.editor-{self.editor_id}"

    @property
    def item_count(self) -> int:
        return len(self.root.find_all("item"))

    def _require_mode(self, mode: EditorMode, action: str) -> None:
        if self.mode is not mode:
            raise SessionError(f"{action} is only available in {mode.value} mode")

    # --- snippets ---------------------------------------------------------------

    def switch_snippet(self, index: int) -> list[Mutation]:
        """Make snippet *index* active and reshape the live preview to match.

        Snippet mode only: free-mode structure edits act on the first
        snippet's forest, which must stay the live one.
        """
        self._require_mode(EditorMode.SNIPPET, "Switching snippets")
        if not 0 <= index < len(self.snippets):
            raise IndexError(f"Snippet index out of range: {index}")
        prev = self.current.html
        self.restore_item_counts()
        self.index = index
        self.cur_css = clone_rules(self.current.css)
        mutations = synchronize(prev, self.current.html, self.root)
        self._refresh_code()
        self._relabel()
        self._restyle()
        log.debug(
            "editor %d switched to snippet %d (%s) with %d mutations",
            self.editor_id,
            index,
            self.current.name,
            len(mutations),
        )
        self.bus.emit(SnippetSwitched(self.editor_id, index, self.current.name, len(mutations)))
        return mutations

    # --- item count -------------------------------------------------------------

    def _first_container(self) -> Element:
        container = self.root.find("container")
        if container is None:
            raise SessionError("The preview has no container")
        return container

    def _record_delta(self, container: Element, change: int) -> None:
        self.item_count_delta[container] = self.item_count_delta.get(container, 0) + change

    def add_item(self) -> Element:
        """Append one item to the first container of the live preview."""
        self._require_mode(EditorMode.SNIPPET, "Adding items")
        container = self._first_container()
        item = Element(["item"])
        container.append_child(item)
        self._record_delta(container, 1)
        self._relabel()
        self._restyle()
        self.bus.emit(ItemCountChanged(self.editor_id, 1, self.item_count))
        return item

    def remove_item(self) -> bool:
        """Remove the last child of the first container.

        Only a plain item is removed. Returns False when the container is
        empty or ends in a nested container, since restoring appends plain
        items and could not rebuild one.
        """
        self._require_mode(EditorMode.SNIPPET, "Removing items")
        container = self._first_container()
        last = container.last_child
        if last is None or last.has_class("container"):
            return False
        container.remove_child(last)
        self._record_delta(container, -1)
        self._relabel()
        self._restyle()
        self.bus.emit(ItemCountChanged(self.editor_id, -1, self.item_count))
        return True

    def restore_item_counts(self) -> None:
        """Undo every add/remove so the live preview matches its baseline shape."""
        for container, delta in self.item_count_delta.items():
            if delta:
                log.debug("restoring %r by %+d items", container, -delta)
            while delta > 0:
                container.remove_child(container.children[-1])
                delta -= 1
            while delta < 0:
                container.append_child(Element(["item"]))
                delta += 1
        self.item_count_delta.clear()

    # --- stylesheet edits -------------------------------------------------------

    def add_rule(self, index: int) -> None:
        """Insert a blank rule before rule *index*."""
        self.cur_css.insert(index, StyleRule.blank())
        self._commit_css()

    def delete_rule(self, index: int) -> None:
        del self.cur_css[index]
        self._commit_css()

    def add_property(self, rule_index: int, after_index: int) -> None:
        """Insert a blank declaration after declaration *after_index*."""
        self.cur_css[rule_index].properties.insert(after_index + 1, Declaration.blank())
        self._commit_css()

    def delete_property(self, rule_index: int, property_index: int) -> None:
        del self.cur_css[rule_index].properties[property_index]
        self._commit_css()

    def rename_selector(self, rule_index: int, class_name: str) -> None:
        """Point rule *rule_index* at ``.class_name``.

        When another rule already uses that selector, the renamed rule's
        declarations are appended to it and the renamed rule disappears.
        Repeated property names are kept; the later one wins.
        """
        rule = self.cur_css[rule_index]
        selector = class_name if class_name.startswith(".") else "." + class_name
        duplicate = next((r for r in self.cur_css if r.selector == selector), None)
        if duplicate is not None and duplicate is not rule:
            duplicate.properties.extend(rule.properties)
            del self.cur_css[rule_index]
        else:
            rule.selector = selector
        self._commit_css()

    def set_property_name(self, rule_index: int, property_index: int, name: str) -> None:
        self.cur_css[rule_index].properties[property_index].name = name
        self._commit_css()

    def set_property_value(self, rule_index: int, property_index: int, value: str) -> None:
        self.cur_css[rule_index].properties[property_index].value = value
        self._commit_css()

    def _commit_css(self) -> None:
        self._refresh_code()
        self._restyle()
        log.debug("editor %d stylesheet now has %d rules", self.editor_id, len(self.cur_css))
        self.bus.emit(StylesheetChanged(self.editor_id, len(self.cur_css)))

    # --- choices offered by the host --------------------------------------------

    def selector_choices(self) -> list[str]:
        containers = len(self.root.find_all("container"))
        if containers > 1:
            names = [f"container{n}" for n in range(1, containers + 1)]
        else:
            names = ["container"]
        return names + [f"item{n}" for n in range(1, self.item_count + 1)]

    def property_choices(self) -> list[str]:
        return property_names()

    def value_choices(self, rule_index: int, property_index: int) -> list[str]:
        """Values offered for a declaration; raises ``UnknownPropertyError``."""
        return value_choices(self.cur_css[rule_index].properties[property_index].name)

    # --- free-mode text editing -------------------------------------------------

    def editable_text(self) -> str:
        return format_stylesheet(self.cur_css, self.mode)

    def commit_text(self, text: str) -> None:
        """Replace the working rules with whatever *text* parses to."""
        self._require_mode(EditorMode.FREE, "Text editing")
        self.cur_css = parse_stylesheet(text)
        self.stylesheet = scope_stylesheet(text, self.scope)
        self._refresh_code()
        self.bus.emit(StylesheetChanged(self.editor_id, len(self.cur_css)))

    # --- free-mode structure editing --------------------------------------------

    def remove_node(self, node: PreviewNode) -> None:
        self._require_mode(EditorMode.FREE, "Structure editing")
        if node.parent is not None:
            node.parent.remove_child(node)
        else:
            forest = self.current.html
            forest[:] = [root for root in forest if root is not node]
            if node.element.parent is self.root:
                self.root.remove_child(node.element)
        self._refresh_structure()

    def insert_after(self, node: PreviewNode) -> PreviewNode:
        """Add a sibling after *node*: an item inside a box, a container at the top."""
        self._require_mode(EditorMode.FREE, "Structure editing")
        parent = node.parent
        if parent is not None:
            new = PreviewNode.item()
            parent.insert(_index_of(parent.children, node) + 1, new)
        else:
            new = PreviewNode.container()
            forest = self.current.html
            forest.insert(_index_of(forest, node) + 1, new)
            siblings = self.root.children
            position = _index_of(siblings, node.element)
            following = siblings[position + 1] if position + 1 < len(siblings) else None
            self.root.insert_before(new.element, following)
        self._refresh_structure()
        return new

    def insert_first_child(self, node: PreviewNode) -> PreviewNode:
        """Add an item as *node*'s first child; its text override is dropped."""
        self._require_mode(EditorMode.FREE, "Structure editing")
        new = PreviewNode.item()
        node.text = None
        if not node.children:
            node.element.text = ""
        node.insert(0, new)
        self._refresh_structure()
        return new

    def append_root_container(self) -> PreviewNode:
        self._require_mode(EditorMode.FREE, "Structure editing")
        new = PreviewNode.container()
        self.current.html.append(new)
        self.root.append_child(new.element)
        self._refresh_structure()
        return new

    def set_node_text(self, node: PreviewNode, text: str) -> None:
        self._require_mode(EditorMode.FREE, "Structure editing")
        node.text = text
        node.element.text = text
        self._refresh_structure()

    def markup_lines(self) -> list[MarkupLine]:
        return markup_lines(self.current.html)

    def _refresh_structure(self) -> None:
        relabel_forest(self.current.html)
        count = sum(1 for _ in walk_forest(self.current.html))
        self.bus.emit(StructureChanged(self.editor_id, count))

    # --- derived state ----------------------------------------------------------

    def _refresh_code(self) -> None:
        drop_empty_rules(self.cur_css)
        self.code_lines = serialize(self.cur_css, self.mode)

    def _relabel(self) -> None:
        if self.mode is EditorMode.FREE:
            relabel_forest(self.current.html)
        else:
            label_elements(self.root)

    def _restyle(self) -> None:
        if self.mode is EditorMode.SNIPPET:
            apply_styles(self.root, self.cur_css)


def _index_of(sequence: Sequence[object], target: object) -> int:
    for index, candidate in enumerate(sequence):
        if candidate is target:
            return index
    raise ValueError(f"{target!r} is not in the sequence")
