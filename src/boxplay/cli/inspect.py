"""CLI command: boxplay inspect -- display a playground document."""

from __future__ import annotations

import sys

import click

from boxplay.config import EditorMode
from boxplay.errors import BoxplayError
from boxplay.loader import load_mounts
from boxplay.model import Element
from boxplay.session import create_sessions
from boxplay.structure import format_structure


def _echo_element(elem: Element, depth: int) -> None:
    indent = "  " * depth
    style = f' style="{elem.style}"' if elem.style else ""
    opening = f'{indent}<div class="{elem.class_name}"{style}>'
    if not elem.children:
        click.echo(f"{opening}{elem.text}</div>")
        return
    click.echo(opening)
    for child in elem.children:
        _echo_element(child, depth + 1)
    click.echo(f"{indent}</div>")


@click.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
def inspect(document: str) -> None:
    """Load a playground document and show every editor's snippets.

    For each snippet prints its structure notation, the preview markup and
    the stylesheet code view.
    """
    try:
        sessions = create_sessions(load_mounts(document))
    except BoxplayError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for session in sessions:
        title = session.config.title or "(untitled)"
        click.echo(f"Editor {session.editor_id}: {title} [{session.mode.value}]")
        # Free-mode editors only ever show their first snippet.
        shown = session.snippets if session.mode is EditorMode.SNIPPET else session.snippets[:1]
        for index, snippet in enumerate(shown):
            if index:
                session.switch_snippet(index)
            click.echo(f"  Snippet {index}: {snippet.name}")
            click.echo(f"    Structure: {format_structure(snippet.html)}")
            click.echo(f"    Items:     {session.item_count}")
            click.echo("    Preview:")
            for child in session.root.children:
                _echo_element(child, depth=3)
            click.echo("    CSS:")
            for line in session.code_lines:
                click.echo(f"      {line.text}".rstrip())
        click.echo()
