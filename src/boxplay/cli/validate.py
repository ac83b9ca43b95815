"""CLI command: boxplay validate -- check a playground document parses."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from boxplay.errors import BoxplayError, MalformedStructure
from boxplay.loader import load_mounts
from boxplay.structure import parse_structure
from boxplay.stylesheet import parse_stylesheet


@click.command()
@click.argument("document", type=click.Path(exists=True, dir_okay=False))
def validate(document: str) -> None:
    """Parse every snippet of a playground document.

    Exits with code 0 when all structures parse, or code 1 on the first
    malformed structure or invalid document.
    """
    path = Path(document)
    try:
        mounts = load_mounts(path)
    except BoxplayError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    snippets = 0
    rules = 0
    for editor_id, mount in enumerate(mounts):
        for index, source in enumerate(mount.snippets):
            if source.structure is not None:
                try:
                    parse_structure(source.structure)
                except MalformedStructure as exc:
                    click.echo(f"editor[{editor_id}].snippets[{index}]: {exc}", err=True)
                    sys.exit(1)
            rules += len(parse_stylesheet(source.css))
            snippets += 1

    click.echo(f"OK: {path.name} is valid ({len(mounts)} editor(s), {snippets} snippet(s), {rules} rule(s))")
