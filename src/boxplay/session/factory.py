"""Build edit sessions from explicit mount configurations."""

from __future__ import annotations

from typing import Iterable

from boxplay.config import MountConfig
from boxplay.events import EventBus
from boxplay.session.session import EditSession


def create_sessions(
    mounts: Iterable[MountConfig], bus: EventBus | None = None
) -> list[EditSession]:
    """Create one session per mount; a session's editor id is its position.

    Sessions share *bus* when one is given, otherwise each gets its own.
    """
    return [
        EditSession(mount.snippets, mount.config, editor_id=editor_id, bus=bus)
        for editor_id, mount in enumerate(mounts)
    ]
