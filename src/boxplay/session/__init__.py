from boxplay.session.factory import create_sessions
from boxplay.session.markup import MarkupKind, MarkupLine
from boxplay.session.session import EditSession

__all__ = ["EditSession", "MarkupKind", "MarkupLine", "create_sessions"]
