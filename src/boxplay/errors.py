"""Error types raised by the boxplay engine."""

from __future__ import annotations


class BoxplayError(Exception):
    """Base class for every error raised by boxplay."""


class ParseError(BoxplayError):
    """Raised when source text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class MalformedStructure(ParseError):
    """Raised when structure notation contains a character outside ``[``, ``]`` and digits."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"Unexpected character {char!r} at position {position} in structure notation",
            line=1,
            column=position + 1,
        )


class UnknownPropertyError(BoxplayError, KeyError):
    """Raised when a property outside the known property table is looked up."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown CSS property: {self.name!r}"


class SessionError(BoxplayError):
    """Raised when an edit session operation's precondition does not hold."""


class ConfigError(BoxplayError):
    """Raised for invalid editor configuration or playground documents."""
