"""boxplay - editing engine for an interactive box-layout playground."""

__version__ = "0.1.0"
