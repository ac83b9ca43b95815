from boxplay.structure.formatter import format_structure
from boxplay.structure.parser import parse_structure, single_container

__all__ = ["format_structure", "parse_structure", "single_container"]
