from docblock.config import ParserConfig, ScanMode
from docblock.errors import ConfigError, DocblockError
from docblock.models import Docblock, Location, Tag, TagPosition
from docblock.parser import parse

__all__ = [
    "ConfigError",
    "Docblock",
    "DocblockError",
    "Location",
    "ParserConfig",
    "ScanMode",
    "Tag",
    "TagPosition",
    "parse",
]
