from .manager import KeyValueStore
from .sources import (
    DEFAULT_ENCODING,
    DEFAULT_PATH,
    FileSource,
    LineSourceProtocol,
    LinesSource,
    parse_lines,
)

__all__ = [
    "KeyValueStore",
    "LineSourceProtocol",
    "FileSource",
    "LinesSource",
    "parse_lines",
    "DEFAULT_PATH",
    "DEFAULT_ENCODING",
]
