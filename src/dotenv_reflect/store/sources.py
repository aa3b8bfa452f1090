from __future__ import annotations

import os
from typing import Dict, Iterable, Iterator, List, Protocol, Union

from typing_extensions import runtime_checkable

DEFAULT_PATH = ".env"
DEFAULT_ENCODING = "utf-8"


@runtime_checkable
class LineSourceProtocol(Protocol):
    def read_lines(self) -> Iterable[str]: ...


class FileSource:
    """Reads a text file line by line; raises FileNotFoundError if it is missing."""

    def __init__(
        self, path: Union[str, "os.PathLike[str]"], encoding: str = DEFAULT_ENCODING
    ) -> None:
        self.path = os.fspath(path)
        self.encoding = encoding

    def read_lines(self) -> Iterator[str]:
        # universal newlines: "\r\n" and "\r" arrive as "\n"
        with open(self.path, "r", encoding=self.encoding, newline=None) as fh:
            for line in fh:
                yield line[:-1] if line.endswith("\n") else line

    def __repr__(self) -> str:
        return f"FileSource({self.path!r})"


class LinesSource:
    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: List[str] = list(lines)

    def read_lines(self) -> Iterator[str]:
        return iter(self._lines)

    def __repr__(self) -> str:
        return f"LinesSource(<{len(self._lines)} lines>)"


def parse_lines(lines: Iterable[str]) -> Dict[str, str]:
    """Parse ``key=value`` lines into a dict.

    Lines without ``=`` are ignored. Others are split at the first ``=`` only and
    the value is kept verbatim. A repeated key keeps its last value.
    """
    entries: Dict[str, str] = {}
    for line in lines:
        if "=" not in line:
            continue
        key, _, value = line.partition("=")
        entries[key] = value
    return entries
