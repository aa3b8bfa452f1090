from __future__ import annotations

import logging
import os
import threading
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Optional, TypeVar, Union

from dotenv_reflect.coercion.native import (
    Char,
    Long,
    parse_bool,
    parse_char,
    parse_double,
    parse_int,
    parse_long,
)
from dotenv_reflect.exceptions import SourceReadError, StoreFrozenError, TypeCoercionError
from dotenv_reflect.utils import _redact_for_log

from .sources import (
    DEFAULT_ENCODING,
    DEFAULT_PATH,
    FileSource,
    LineSourceProtocol,
    LinesSource,
    parse_lines,
)

logger = logging.getLogger("dotenv_reflect.store")
logger.addHandler(logging.NullHandler())

T = TypeVar("T")

Source = Union[str, "os.PathLike[str]", LineSourceProtocol]


class KeyValueStore:
    """
    Flat key/value configuration read once from a ``key=value`` text source.

    When ``fallback_to_env`` is set, keys missing from the source are looked up
    in the process environment at call time. Lookups are exact and case-sensitive.

    ``in`` and ``store[key]`` follow ``get`` and so see the environment fallback.
    ``len()``, iteration and ``as_map()`` only cover the entries read from the
    source (plus ``set``/``merge``); the environment is never enumerated.
    """

    def __init__(
        self,
        source: Source = DEFAULT_PATH,
        fallback_to_env: bool = False,
        *,
        encoding: str = DEFAULT_ENCODING,
        frozen: bool = False,
    ) -> None:
        self._lock = threading.RLock()
        self._fallback_to_env = fallback_to_env
        self._frozen = False
        self.read_error: Optional[SourceReadError] = None

        if isinstance(source, LineSourceProtocol):
            self._source: LineSourceProtocol = source
        else:
            self._source = FileSource(source, encoding)

        self._values: Dict[str, str] = self._load()
        logger.debug(
            "KeyValueStore init source=%r fallback_to_env=%s entries=%d",
            self._source,
            self._fallback_to_env,
            len(self._values),
        )
        if frozen:
            self.freeze()

    @classmethod
    def from_lines(cls, lines: Iterable[str], fallback_to_env: bool = False) -> "KeyValueStore":
        return cls(LinesSource(lines), fallback_to_env)

    def _load(self) -> Dict[str, str]:
        try:
            return parse_lines(self._source.read_lines())
        except FileNotFoundError:
            logger.debug("Source %r does not exist; starting empty", self._source)
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            path = getattr(self._source, "path", repr(self._source))
            self.read_error = SourceReadError(path, exc)
            logger.error("Failed to read configuration source %r: %s", path, exc)
            return {}

    @property
    def fallback_to_env(self) -> bool:
        return self._fallback_to_env

    # lookups
    def get(self, key: str) -> Optional[str]:
        """
        Return the value for ``key``, or None when neither the source nor (if enabled)
        the environment has it.
        """
        with self._lock:
            if key in self._values:
                return self._values[key]
        if self._fallback_to_env:
            return os.environ.get(key)
        return None

    def is_unset(self, key: str) -> bool:
        return self.get(key) is None

    def _typed(self, key: str, target: Any, parser: Callable[[str, str], T]) -> T:
        raw = self.get(key)
        if raw is None:
            logger.error(
                "Typed lookup of unset key %r as %s", key, getattr(target, "__name__", target)
            )
            raise TypeCoercionError(key, None, target)
        try:
            return parser(raw, key)
        except TypeCoercionError:
            logger.error(
                "Typed lookup failed key=%r value=%s", key, _redact_for_log(key, raw)
            )
            raise

    def get_int(self, key: str) -> int:
        return self._typed(key, int, parse_int)

    def get_long(self, key: str) -> int:
        return self._typed(key, Long, parse_long)

    def get_bool(self, key: str) -> bool:
        return self._typed(key, bool, parse_bool)

    def get_double(self, key: str) -> float:
        return self._typed(key, float, parse_double)

    def get_char(self, key: str) -> str:
        return self._typed(key, Char, parse_char)

    def as_map(self) -> Mapping[str, str]:
        """Read-only view of the entries parsed from the source (environment excluded)."""
        with self._lock:
            return MappingProxyType(dict(self._values))

    # mutation
    def freeze(self) -> None:
        with self._lock:
            self._frozen = True
        logger.debug("KeyValueStore frozen entries=%d", len(self._values))

    def is_frozen(self) -> bool:
        return self._frozen

    def _ensure_mutable(self) -> None:
        if self._frozen:
            logger.error("Attempted mutation of a frozen store.")
            raise StoreFrozenError("Store is frozen")

    def set(self, key: str, value: str) -> None:
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError("Store keys and values must be str")
        with self._lock:
            self._ensure_mutable()
            self._values[key] = value
        logger.debug("Store.set key=%r value=%s", key, _redact_for_log(key, value))

    def merge(self, values: Mapping[str, str]) -> None:
        incoming = dict(values)
        if not all(isinstance(k, str) and isinstance(v, str) for k, v in incoming.items()):
            raise TypeError("Store keys and values must be str")
        with self._lock:
            self._ensure_mutable()
            self._values.update(incoming)
        logger.debug("Store.merge keys=%s", list(incoming.keys()))

    # mapping conveniences
    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and not self.is_unset(key)

    def __getitem__(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(tuple(self._values.keys()))

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} source={self._source!r} entries={len(self)} "
            f"fallback_to_env={self._fallback_to_env} frozen={self._frozen}>"
        )
