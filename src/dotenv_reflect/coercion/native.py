from __future__ import annotations

import re
from typing import Any, Callable, NewType, Tuple

from dotenv_reflect.exceptions import TypeCoercionError

__all__ = [
    "Long",
    "Char",
    "INT_MIN",
    "INT_MAX",
    "LONG_MIN",
    "LONG_MAX",
    "parse_bool",
    "parse_int",
    "parse_long",
    "parse_char",
    "parse_str",
    "parse_double",
    "NATIVE_COERCIONS",
    "native_coercion_for",
]

# Marker types for the two widths Python does not have natively.
Long = NewType("Long", int)
Char = NewType("Char", str)

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")

NativeParser = Callable[[str, str], Any]


def parse_bool(raw: str, key: str = "") -> bool:
    # Only "true" (any case) is truthy; everything else is False.
    return raw.lower() == "true"


def parse_int(raw: str, key: str = "") -> int:
    if not _INT_RE.fullmatch(raw):
        raise TypeCoercionError(key, raw, int, "not an integer")
    value = int(raw)
    if not INT_MIN <= value <= INT_MAX:
        raise TypeCoercionError(key, raw, int, "out of 32-bit range")
    return value


def parse_long(raw: str, key: str = "") -> int:
    if not _INT_RE.fullmatch(raw):
        raise TypeCoercionError(key, raw, Long, "not an integer")
    value = int(raw)
    if not LONG_MIN <= value <= LONG_MAX:
        raise TypeCoercionError(key, raw, Long, "out of 64-bit range")
    return value


def parse_char(raw: str, key: str = "") -> str:
    if not raw:
        raise TypeCoercionError(key, raw, Char, "empty value")
    return raw[0]


def parse_str(raw: str, key: str = "") -> str:
    return raw


def parse_double(raw: str, key: str = "") -> float:
    if "_" in raw:
        raise TypeCoercionError(key, raw, float, "not a floating point number")
    try:
        return float(raw)
    except ValueError as e:
        raise TypeCoercionError(key, raw, float, "not a floating point number") from e


# Dispatch order is significant.
NATIVE_COERCIONS: Tuple[Tuple[Any, NativeParser], ...] = (
    (bool, parse_bool),
    (int, parse_int),
    (Long, parse_long),
    (Char, parse_char),
    (str, parse_str),
    (float, parse_double),
)


def native_coercion_for(type_: Any) -> NativeParser | None:
    for native_type, parser in NATIVE_COERCIONS:
        if type_ is native_type:
            return parser
    return None
