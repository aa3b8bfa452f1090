from __future__ import annotations

from typing import Any, Optional

from .native import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    NATIVE_COERCIONS,
    Char,
    Long,
    native_coercion_for,
    parse_bool,
    parse_char,
    parse_double,
    parse_int,
    parse_long,
    parse_str,
)
from .registry import CoercionFunction, TypeCoercionRegistry

__all__ = [
    "Char",
    "Long",
    "INT_MIN",
    "INT_MAX",
    "LONG_MIN",
    "LONG_MAX",
    "NATIVE_COERCIONS",
    "native_coercion_for",
    "parse_bool",
    "parse_char",
    "parse_double",
    "parse_int",
    "parse_long",
    "parse_str",
    "CoercionFunction",
    "TypeCoercionRegistry",
    "REGISTRY",
    "register_coercion",
    "lookup_coercion",
]

# Process-wide default, used by binders that are not given their own registry.
REGISTRY = TypeCoercionRegistry()


def register_coercion(type_: Any, func: CoercionFunction) -> None:
    REGISTRY.register(type_, func)


def lookup_coercion(type_: Any) -> Optional[CoercionFunction]:
    return REGISTRY.lookup(type_)
