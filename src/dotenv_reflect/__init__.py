"""
dotenv_reflect: flat ``key=value`` configuration with reflective class binding.

- Reads a ``.env`` style file once, optionally falling back to the process environment.
- Typed accessors fail loudly on missing or malformed values.
- Binds the annotated fields of a class from the loaded values, with per-field
  key overrides and skip markers, and user-registered coercions for other types.
- Generates a ``.env`` template from a class's field layout.
"""

from __future__ import annotations

from dotenv_reflect.binding import FieldBinder, bind
from dotenv_reflect.coercion import (
    REGISTRY,
    Char,
    CoercionFunction,
    Long,
    TypeCoercionRegistry,
    lookup_coercion,
    register_coercion,
)
from dotenv_reflect.dotenv import ReflectiveDotenv, as_plain, as_reflective
from dotenv_reflect.exceptions import (
    DotenvError,
    ImmutableFieldError,
    SourceReadError,
    StoreFrozenError,
    TypeCoercionError,
    UnresolvedFieldTypeError,
)
from dotenv_reflect.fields import DoNotBind, EnvItem, FieldDescriptor, describe_fields
from dotenv_reflect.store import KeyValueStore, LineSourceProtocol
from dotenv_reflect.template import TemplateGenerator, generate, render_mapping

__all__ = [
    "KeyValueStore",
    "LineSourceProtocol",
    "ReflectiveDotenv",
    "as_reflective",
    "as_plain",
    "FieldBinder",
    "bind",
    "TemplateGenerator",
    "generate",
    "render_mapping",
    "EnvItem",
    "DoNotBind",
    "FieldDescriptor",
    "describe_fields",
    "Long",
    "Char",
    "CoercionFunction",
    "TypeCoercionRegistry",
    "REGISTRY",
    "register_coercion",
    "lookup_coercion",
    "DotenvError",
    "SourceReadError",
    "TypeCoercionError",
    "UnresolvedFieldTypeError",
    "ImmutableFieldError",
    "StoreFrozenError",
]
