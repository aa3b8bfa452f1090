from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from dotenv_reflect.coercion import REGISTRY, TypeCoercionRegistry, native_coercion_for
from dotenv_reflect.exceptions import (
    ImmutableFieldError,
    TypeCoercionError,
    UnresolvedFieldTypeError,
)
from dotenv_reflect.fields import FieldDescriptor, describe_fields, target_class
from dotenv_reflect.store import KeyValueStore
from dotenv_reflect.utils import _redact_for_log

logger = logging.getLogger("dotenv_reflect.binding")
logger.addHandler(logging.NullHandler())


class FieldBinder:
    """
    Populates the annotated fields of a class (or instance) from a KeyValueStore.

    Each field is handled in declaration order:

    - fields marked ``DoNotBind`` are left alone;
    - fields whose effective key is unset in the store are left alone, silently;
    - otherwise the raw value is coerced by declared type (bool, int, Long, Char,
      str, float, then the coercion registry) and written back.

    Binding fails fast: the first failing field raises, fields bound before it keep
    their new values and later fields are not visited.
    """

    def __init__(self, registry: Optional[TypeCoercionRegistry] = None) -> None:
        self._registry = registry if registry is not None else REGISTRY

    @property
    def registry(self) -> TypeCoercionRegistry:
        return self._registry

    def bind(self, target: Any, store: KeyValueStore) -> Dict[str, Any]:
        """
        Bind ``target`` from ``store`` and return ``{field_name: value}`` for every
        field that was written.
        """
        bound: Dict[str, Any] = {}
        for field in describe_fields(target):
            key = field.effective_key
            if field.skip:
                logger.debug("Field %r marked DoNotBind; skipping", field.name)
                continue
            if store.is_unset(key):
                logger.debug("Key %r unset; leaving field %r untouched", key, field.name)
                continue
            if not field.writable:
                logger.error("Field %r is Final and cannot be bound", field.name)
                raise ImmutableFieldError(field.name, "declared Final")

            raw = store.get(key)
            assert raw is not None
            value = self._coerce(field, key, raw, store)
            self._write(target, field, value)
            bound[field.name] = value
            logger.debug(
                "Bound field %r from key %r value=%s",
                field.name,
                key,
                _redact_for_log(key, value),
            )
        logger.debug("bind(%s) wrote %d field(s)", target_class(target).__qualname__, len(bound))
        return bound

    def _coerce(self, field: FieldDescriptor, key: str, raw: str, store: KeyValueStore) -> Any:
        parser = native_coercion_for(field.type)
        if parser is not None:
            return parser(raw, key)

        coercion = self._registry.lookup(field.type)
        if coercion is None:
            logger.error("No coercion for field %r of type %r", field.name, field.type)
            raise UnresolvedFieldTypeError(field.name, field.type)
        try:
            return coercion(raw, store.as_map())
        except (ValueError, TypeError) as exc:
            logger.error(
                "Coercion for field %r failed key=%r value=%s: %s",
                field.name,
                key,
                _redact_for_log(key, raw),
                exc,
            )
            raise TypeCoercionError(key, raw, field.type, str(exc)) from exc

    @staticmethod
    def _write(target: Any, field: FieldDescriptor, value: Any) -> None:
        try:
            owner = target_class(target) if field.class_level else target
            setattr(owner, field.name, value)
        except (AttributeError, TypeError) as exc:
            logger.error("Could not write field %r: %s", field.name, exc)
            raise ImmutableFieldError(field.name, str(exc)) from exc


def bind(
    target: Any, store: KeyValueStore, registry: Optional[TypeCoercionRegistry] = None
) -> Dict[str, Any]:
    return FieldBinder(registry).bind(target, store)
