"""
Field introspection for binding and template generation.

Fields are the names in a class's own annotations, in declaration order.
Per-field directives are attached with ``Annotated``::

    class Settings:
        token: Annotated[str, EnvItem(key="API_TOKEN", comment="API key")] = ""
        timeout: Annotated[int, EnvItem(value="30")] = 30
        cache: Annotated[dict, DoNotBind] = {}
        VERSION: Final[str] = "1.0"
"""

from __future__ import annotations

import builtins
import inspect
import logging
import sys
import types
from dataclasses import dataclass
from typing import Any, Dict, ForwardRef, List, Optional, Tuple, Union

from typing_extensions import Annotated, ClassVar, Final, get_args, get_origin

logger = logging.getLogger("dotenv_reflect.fields")
logger.addHandler(logging.NullHandler())

__all__ = ["EnvItem", "DoNotBind", "FieldDescriptor", "describe_fields", "target_class"]

_UNION_ORIGINS: Tuple[Any, ...] = (Union, types.UnionType)


@dataclass(frozen=True)
class EnvItem:
    """Alternate key, template comment and template default value for a field."""

    key: str = ""
    comment: str = ""
    value: str = ""


class DoNotBind:
    """Marker: never populate this field from configuration.

    Usable as ``Annotated[T, DoNotBind]`` or ``Annotated[T, DoNotBind()]``.
    """


@dataclass(frozen=True)
class FieldDescriptor:
    name: str
    type: Any
    key: Optional[str] = None
    comment: Optional[str] = None
    default: Optional[str] = None
    skip: bool = False
    has_override: bool = False
    writable: bool = True
    # ClassVar fields are always written on the class, never on an instance
    class_level: bool = False

    @property
    def effective_key(self) -> str:
        return self.key if self.key else self.name


def target_class(target: Any) -> type:
    return target if isinstance(target, type) else type(target)


def _unwrap(hint: Any) -> Tuple[Any, List[Any], bool, bool]:
    """Strip Annotated/Final/ClassVar/Optional wrappers.

    Returns the inner type, the collected Annotated metadata and whether Final and
    ClassVar were seen.
    """
    metadata: List[Any] = []
    final = False
    class_var = False
    while True:
        origin = get_origin(hint)
        if origin is Annotated:
            inner, *extra = get_args(hint)
            metadata.extend(extra)
            hint = inner
        elif origin is Final:
            final = True
            hint = get_args(hint)[0]
        elif origin is ClassVar:
            class_var = True
            hint = get_args(hint)[0]
        elif hint is Final:
            return Final, metadata, True, class_var
        elif hint is ClassVar:
            return Any, metadata, final, True
        elif origin in _UNION_ORIGINS:
            args = get_args(hint)
            non_none = [a for a in args if a is not type(None)]
            if len(args) == 2 and len(non_none) == 1:
                hint = non_none[0]
            else:
                return hint, metadata, final, class_var
        else:
            return hint, metadata, final, class_var


class _AnnotationNamespace(dict):
    """Class namespace for evaluating a postponed annotation.

    Names missing from the class, the module and builtins resolve to a ForwardRef
    so the surrounding Annotated/Final/ClassVar wrappers still evaluate.
    """

    def __init__(self, cls: type, globalns: Dict[str, Any]) -> None:
        super().__init__(vars(cls))
        self._globalns = globalns
        self.unresolved: List[str] = []

    def __missing__(self, name: str) -> Any:
        if name in self._globalns:
            return self._globalns[name]
        if hasattr(builtins, name):
            return getattr(builtins, name)
        self.unresolved.append(name)
        return ForwardRef(name)


def _resolve_annotation(cls: type, name: str, value: Any, globalns: Dict[str, Any]) -> Any:
    if not isinstance(value, str):
        return value
    localns = _AnnotationNamespace(cls, globalns)
    try:
        hint = eval(value, globalns, localns)
    except (NameError, TypeError, AttributeError, SyntaxError) as exc:
        logger.warning(
            "Could not resolve annotation %r of %s.%s: %s", value, cls.__qualname__, name, exc
        )
        return value
    if localns.unresolved:
        logger.warning(
            "Unresolved name(s) %s in annotation of %s.%s",
            localns.unresolved,
            cls.__qualname__,
            name,
        )
    return hint


def _resolve_hints(cls: type, raw: Dict[str, Any]) -> Dict[str, Any]:
    module = sys.modules.get(cls.__module__)
    globalns: Dict[str, Any] = dict(vars(module)) if module is not None else {}
    globalns.setdefault("__builtins__", builtins)
    return {name: _resolve_annotation(cls, name, value, globalns) for name, value in raw.items()}


def describe_fields(target: Any) -> List[FieldDescriptor]:
    """Return a descriptor for each field declared directly on ``target``'s class."""
    cls = target_class(target)
    raw = dict(inspect.get_annotations(cls))
    hints = _resolve_hints(cls, raw)

    descriptors: List[FieldDescriptor] = []
    for name in raw:
        type_, metadata, final, class_var = _unwrap(hints[name])
        if type_ is Final:
            # bare Final: take the type of the assigned value
            type_ = type(cls.__dict__[name]) if name in cls.__dict__ else Any

        item = next((m for m in metadata if isinstance(m, EnvItem)), None)
        skip = any(m is DoNotBind or isinstance(m, DoNotBind) for m in metadata)
        descriptors.append(
            FieldDescriptor(
                name=name,
                type=type_,
                key=(item.key or None) if item else None,
                comment=(item.comment or None) if item else None,
                default=(item.value or None) if item else None,
                skip=skip,
                has_override=item is not None,
                writable=not final,
                class_level=class_var,
            )
        )
    logger.debug(
        "describe_fields(%s) -> %s", cls.__qualname__, [d.name for d in descriptors]
    )
    return descriptors
