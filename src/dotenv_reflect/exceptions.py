from __future__ import annotations

from typing import Any, Optional


class DotenvError(Exception):
    """Base dotenv exception."""


class SourceReadError(DotenvError):
    """Raised (and recorded on the store) when an existing source cannot be read."""

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.cause = cause
        msg = f"Could not read configuration source {path!r}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)


class TypeCoercionError(DotenvError):
    """Raised when a raw value is missing or cannot be converted to the requested type."""

    def __init__(
        self, key: str, value: Optional[str], target: Any, reason: str | None = None
    ) -> None:
        self.key = key
        self.value = value
        self.target = target
        name = getattr(target, "__name__", repr(target))
        if value is None:
            msg = f"No value for key {key!r} (expected {name})"
        else:
            msg = f"Cannot convert {value!r} for key {key!r} to {name}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class UnresolvedFieldTypeError(DotenvError):
    """Raised when a field's type has neither a native coercion nor a registered one."""

    def __init__(self, field: str, field_type: Any) -> None:
        self.field = field
        self.field_type = field_type
        super().__init__(
            f"Could not identify the type {field_type!r} of field {field!r}; "
            "mark it with DoNotBind or register a coercion for it."
        )


class ImmutableFieldError(DotenvError):
    """Raised when a field cannot be written at runtime."""

    def __init__(self, field: str, reason: str | None = None) -> None:
        self.field = field
        msg = f"Field {field!r} is not writable"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class StoreFrozenError(DotenvError):
    """Raised when attempting mutation of a frozen store."""
