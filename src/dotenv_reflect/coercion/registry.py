from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple

from typing_extensions import runtime_checkable

logger = logging.getLogger("dotenv_reflect.coercion")
logger.addHandler(logging.NullHandler())


@runtime_checkable
class CoercionFunction(Protocol):
    def __call__(self, raw: str, values: Mapping[str, str]) -> Any: ...


class TypeCoercionRegistry:
    """Maps an exact type identifier to a user supplied coercion function.

    Re-registering a type replaces the previous function. Writers are
    serialised; lookups never raise and return None for unknown types.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._coercions: Dict[Any, CoercionFunction] = {}
        logger.debug("TypeCoercionRegistry initialized id=%s", hex(id(self)))

    @staticmethod
    def _name(type_: Any) -> str:
        return getattr(type_, "__qualname__", None) or repr(type_)

    def register(self, type_: Any, func: CoercionFunction) -> None:
        if not callable(func):
            raise TypeError("Coercion function must be callable")
        with self._lock:
            existed = type_ in self._coercions
            self._coercions[type_] = func
        if existed:
            logger.debug("Coercion overridden for %s", self._name(type_))
        else:
            logger.debug("Coercion registered for %s", self._name(type_))

    def unregister(self, type_: Any) -> bool:
        with self._lock:
            removed = self._coercions.pop(type_, None) is not None
        logger.debug("Unregister(%s) -> %s", self._name(type_), removed)
        return removed

    def lookup(self, type_: Any) -> Optional[CoercionFunction]:
        try:
            with self._lock:
                return self._coercions.get(type_)
        except TypeError:
            # unhashable annotation; cannot have been registered
            logger.debug("Lookup with unhashable type %r", type_)
            return None

    def has(self, type_: Any) -> bool:
        return self.lookup(type_) is not None

    def registered_types(self) -> Tuple[Any, ...]:
        with self._lock:
            return tuple(self._coercions.keys())

    def clear(self) -> None:
        with self._lock:
            logger.debug("Clearing coercion registry: count=%d", len(self._coercions))
            self._coercions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._coercions)

    def __contains__(self, type_: Any) -> bool:
        return self.has(type_)
