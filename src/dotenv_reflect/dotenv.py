from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional, Union

from dotenv_reflect.binding import FieldBinder
from dotenv_reflect.coercion import CoercionFunction, TypeCoercionRegistry
from dotenv_reflect.store import DEFAULT_ENCODING, DEFAULT_PATH, KeyValueStore
from dotenv_reflect.store.manager import Source
from dotenv_reflect.template import TemplateGenerator

logger = logging.getLogger("dotenv_reflect.dotenv")
logger.addHandler(logging.NullHandler())


class ReflectiveDotenv(KeyValueStore):
    """
    A KeyValueStore that can also bind classes and generate templates for them.

    Example::

        class Settings:
            host: str = "localhost"
            port: int = 8080
            debug: bool = False

        env = as_reflective(".env", fallback_to_env=True)
        env.bind(Settings)
        print(env.generate(Settings))
    """

    def __init__(
        self,
        source: Source = DEFAULT_PATH,
        fallback_to_env: bool = False,
        *,
        encoding: str = DEFAULT_ENCODING,
        frozen: bool = False,
        registry: Optional[TypeCoercionRegistry] = None,
    ) -> None:
        super().__init__(source, fallback_to_env, encoding=encoding, frozen=frozen)
        self._binder = FieldBinder(registry)
        self._generator = TemplateGenerator()

    @property
    def registry(self) -> TypeCoercionRegistry:
        return self._binder.registry

    def add_adapter(self, coercion: CoercionFunction, type_: Any) -> None:
        """
        Register ``coercion`` for fields annotated with ``type_`` on this instance's
        registry (the process-wide one unless another was given).
        """
        self.registry.register(type_, coercion)

    def bind(self, target: Any) -> Dict[str, Any]:
        """Populate the annotated fields of ``target`` from this store."""
        return self._binder.bind(target, self)

    def generate(self, target: Any) -> str:
        """Return a ``.env`` template describing the fields of ``target``."""
        return self._generator.generate(target)

    # aliases
    reflect_to = bind
    create = generate


def as_reflective(
    path: Union[str, "os.PathLike[str]"] = DEFAULT_PATH, fallback_to_env: bool = False
) -> ReflectiveDotenv:
    return ReflectiveDotenv(path, fallback_to_env)


def as_plain(
    path: Union[str, "os.PathLike[str]"] = DEFAULT_PATH, fallback_to_env: bool = False
) -> KeyValueStore:
    return KeyValueStore(path, fallback_to_env)
