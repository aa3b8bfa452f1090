from __future__ import annotations

import logging
from typing import Any, List, Mapping

from dotenv_reflect.fields import describe_fields, target_class

logger = logging.getLogger("dotenv_reflect.template")
logger.addHandler(logging.NullHandler())

__all__ = ["TemplateGenerator", "generate", "render_mapping"]


class TemplateGenerator:
    """
    Builds a ``.env`` template from a class's field layout.

    Every declared field is emitted, DoNotBind fields included, as an optional
    ``# comment`` line followed by ``key=default``. Defaults come from
    ``EnvItem(value=...)``; a field without one gets an empty value.
    """

    def generate(self, target: Any) -> str:
        lines: List[str] = []
        fields = describe_fields(target)
        for field in fields:
            if field.comment:
                lines.append(f"# {field.comment}\n")
            lines.append(f"{field.effective_key}={field.default or ''}\n")
        logger.debug(
            "Generated template for %s with %d field(s)",
            target_class(target).__qualname__,
            len(fields),
        )
        return "".join(lines)


def generate(target: Any) -> str:
    return TemplateGenerator().generate(target)


def render_mapping(values: Mapping[str, str]) -> str:
    """Render a plain mapping as ``key=value`` lines, in iteration order."""
    return "".join(f"{key}={value}\n" for key, value in values.items())
