from __future__ import annotations

from typing import Any

__all__ = ["_redact_for_log"]

_SECRET_MARKERS = ("secret", "password", "token", "key", "passwd", "api_key")


def _redact_for_log(name: str, value: Any) -> str:
    """
    Redact likely secrets in logs.
    """
    lowered = name.lower()
    if any(s in lowered for s in _SECRET_MARKERS):
        return "***"
    try:
        return repr(value)
    except Exception:
        return "<unreprable>"
