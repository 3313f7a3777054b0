"""Render configuration values for debug logs.

Credential handles are never printed, long strings are truncated and
shared resources (sessions, streams) are shown by type name only.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset({"credentials"})


def _render(value: Any, max_string: int) -> Any:
    if value is None or isinstance(value, (int, float, bool)):
        return value
    if isinstance(value, str):
        if len(value) > max_string:
            return f"{value[:max_string]}…<truncated>"
        return value
    return f"<{type(value).__name__}>"


def redact_for_log(values: Mapping[str, Any], *, max_string: int = 512) -> dict[str, Any]:
    """Return a log-safe copy of the flat mapping *values*."""
    redacted: dict[str, Any] = {}
    for key, value in values.items():
        if key in _SENSITIVE_VALUE_KEYS and value is not None:
            redacted[key] = "<redacted>"
        else:
            redacted[key] = _render(value, max_string)
    return redacted
