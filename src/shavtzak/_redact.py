"""Helpers for safe debug logging.

Roster payloads carry personal numbers. This module masks them (and
truncates long strings) before they reach DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_SENSITIVE_VALUE_KEYS: frozenset[str] = frozenset({"idnumber", "id_number", "personid", "person_id"})


def mask_id(value: str) -> str:
    """Keep the last two characters of an id, star out the rest."""
    if len(value) <= 2:
        return "*" * len(value)
    return "*" * (len(value) - 2) + value[-2:]


def redact_for_log(value: Any, *, max_string: int = 512) -> Any:
    """Copy a wire payload (``to_wire()`` output) with personal numbers masked."""
    if isinstance(value, Mapping):
        return {
            key: (
                mask_id(str(item))
                if str(key).lower() in _SENSITIVE_VALUE_KEYS
                else redact_for_log(item, max_string=max_string)
            )
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact_for_log(item, max_string=max_string) for item in value]
    if isinstance(value, str) and len(value) > max_string:
        return f"{value[:max_string]}…<truncated>"
    return value
