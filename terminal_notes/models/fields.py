"""
Field decoding for the JSON data files.

A missing, ``null`` or wrongly typed field decodes to its zero value instead
of rejecting the entry, so one damaged field never costs the rest of a file.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Type, TypeVar

from ..utils.timestamps import parse_rfc3339

# Zero value for timestamps that are missing or unreadable
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

V = TypeVar('V')


def typed_value(data: Dict[str, Any], key: str, kind: Type[V], zero: V) -> V:
    value = data.get(key)
    if isinstance(value, kind):
        return value
    return zero


def timestamp_value(data: Dict[str, Any], key: str) -> datetime:
    value = data.get(key)
    if not isinstance(value, str):
        return ZERO_TIME
    try:
        return parse_rfc3339(value)
    except ValueError:
        return ZERO_TIME
