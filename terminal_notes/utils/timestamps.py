"""
Timestamp helpers for the JSON data files.

Timestamps are written as RFC 3339 strings with the local UTC offset. Files
written by other tools may use a trailing ``Z`` or carry nanosecond
fractions; both are accepted on read.
"""

import re
from datetime import datetime, timezone

_FRACTION = re.compile(r"\.(\d+)")


def now() -> datetime:
    """Current local time, timezone aware."""
    return datetime.now(timezone.utc).astimezone()


def to_rfc3339(value: datetime) -> str:
    return value.isoformat()


def parse_rfc3339(value: str) -> datetime:
    """Parse an RFC 3339 timestamp.

    Raises:
        ValueError: if the value is not a timestamp
        TypeError: if the value is not a string
    """
    if not isinstance(value, str):
        raise TypeError(f"timestamp must be a string, got {type(value).__name__}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    # fromisoformat wants exactly six fractional digits on older interpreters
    text = _FRACTION.sub(lambda m: "." + (m.group(1) + "000000")[:6], text)
    return datetime.fromisoformat(text)
