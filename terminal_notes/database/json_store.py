"""
JSON file persistence for the notes and todos collections.

Each collection lives in its own file as a pretty-printed JSON array. Loading
never raises: a missing, unreadable or malformed file yields an empty list.
Saving logs failures and reports them through its return value.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Protocol, Sequence, TypeVar

from ..utils.logger import Logger

logger = Logger()

JSON_INDENT = 2


class SerializableItem(Protocol):
    """Anything that can be written as one JSON object in a data file."""

    def to_dict(self) -> Dict[str, Any]:
        ...


T = TypeVar('T', bound=SerializableItem)


def dumps_items(items: Sequence[SerializableItem]) -> str:
    """Render items exactly as they are written to disk."""
    return json.dumps(
        [item.to_dict() for item in items],
        indent=JSON_INDENT,
        ensure_ascii=False,
    )


def load_items(path: Path, factory: Callable[[Dict[str, Any]], T]) -> List[T]:
    """
    Read a JSON array from `path` and build one item per entry with `factory`.

    A missing file, an I/O error, invalid or too deeply nested JSON, or a
    top-level value that is not an array produce an empty list. A ``null``
    document is an empty collection. Entries that are not objects, or that
    `factory` rejects, are skipped and the rest of the file is kept.
    """
    try:
        raw = Path(path).read_text(encoding='utf-8')
    except FileNotFoundError:
        logger.debug(f"No data file at {path}; starting empty")
        return []
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {path}: {e}; starting empty")
        return []

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        logger.warning(f"Malformed JSON in {path}: {e}; starting empty")
        return []

    if data is None:
        return []
    if not isinstance(data, list):
        logger.warning(f"Expected a JSON array in {path}; starting empty")
        return []

    items: List[T] = []
    for position, entry in enumerate(data):
        if not isinstance(entry, dict):
            logger.warning(f"Entry {position} in {path} is not an object; skipping")
            continue
        try:
            items.append(factory(entry))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Invalid entry {position} in {path}: {e}; skipping")
    return items


def save_items(path: Path, items: Sequence[SerializableItem]) -> bool:
    """
    Overwrite `path` with `items` as a JSON array.

    Returns True on success. Serialization and write errors are logged and
    reported as False; they never propagate.
    """
    try:
        payload = dumps_items(items)
    except (TypeError, ValueError) as e:
        logger.error(f"Error serializing data for {path}: {e}")
        return False

    try:
        Path(path).write_text(payload, encoding='utf-8')
    except OSError as e:
        logger.error(f"Error writing to file {path}: {e}")
        return False
    return True
