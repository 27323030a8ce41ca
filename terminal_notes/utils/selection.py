"""
Selection state for the notes and todos lists.

Each list has one selection slot. The slots are mutually exclusive:
selecting in one list clears the other. -1 means nothing is selected.
"""

from typing import Callable, List, Optional

from .enums import SelectionKind
from .logger import Logger

logger = Logger()

NO_SELECTION = -1

SelectionCallback = Callable[[SelectionKind, int], None]


class SelectionState:
    """Tracks the highlighted note or todo used as the target of edit/delete/toggle."""

    def __init__(self):
        self._note_index = NO_SELECTION
        self._todo_index = NO_SELECTION
        self._callbacks: List[SelectionCallback] = []

    @property
    def note_index(self) -> int:
        return self._note_index

    @property
    def todo_index(self) -> int:
        return self._todo_index

    @property
    def kind(self) -> SelectionKind:
        if self._note_index >= 0:
            return SelectionKind.NOTE
        if self._todo_index >= 0:
            return SelectionKind.TODO
        return SelectionKind.NONE

    def on_change(self, callback: SelectionCallback) -> None:
        """Register a callback invoked with (kind, index) after every change."""
        self._callbacks.append(callback)

    def select_note(self, index: int) -> None:
        self._set(note_index=max(index, NO_SELECTION), todo_index=NO_SELECTION)

    def select_todo(self, index: int) -> None:
        self._set(note_index=NO_SELECTION, todo_index=max(index, NO_SELECTION))

    def clear(self) -> None:
        self._set(note_index=NO_SELECTION, todo_index=NO_SELECTION)

    def clear_notes(self) -> None:
        """Drop the note selection, leaving a todo selection alone."""
        self._set(note_index=NO_SELECTION, todo_index=self._todo_index)

    def clear_todos(self) -> None:
        """Drop the todo selection, leaving a note selection alone."""
        self._set(note_index=self._note_index, todo_index=NO_SELECTION)

    def selected_note(self, count: int) -> Optional[int]:
        """Return the note index if it is valid for a list of `count` notes."""
        if 0 <= self._note_index < count:
            return self._note_index
        return None

    def selected_todo(self, count: int) -> Optional[int]:
        """Return the todo index if it is valid for a list of `count` todos."""
        if 0 <= self._todo_index < count:
            return self._todo_index
        return None

    def _set(self, note_index: int, todo_index: int) -> None:
        if (note_index, todo_index) == (self._note_index, self._todo_index):
            return
        self._note_index = note_index
        self._todo_index = todo_index
        kind = self.kind
        index = {SelectionKind.NOTE: note_index,
                 SelectionKind.TODO: todo_index}.get(kind, NO_SELECTION)
        logger.debug(f"Selection changed: {kind.name} {index}")
        for callback in self._callbacks:
            callback(kind, index)
