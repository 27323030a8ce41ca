"""
Notes Service
The single owning object for one session: the store, the selection and the
action dispatcher the window's buttons and shortcuts call into.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from terminal_notes.database.notes_store import NotesStore
from terminal_notes.utils.enums import Action, PERSISTING_ACTIONS
from terminal_notes.utils.logger import Logger
from terminal_notes.utils.selection import SelectionState


@dataclass(frozen=True)
class ActionResult:
    """Outcome of one dispatched action.

    `input_text` is what the caller should put in the matching input field:
    ``""`` clears it, ``None`` leaves it untouched.
    """
    changed: bool = False
    saved: bool = False
    input_text: Optional[str] = None


NOTHING = ActionResult()


class NotesService:
    """Routes actions to the store according to the current selection.

    Every action that changes a collection and appears in PERSISTING_ACTIONS
    is followed by a full save of both files. Listeners registered with
    `on_refresh` are called after each change so the display can be rebuilt
    from the live collections.
    """

    def __init__(self, store: Optional[NotesStore] = None,
                 selection: Optional[SelectionState] = None):
        self.logger = Logger()
        self.store = store or NotesStore()
        self.selection = selection or SelectionState()
        self._refresh_listeners: List[Callable[[], None]] = []
        self._handlers: Dict[Action, Callable[[str], ActionResult]] = {
            Action.ADD_NOTE: self._add_note,
            Action.EDIT_NOTE: self._edit_note,
            Action.DELETE_NOTE: self._delete_note,
            Action.CLEAR_NOTES: self._clear_notes,
            Action.ADD_TODO: self._add_todo,
            Action.TOGGLE_TODO: self._toggle_todo,
            Action.DELETE_TODO: self._delete_todo,
            Action.CLEAR_TODOS: self._clear_todos,
            Action.SAVE: self._save,
        }

    def load(self) -> None:
        self.store.load()
        self.selection.clear()
        self._notify_refresh()

    def on_refresh(self, listener: Callable[[], None]) -> None:
        self._refresh_listeners.append(listener)

    # Selection passthrough for list widgets

    def select_note(self, index: int) -> None:
        self.selection.select_note(index)

    def select_todo(self, index: int) -> None:
        self.selection.select_todo(index)

    def dispatch(self, action: Action, text: str = "") -> ActionResult:
        """Run one user action. Guarded actions with no valid target are no-ops."""
        result = self._handlers[action](text)
        if not result.changed:
            return result
        self._notify_refresh()
        if action in PERSISTING_ACTIONS:
            saved = self.store.save()
            self.logger.info(f"{action.name}: saved={saved}")
            result = ActionResult(changed=True, saved=saved, input_text=result.input_text)
        return result

    # Display

    def note_lines(self) -> List[str]:
        return [note.display_text() for note in self.store.notes]

    def todo_lines(self) -> List[str]:
        return [todo.display_text() for todo in self.store.todos]

    # Handlers

    def _add_note(self, text: str) -> ActionResult:
        if self.store.add_note(text) is None:
            return NOTHING
        return ActionResult(changed=True, input_text="")

    def _edit_note(self, text: str) -> ActionResult:
        index = self.selection.selected_note(len(self.store.notes))
        if index is None:
            return NOTHING
        note = self.store.remove_note(index)
        self.selection.clear()
        # Not persisted: the note survives on disk until the next saving action
        self.logger.info(f"EDIT_NOTE: moved note {index} back to the input")
        return ActionResult(changed=True, input_text=note.content)

    def _delete_note(self, text: str) -> ActionResult:
        index = self.selection.selected_note(len(self.store.notes))
        if index is None:
            return NOTHING
        self.store.remove_note(index)
        self.selection.clear()
        return ActionResult(changed=True)

    def _clear_notes(self, text: str) -> ActionResult:
        self.store.clear_notes()
        self.selection.clear_notes()
        return ActionResult(changed=True)

    def _add_todo(self, text: str) -> ActionResult:
        if self.store.add_todo(text) is None:
            return NOTHING
        return ActionResult(changed=True, input_text="")

    def _toggle_todo(self, text: str) -> ActionResult:
        index = self.selection.selected_todo(len(self.store.todos))
        if index is None:
            return NOTHING
        self.store.toggle_todo(index)
        return ActionResult(changed=True)

    def _delete_todo(self, text: str) -> ActionResult:
        index = self.selection.selected_todo(len(self.store.todos))
        if index is None:
            return NOTHING
        self.store.remove_todo(index)
        self.selection.clear()
        return ActionResult(changed=True)

    def _clear_todos(self, text: str) -> ActionResult:
        self.store.clear_todos()
        self.selection.clear_todos()
        return ActionResult(changed=True)

    def _save(self, text: str) -> ActionResult:
        saved = self.store.save()
        self.logger.info(f"SAVE: saved={saved}")
        return ActionResult(changed=False, saved=saved)

    def _notify_refresh(self) -> None:
        for listener in self._refresh_listeners:
            listener()
