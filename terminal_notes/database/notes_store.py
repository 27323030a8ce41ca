"""
Notes Store
Owns the in-memory notes and todos and mirrors them to their JSON files.
"""

from pathlib import Path
from typing import List, Optional, Union

from .json_store import load_items, save_items
from ..models.note import Note
from ..models.todo import Todo
from ..utils.logger import Logger

DEFAULT_NOTES_FILE = "notes.json"
DEFAULT_TODOS_FILE = "todos.json"

PathLike = Union[str, Path]


class NotesStore:
    """Two ordered collections backed by two independent JSON files.

    Mutators only touch memory; call `save()` to write both files. Index
    arguments must be valid, an out of range index raises IndexError.
    """

    def __init__(self, notes_path: PathLike = DEFAULT_NOTES_FILE,
                 todos_path: PathLike = DEFAULT_TODOS_FILE):
        self.logger = Logger()
        self.notes_path = Path(notes_path)
        self.todos_path = Path(todos_path)
        self.notes: List[Note] = []
        self.todos: List[Todo] = []

    def load(self) -> None:
        """Replace both collections with the contents of their files."""
        self.notes = load_items(self.notes_path, Note.from_dict)
        self.todos = load_items(self.todos_path, Todo.from_dict)
        self.logger.info(
            f"Loaded {len(self.notes)} notes from {self.notes_path} and "
            f"{len(self.todos)} todos from {self.todos_path}"
        )

    def save(self) -> bool:
        """Write both files. Returns False if either write failed."""
        notes_ok = save_items(self.notes_path, self.notes)
        todos_ok = save_items(self.todos_path, self.todos)
        return notes_ok and todos_ok

    # Notes

    def add_note(self, text: str) -> Optional[Note]:
        if not text or not text.strip():
            return None
        note = Note(content=text)
        self.notes.append(note)
        return note

    def remove_note(self, index: int) -> Note:
        self._check_index(self.notes, index, "note")
        return self.notes.pop(index)

    def clear_notes(self) -> None:
        self.notes = []

    # Todos

    def add_todo(self, text: str) -> Optional[Todo]:
        if not text or not text.strip():
            return None
        todo = Todo(task=text)
        self.todos.append(todo)
        return todo

    def remove_todo(self, index: int) -> Todo:
        self._check_index(self.todos, index, "todo")
        return self.todos.pop(index)

    def toggle_todo(self, index: int) -> bool:
        self._check_index(self.todos, index, "todo")
        return self.todos[index].toggle()

    def clear_todos(self) -> None:
        self.todos = []

    @staticmethod
    def _check_index(collection: list, index: int, label: str) -> None:
        # -1 means "no selection", never "last item"
        if not 0 <= index < len(collection):
            raise IndexError(f"{label} index {index} out of range (0..{len(collection) - 1})")
