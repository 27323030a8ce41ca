"""
Shared fixtures for the Terminal Notes test suite.
"""

import os
from datetime import datetime, timedelta, timezone

import pytest

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from terminal_notes.database.notes_store import NotesStore
from terminal_notes.models.note import Note
from terminal_notes.models.todo import Todo
from terminal_notes.services.notes_service import NotesService


@pytest.fixture(scope="session")
def app():
    """Create QApplication for testing."""
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def data_paths(tmp_path):
    """Paths for the notes and todos files inside a temporary directory."""
    return tmp_path / "notes.json", tmp_path / "todos.json"


@pytest.fixture
def store(data_paths):
    """An empty NotesStore writing into a temporary directory."""
    notes_path, todos_path = data_paths
    return NotesStore(notes_path, todos_path)


@pytest.fixture
def service(store):
    """A NotesService over the temporary store."""
    return NotesService(store)


@pytest.fixture
def fixed_time():
    """A timestamp with microseconds and a non-UTC offset."""
    return datetime(2024, 5, 1, 9, 30, 12, 345678,
                    tzinfo=timezone(timedelta(hours=2)))


@pytest.fixture
def sample_note(fixed_time):
    return Note(content="buy milk", created_at=fixed_time)


@pytest.fixture
def sample_todo(fixed_time):
    return Todo(task="write report", done=False, created_at=fixed_time)
