"""
Integration tests for MainWindow.
Drives the window through its buttons and list widgets with a real
NotesService writing into a temporary directory.
"""

import json

import pytest

from terminal_notes.gui.main_window import MainWindow
from terminal_notes.utils.config_loader import ConfigLoader
from terminal_notes.utils.enums import Action, SelectionKind
from terminal_notes.utils.window_state import WindowStateManager


@pytest.fixture
def window(app, service, tmp_path):
    """Create a MainWindow with config and window state kept in tmp_path."""
    config = ConfigLoader(tmp_path / "config" / "app_config.json")
    state = WindowStateManager(str(tmp_path / "config" / "window_state.json"))
    window = MainWindow(service, config_loader=config, state_manager=state)
    yield window
    window.close()


def click(panel, action):
    panel.buttons[action].click()


class TestLayout:
    """Static structure of the window."""

    def test_title(self, window):
        assert window.windowTitle() == "Terminal Notes v1.0"

    def test_eight_buttons(self, window):
        labels = [b.text() for b in window.notes_panel.buttons.values()]
        labels += [b.text() for b in window.todos_panel.buttons.values()]
        assert labels == [
            "Add Note", "Edit Note", "Delete Note", "Clear Notes",
            "Add Todo", "Toggle Done", "Delete Todo", "Clear Todos",
        ]

    def test_panel_headers(self, window):
        assert window.notes_panel.header_label.text() == "Notes (Ctrl+N)"
        assert window.todos_panel.header_label.text() == "Todos (Ctrl+T)"

    def test_shows_loaded_data(self, app, service, tmp_path):
        service.store.add_note("from disk")
        service.store.save()
        service.load()
        config = ConfigLoader(tmp_path / "c.json")
        state = WindowStateManager(str(tmp_path / "w.json"))
        window = MainWindow(service, config_loader=config, state_manager=state)
        try:
            assert len(window.notes_panel.lines()) == 1
            assert window.notes_panel.lines()[0].endswith("] from disk")
        finally:
            window.close()


class TestNoteActions:
    """Note buttons."""

    def test_add_note(self, window, data_paths):
        window.note_input.setPlainText("buy milk")
        click(window.notes_panel, Action.ADD_NOTE)

        assert window.note_input.toPlainText() == ""
        assert window.notes_panel.lines()[0].endswith("] buy milk")
        saved = json.loads(data_paths[0].read_text(encoding="utf-8"))
        assert saved[0]["content"] == "buy milk"

    def test_add_blank_note_keeps_input(self, window):
        window.note_input.setPlainText("   ")
        click(window.notes_panel, Action.ADD_NOTE)
        assert window.notes_panel.lines() == []
        assert window.note_input.toPlainText() == "   "

    def test_edit_note_moves_text_to_input(self, window):
        window.note_input.setPlainText("typo'd note")
        click(window.notes_panel, Action.ADD_NOTE)
        window.notes_panel.list_widget.setCurrentRow(0)

        click(window.notes_panel, Action.EDIT_NOTE)

        assert window.note_input.toPlainText() == "typo'd note"
        assert window.notes_panel.lines() == []
        assert window.service.selection.kind is SelectionKind.NONE

    def test_delete_note(self, window):
        for text in ("keep", "drop"):
            window.note_input.setPlainText(text)
            click(window.notes_panel, Action.ADD_NOTE)
        window.notes_panel.list_widget.setCurrentRow(1)

        click(window.notes_panel, Action.DELETE_NOTE)

        assert len(window.notes_panel.lines()) == 1
        assert window.notes_panel.lines()[0].endswith("] keep")
        assert window.notes_panel.highlighted_row() == -1

    def test_clear_notes(self, window):
        window.note_input.setPlainText("x")
        click(window.notes_panel, Action.ADD_NOTE)
        click(window.notes_panel, Action.CLEAR_NOTES)
        assert window.notes_panel.lines() == []


class TestTodoActions:
    """Todo buttons."""

    def add_todo(self, window, text):
        window.todo_input.setText(text)
        click(window.todos_panel, Action.ADD_TODO)

    def test_add_todo_clears_input(self, window):
        self.add_todo(window, "write tests")
        assert window.todo_input.text() == ""
        assert window.todos_panel.lines()[0].startswith("[ ] [")

    def test_return_key_adds_todo(self, window):
        window.todo_input.setText("via enter")
        window.todo_input.returnPressed.emit()
        assert window.todos_panel.lines()[0].endswith("] via enter")

    def test_toggle_keeps_highlight(self, window):
        self.add_todo(window, "a")
        self.add_todo(window, "b")
        window.todos_panel.list_widget.setCurrentRow(1)

        click(window.todos_panel, Action.TOGGLE_TODO)

        assert window.todos_panel.lines()[1].startswith("[x] [")
        assert window.todos_panel.highlighted_row() == 1

    def test_delete_todo(self, window):
        self.add_todo(window, "a")
        window.todos_panel.list_widget.setCurrentRow(0)
        click(window.todos_panel, Action.DELETE_TODO)
        assert window.todos_panel.lines() == []

    def test_clear_todos(self, window):
        self.add_todo(window, "a")
        click(window.todos_panel, Action.CLEAR_TODOS)
        assert window.todos_panel.lines() == []


class TestSelectionSync:
    """Only one list shows a selection at a time."""

    def test_selecting_todo_clears_note_highlight(self, window):
        window.note_input.setPlainText("n")
        click(window.notes_panel, Action.ADD_NOTE)
        window.todo_input.setText("t")
        click(window.todos_panel, Action.ADD_TODO)

        window.notes_panel.list_widget.setCurrentRow(0)
        assert window.service.selection.kind is SelectionKind.NOTE

        window.todos_panel.list_widget.setCurrentRow(0)
        assert window.service.selection.kind is SelectionKind.TODO
        assert window.notes_panel.highlighted_row() == -1

        window.notes_panel.list_widget.setCurrentRow(0)
        assert window.service.selection.kind is SelectionKind.NOTE
        assert window.todos_panel.highlighted_row() == -1


class TestSave:
    """Ctrl+S save handler."""

    def test_save_with_confirmation(self, window, data_paths, monkeypatch):
        messages = []
        monkeypatch.setattr(window, "_show_message",
                            lambda title, text: messages.append((title, text)))
        window.save_with_confirmation()
        assert messages == [("Saved", "Data successfully saved!")]
        assert all(path.exists() for path in data_paths)

    def test_save_failure_reported(self, window, monkeypatch):
        messages = []
        monkeypatch.setattr(window, "_show_message",
                            lambda title, text: messages.append((title, text)))
        monkeypatch.setattr(window.service.store, "save", lambda: False)
        window.save_with_confirmation()
        assert messages[0][0] == "Save failed"
