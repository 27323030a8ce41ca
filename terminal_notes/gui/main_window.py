#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Terminal Notes GUI - Main Window
Notes and todos panels on the left, input fields on the right.
"""

from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QLabel,
    QLineEdit, QTextEdit, QMessageBox
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QKeySequence, QShortcut

from .components.list_panel import ListPanel
from terminal_notes.services.notes_service import ActionResult, NotesService
from terminal_notes.utils.colors import TerminalColors
from terminal_notes.utils.config_loader import ConfigLoader
from terminal_notes.utils.enums import Action, SelectionKind
from terminal_notes.utils.logger import Logger
from terminal_notes.utils.window_state import WindowStateManager


NOTE_BUTTONS = (
    ("Add Note", Action.ADD_NOTE),
    ("Edit Note", Action.EDIT_NOTE),
    ("Delete Note", Action.DELETE_NOTE),
    ("Clear Notes", Action.CLEAR_NOTES),
)

TODO_BUTTONS = (
    ("Add Todo", Action.ADD_TODO),
    ("Toggle Done", Action.TOGGLE_TODO),
    ("Delete Todo", Action.DELETE_TODO),
    ("Clear Todos", Action.CLEAR_TODOS),
)

NOTE_INPUT_ACTIONS = frozenset({Action.ADD_NOTE, Action.EDIT_NOTE})
TODO_INPUT_ACTIONS = frozenset({Action.ADD_TODO})


class MainWindow(QMainWindow):
    """Main window of Terminal Notes.

    All state lives on the NotesService handed in by the caller; the window
    only forwards button presses and list clicks to it and redraws both
    lists whenever the service reports a change.
    """

    def __init__(self, service: NotesService,
                 config_loader: Optional[ConfigLoader] = None,
                 state_manager: Optional[WindowStateManager] = None):
        super().__init__()
        self.logger = Logger()
        self.service = service
        self.config_loader = config_loader or ConfigLoader()
        self.state_manager = state_manager or WindowStateManager()

        self._setup_window()
        self._setup_ui()
        self._setup_shortcuts()
        self._connect_signals()
        self._refresh_lists()

    def _setup_window(self):
        name = self.config_loader.get("app.name", "Terminal Notes")
        version = self.config_loader.get("app.version", "1.0")
        self.setWindowTitle(f"{name} v{version}")
        self.resize(
            self.config_loader.get("ui.window_width", 800),
            self.config_loader.get("ui.window_height", 600),
        )
        font_size = self.config_loader.get("ui.font_size", TerminalColors.DEFAULT_FONT_SIZE)
        self.setStyleSheet(TerminalColors.get_stylesheet(font_size))

    def _setup_ui(self):
        self.notes_panel = ListPanel("Notes (Ctrl+N)", NOTE_BUTTONS)
        self.todos_panel = ListPanel("Todos (Ctrl+T)", TODO_BUTTONS)

        self.lists_splitter = QSplitter(Qt.Orientation.Vertical)
        self.lists_splitter.addWidget(self.notes_panel)
        self.lists_splitter.addWidget(self.todos_panel)

        input_panel = QWidget()
        input_layout = QVBoxLayout(input_panel)
        input_layout.addWidget(QLabel("Input (Ctrl+S to save)"))
        self.note_input = QTextEdit()
        self.note_input.setAcceptRichText(False)
        self.note_input.setPlaceholderText("Note...")
        input_layout.addWidget(self.note_input, 1)
        self.todo_input = QLineEdit()
        self.todo_input.setPlaceholderText("Todo...")
        self.todo_input.returnPressed.connect(
            lambda: self.trigger_action(Action.ADD_TODO))
        input_layout.addWidget(self.todo_input)
        input_layout.addStretch()

        self.main_splitter = QSplitter(Qt.Orientation.Horizontal)
        self.main_splitter.addWidget(self.lists_splitter)
        self.main_splitter.addWidget(input_panel)
        self.setCentralWidget(self.main_splitter)

        self.state_manager.restore_window_state(self)
        self.state_manager.restore_splitter_to_widget(
            "main", self.main_splitter, self.width())
        self.state_manager.restore_splitter_to_widget(
            "lists", self.lists_splitter, self.height())

    def _setup_shortcuts(self):
        self.focus_note_shortcut = QShortcut(QKeySequence("Ctrl+N"), self)
        self.focus_note_shortcut.activated.connect(self.note_input.setFocus)
        self.focus_todo_shortcut = QShortcut(QKeySequence("Ctrl+T"), self)
        self.focus_todo_shortcut.activated.connect(self.todo_input.setFocus)
        self.save_shortcut = QShortcut(QKeySequence("Ctrl+S"), self)
        self.save_shortcut.activated.connect(self.save_with_confirmation)

    def _connect_signals(self):
        self.notes_panel.action_triggered.connect(self.trigger_action)
        self.todos_panel.action_triggered.connect(self.trigger_action)
        self.notes_panel.row_selected.connect(self.service.select_note)
        self.todos_panel.row_selected.connect(self.service.select_todo)
        self.service.on_refresh(self._refresh_lists)
        self.service.selection.on_change(self._on_selection_changed)

    def trigger_action(self, action: Action) -> ActionResult:
        """Run `action` with the text of the matching input field."""
        if action in NOTE_INPUT_ACTIONS:
            text = self.note_input.toPlainText()
        elif action in TODO_INPUT_ACTIONS:
            text = self.todo_input.text()
        else:
            text = ""

        result = self.service.dispatch(action, text)

        if result.input_text is not None:
            if action in NOTE_INPUT_ACTIONS:
                self.note_input.setPlainText(result.input_text)
            elif action in TODO_INPUT_ACTIONS:
                self.todo_input.setText(result.input_text)
        if result.changed and not result.saved and action is not Action.EDIT_NOTE:
            self.statusBar().showMessage("Could not write data files; see log", 5000)
        return result

    def save_with_confirmation(self):
        result = self.service.dispatch(Action.SAVE)
        if result.saved:
            self._show_message("Saved", "Data successfully saved!")
        else:
            self._show_message("Save failed", "Could not write data files; see log")

    def _show_message(self, title: str, text: str):
        QMessageBox.information(self, title, text)

    def _refresh_lists(self):
        self.notes_panel.set_lines(self.service.note_lines())
        self.todos_panel.set_lines(self.service.todo_lines())
        self._sync_highlight()

    def _on_selection_changed(self, kind: SelectionKind, index: int):
        self._sync_highlight()

    def _sync_highlight(self):
        selection = self.service.selection
        self.notes_panel.set_highlighted_row(selection.note_index)
        self.todos_panel.set_highlighted_row(selection.todo_index)

    def closeEvent(self, event: QCloseEvent):
        self.state_manager.save_window_state(self)
        self.state_manager.save_splitter_from_widget("main", self.main_splitter)
        self.state_manager.save_splitter_from_widget("lists", self.lists_splitter)
        self.logger.info("Main window closed")
        super().closeEvent(event)
