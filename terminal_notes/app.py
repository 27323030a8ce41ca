"""
Terminal Notes - application bootstrap
Wires config, store, service and main window together and runs the Qt loop.
"""

import sys
from typing import List, Optional

from PySide6.QtWidgets import QApplication

from terminal_notes.database.notes_store import NotesStore
from terminal_notes.gui.main_window import MainWindow
from terminal_notes.services.notes_service import NotesService
from terminal_notes.utils.config_loader import ConfigLoader
from terminal_notes.utils.logger import Logger


class TerminalNotesApp:
    """Main application class"""

    def __init__(self, config: Optional[ConfigLoader] = None):
        self.app: Optional[QApplication] = None
        self.main_window: Optional[MainWindow] = None
        self.config = config or ConfigLoader()
        self.logger = Logger()
        self.service = NotesService(NotesStore(
            self.config.get("storage.notes_file", "notes.json"),
            self.config.get("storage.todos_file", "todos.json"),
        ))

    def initialize_app(self, argv: Optional[List[str]] = None):
        """Initialize the Qt application"""
        self.app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
        self.app.setApplicationName(self.config.get("app.name", "Terminal Notes"))
        self.app.setApplicationVersion(self.config.get("app.version", "1.0"))

    def load_data(self):
        """Load both data files; missing or broken files start empty"""
        self.service.load()

    def create_main_window(self) -> MainWindow:
        """Create and show the main window"""
        self.main_window = MainWindow(self.service, config_loader=self.config)
        self.main_window.show()
        return self.main_window

    def run(self) -> int:
        """Run the application"""
        self.logger.info("Starting Terminal Notes...")
        self.load_data()
        self.initialize_app()
        self.create_main_window()
        self.logger.info("Application started successfully")
        return self.app.exec()


def main():
    """Main entry point"""
    app = TerminalNotesApp()

    try:
        exit_code = app.run()
    except KeyboardInterrupt:
        print("\nApplication interrupted by user")
        exit_code = 0

    app.logger.info("Application shutdown complete")
    sys.exit(exit_code)
