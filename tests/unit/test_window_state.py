"""
Unit tests for WindowStateManager.
"""

import json

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QSplitter, QWidget

from terminal_notes.utils.window_state import DEFAULT_STATE, WindowStateManager


class TestWindowStateManager:
    """Test suite for window state persistence."""

    def test_missing_file_uses_defaults(self, tmp_path):
        manager = WindowStateManager(str(tmp_path / "window_state.json"))
        assert manager.state_data == DEFAULT_STATE

    def test_corrupt_file_uses_defaults(self, tmp_path):
        path = tmp_path / "window_state.json"
        path.write_text("[1, 2", encoding="utf-8")
        manager = WindowStateManager(str(path))
        assert manager.state_data == DEFAULT_STATE

    def test_partial_file_is_completed(self, tmp_path):
        path = tmp_path / "window_state.json"
        path.write_text(json.dumps({"window": {"maximized": True}}), encoding="utf-8")
        manager = WindowStateManager(str(path))
        assert manager.state_data["window"]["maximized"] is True
        assert manager.state_data["window"]["geometry"] == [100, 100, 800, 600]
        assert manager.get_splitter_state("lists") == [50, 50]

    def test_splitter_sizes_saved_as_percentages(self, tmp_path):
        path = tmp_path / "config" / "window_state.json"
        manager = WindowStateManager(str(path))
        manager.save_splitter_state("main", [300, 100])
        assert json.loads(path.read_text(encoding="utf-8"))["splitters"]["main"] == [75, 25]

    def test_save_and_restore_window(self, app, tmp_path):
        path = str(tmp_path / "window_state.json")
        window = QWidget()
        window.setGeometry(50, 60, 640, 480)
        WindowStateManager(path).save_window_state(window)

        restored = QWidget()
        WindowStateManager(path).restore_window_state(restored)
        assert restored.width() == 640
        assert restored.height() == 480

    def test_restore_splitter(self, app, tmp_path):
        manager = WindowStateManager(str(tmp_path / "window_state.json"))
        manager.save_splitter_state("main", [1, 3])
        splitter = QSplitter(Qt.Orientation.Horizontal)
        splitter.addWidget(QWidget())
        splitter.addWidget(QWidget())
        splitter.resize(400, 300)
        splitter.show()
        app.processEvents()
        manager.restore_splitter_to_widget("main", splitter, 400)
        first, second = splitter.sizes()
        assert first < second
        splitter.close()
