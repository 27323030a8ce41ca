"""
Window state persistence manager for saving and restoring window geometry
and splitter positions across application sessions.
"""

import copy
import json
import os
from typing import Dict, Any, Optional, List
from PySide6.QtCore import QRect, Qt
from PySide6.QtWidgets import QWidget, QSplitter

from .logger import Logger


DEFAULT_STATE: Dict[str, Any] = {
    "window": {
        "geometry": [100, 100, 800, 600],  # x, y, width, height
        "maximized": False
    },
    "splitters": {
        "main": [60, 40],  # percentages
        "lists": [50, 50]
    }
}


class WindowStateManager:
    """Manages window state persistence for application sessions."""

    def __init__(self, state_file: Optional[str] = None):
        """Initialize the WindowStateManager."""
        self.logger = Logger()
        self.state_file = state_file or os.path.join("config", "window_state.json")
        self.config_dir = os.path.dirname(self.state_file)
        self.state_data = self._load_state()

    def _ensure_config_dir(self) -> bool:
        """Ensure the config directory exists."""
        if not self.config_dir or os.path.exists(self.config_dir):
            return True
        try:
            os.makedirs(self.config_dir)
            return True
        except OSError as e:
            self.logger.error(f"Failed to create config directory: {e}")
            return False

    def _load_state(self) -> Dict[str, Any]:
        """Load state from JSON file or return default state."""
        default_state = copy.deepcopy(DEFAULT_STATE)

        if not os.path.exists(self.state_file):
            return default_state

        try:
            with open(self.state_file, 'r', encoding='utf-8') as f:
                loaded_state = json.load(f)
            if not isinstance(loaded_state, dict):
                raise ValueError("window state is not an object")
            # Merge with default to ensure all keys exist
            for key in default_state:
                if not isinstance(loaded_state.get(key), dict):
                    loaded_state[key] = default_state[key]
                    continue
                for subkey in default_state[key]:
                    if subkey not in loaded_state[key]:
                        loaded_state[key][subkey] = default_state[key][subkey]
            return loaded_state
        except (OSError, ValueError) as e:
            self.logger.error(f"Failed to load window state: {e}")
            return default_state

    def _save_state(self):
        """Save current state to JSON file."""
        if not self._ensure_config_dir():
            return
        try:
            with open(self.state_file, 'w', encoding='utf-8') as f:
                json.dump(self.state_data, f, indent=2)
        except OSError as e:
            self.logger.error(f"Failed to save window state: {e}")

    def save_window_state(self, window: QWidget):
        """
        Save window geometry and state.

        Args:
            window: The main window widget
        """
        # Only save geometry if window is not maximized
        if not window.isMaximized():
            geometry = window.geometry()
            self.state_data["window"]["geometry"] = [
                geometry.x(),
                geometry.y(),
                geometry.width(),
                geometry.height()
            ]

        self.state_data["window"]["maximized"] = window.isMaximized()
        self._save_state()
        self.logger.info("Window state saved")

    def restore_window_state(self, window: QWidget):
        """
        Restore window geometry and state.

        Args:
            window: The main window widget
        """
        geometry = self.state_data["window"]["geometry"]
        if (isinstance(geometry, list) and len(geometry) == 4
                and all(isinstance(v, int) for v in geometry)):
            window.setGeometry(QRect(*geometry))
        else:
            self.logger.warning(f"Ignoring invalid window geometry: {geometry!r}")

        if self.state_data["window"]["maximized"]:
            window.showMaximized()

    def save_splitter_state(self, splitter_name: str, sizes: List[int]):
        """
        Save splitter sizes as percentages.

        Args:
            splitter_name: Identifier for the splitter
            sizes: List of sizes from the splitter
        """
        total = sum(sizes)
        if total > 0:
            percentages = [int(size * 100 / total) for size in sizes]
            self.state_data["splitters"][splitter_name] = percentages
            self._save_state()

    def get_splitter_state(self, splitter_name: str) -> Optional[List[int]]:
        """
        Get saved splitter state.

        Returns:
            List of percentages, or None if not found
        """
        return self.state_data["splitters"].get(splitter_name)

    def save_splitter_from_widget(self, splitter_name: str,
                                  splitter: QSplitter):
        """Save splitter state directly from a QSplitter widget."""
        self.save_splitter_state(splitter_name, splitter.sizes())

    def restore_splitter_to_widget(self, splitter_name: str,
                                   splitter: QSplitter,
                                   total_size: Optional[int] = None):
        """
        Restore splitter state directly to a QSplitter widget.

        Args:
            splitter_name: Identifier for the splitter
            splitter: The QSplitter widget
            total_size: Length to distribute; defaults to the splitter's
                current extent along its orientation
        """
        saved_state = self.get_splitter_state(splitter_name)
        if not saved_state or not all(isinstance(p, int) for p in saved_state):
            return
        if total_size is None:
            if splitter.orientation() == Qt.Orientation.Horizontal:
                total_size = splitter.width()
            else:
                total_size = splitter.height()
        sizes = [int(total_size * pct / 100) for pct in saved_state]
        splitter.setSizes(sizes)
