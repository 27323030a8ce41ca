"""
GUI Package - lightweight initializer

Exports `MainWindow`; components are imported directly, e.g.:
    from terminal_notes.gui.components.list_panel import ListPanel
"""

from .main_window import MainWindow

__all__ = [
    'MainWindow',
]
