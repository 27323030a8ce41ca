"""
List Panel Component - header, item list and a row of action buttons
"""

from typing import Callable, Dict, List, Sequence, Tuple
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QLabel, QListWidget, QPushButton
)
from PySide6.QtCore import Signal

from ...utils.enums import Action


class ListPanel(QWidget):
    """One of the two list panels (notes or todos).

    The list is always rebuilt wholesale from display strings; selection
    changes made by the user are reported through `row_selected`, while
    programmatic updates never emit it.
    """

    row_selected = Signal(int)
    action_triggered = Signal(object)  # Action

    def __init__(self, title: str, buttons: Sequence[Tuple[str, Action]],
                 columns: int = 4, parent=None):
        super().__init__(parent)
        self.buttons: Dict[Action, QPushButton] = {}
        self._setup_ui(title, buttons, columns)

    def _setup_ui(self, title: str, buttons: Sequence[Tuple[str, Action]],
                  columns: int):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self.header_label = QLabel(title)
        layout.addWidget(self.header_label)

        self.list_widget = QListWidget()
        self.list_widget.currentRowChanged.connect(self._on_current_row_changed)
        layout.addWidget(self.list_widget, 1)

        grid = QGridLayout()
        for position, (label, action) in enumerate(buttons):
            button = QPushButton(label)
            button.clicked.connect(self._make_trigger(action))
            grid.addWidget(button, position // columns, position % columns)
            self.buttons[action] = button
        layout.addLayout(grid)

    def _make_trigger(self, action: Action) -> Callable[[], None]:
        return lambda: self.action_triggered.emit(action)

    def _on_current_row_changed(self, row: int):
        self.row_selected.emit(row)

    def set_lines(self, lines: List[str]):
        """Replace every row. The highlighted row is cleared."""
        self.list_widget.blockSignals(True)
        try:
            self.list_widget.clear()
            self.list_widget.addItems(lines)
            self.list_widget.setCurrentRow(-1)
        finally:
            self.list_widget.blockSignals(False)

    def set_highlighted_row(self, row: int):
        """Highlight `row` (or nothing for -1) without emitting row_selected."""
        self.list_widget.blockSignals(True)
        try:
            if 0 <= row < self.list_widget.count():
                self.list_widget.setCurrentRow(row)
            else:
                self.list_widget.setCurrentRow(-1)
                self.list_widget.clearSelection()
        finally:
            self.list_widget.blockSignals(False)

    def lines(self) -> List[str]:
        return [self.list_widget.item(i).text()
                for i in range(self.list_widget.count())]

    def highlighted_row(self) -> int:
        return self.list_widget.currentRow()
