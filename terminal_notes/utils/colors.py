#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Terminal Color Configuration
Green-on-charcoal scheme for the Terminal Notes window.
"""


class TerminalColors:
    """Color constants for the terminal theme."""

    # Background Colors
    MAIN_BACKGROUND = "#1e1e1e"
    BUTTON_BACKGROUND = "#2e2e2e"
    BUTTON_HOVER = "#3a3a3a"
    SELECTION_BACKGROUND = "#004d00"

    # Text Colors
    PRIMARY_TEXT = "#00ff00"
    DISABLED_TEXT = "#4d7f4d"

    BORDER_COLOR = "#00aa00"

    DEFAULT_FONT_SIZE = 12

    @classmethod
    def get_stylesheet(cls, font_size: int = DEFAULT_FONT_SIZE) -> str:
        """Application-wide Qt stylesheet."""
        return f"""
            QWidget {{
                background-color: {cls.MAIN_BACKGROUND};
                color: {cls.PRIMARY_TEXT};
                font-family: monospace;
                font-size: {font_size}px;
            }}
            QListWidget, QLineEdit, QTextEdit {{
                border: 1px solid {cls.BORDER_COLOR};
            }}
            QListWidget::item:selected {{
                background-color: {cls.SELECTION_BACKGROUND};
                color: {cls.PRIMARY_TEXT};
            }}
            QPushButton {{
                background-color: {cls.BUTTON_BACKGROUND};
                border: 1px solid {cls.BORDER_COLOR};
                padding: 4px 8px;
            }}
            QPushButton:hover {{
                background-color: {cls.BUTTON_HOVER};
            }}
            QPushButton:disabled {{
                color: {cls.DISABLED_TEXT};
            }}
            QSplitter::handle {{
                background-color: {cls.BUTTON_BACKGROUND};
            }}
        """
