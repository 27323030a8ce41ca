"""
Enums and constants for Terminal Notes
Centralized location for application constants
"""

from enum import Enum, auto


class Action(Enum):
    """User actions dispatched from the window to the notes service"""
    ADD_NOTE = auto()
    EDIT_NOTE = auto()
    DELETE_NOTE = auto()
    CLEAR_NOTES = auto()
    ADD_TODO = auto()
    TOGGLE_TODO = auto()
    DELETE_TODO = auto()
    CLEAR_TODOS = auto()
    SAVE = auto()


class SelectionKind(Enum):
    """Which list, if any, currently holds the selection"""
    NONE = auto()
    NOTE = auto()
    TODO = auto()


# Actions that write both data files once they have changed something
PERSISTING_ACTIONS = frozenset({
    Action.ADD_NOTE,
    Action.DELETE_NOTE,
    Action.CLEAR_NOTES,
    Action.ADD_TODO,
    Action.TOGGLE_TODO,
    Action.DELETE_TODO,
    Action.CLEAR_TODOS,
    Action.SAVE,
})

DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M"
