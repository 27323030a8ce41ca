"""
Services Package - session-level logic shared by the window and tests
"""

from .notes_service import ActionResult, NotesService

__all__ = ['ActionResult', 'NotesService']
