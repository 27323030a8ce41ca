"""
Database Package - JSON file persistence for notes and todos
"""

from .json_store import load_items, save_items
from .notes_store import NotesStore

__all__ = ['NotesStore', 'load_items', 'save_items']
