"""
Models Package - data classes persisted to the JSON data files
"""

from .note import Note
from .todo import Todo

__all__ = ['Note', 'Todo']
