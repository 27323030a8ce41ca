"""
Utils Package - Core utilities for Terminal Notes
Contains configuration, logging, selection and enumeration utilities
"""

from .config_loader import ConfigLoader
from .logger import Logger
from .enums import Action, SelectionKind
from .selection import SelectionState

__all__ = ['ConfigLoader', 'Logger', 'Action', 'SelectionKind', 'SelectionState']
