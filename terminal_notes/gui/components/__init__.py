"""
GUI Components Package
"""

from .list_panel import ListPanel

__all__ = ['ListPanel']
