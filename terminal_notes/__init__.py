"""
Terminal Notes - notes and todo lists in a single window
"""

__version__ = "1.0"
