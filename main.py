"""
Terminal Notes - Main Application Entry Point
Notes and todo lists backed by notes.json and todos.json in the working directory
"""

from terminal_notes.app import main


if __name__ == "__main__":
    main()
