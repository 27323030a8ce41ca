"""
Terminal Notes Test Suite
=========================

Organized test structure:
- unit/: store, models, selection, service and configuration
- integration/: the main window driven through its buttons

Run tests with:
    pytest tests/unit/
    pytest tests/integration/
    pytest tests/
"""
