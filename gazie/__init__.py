"""
GAzie TUI - customer and product registry for the terminal.

Browse and create customer and product records stored in a local SQLite file.
"""

__version__ = "0.1.0"
