"""Book Inventory - Core Application Package

This package contains the application modules including:
- Storage gateway for the inventory table (database.py)
- Interactive menu shell (shell.py)
- Command and field parsing (commands.py)
- CLI entry point (main.py)
- Data model (book.py)
"""

__version__ = "1.0.0"
