"""FaultNote: log errors, problems and their fixes to Notion from the terminal.

Usage:
    faultnote                 # Start the TUI
    python -m faultnote.tui   # Same, as a module
"""

from faultnote.lib.records import FaultEntry, Page

__version__ = "0.1.0"

__all__ = [
    "FaultEntry",
    "Page",
]
