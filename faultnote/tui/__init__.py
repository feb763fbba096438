"""prompt_toolkit TUI for logging faults to Notion.

This package provides a Terminal User Interface for picking a Notion page
and appending an error / problem / solution / code entry to it.

Usage:
    python -m faultnote.tui
"""

from __future__ import annotations

__all__ = [
    "FaultNoteApp",
    "main",
]


def __getattr__(name: str):
    """Lazy import of TUI components."""
    if name == "FaultNoteApp":
        from faultnote.tui.app import FaultNoteApp
        return FaultNoteApp
    if name == "main":
        from faultnote.tui.__main__ import main
        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
