"""Shared constants for TUI modules.

Centralizes labels, demo data and key names used across multiple TUI files.
"""

from __future__ import annotations

from faultnote.lib.records import Page

APP_TITLE = "📋 FaultNote"
APP_SUBTITLE = "- Error Logger"

# Pages shown when no Notion token is configured
DEMO_PAGES: tuple[Page, ...] = (
    Page(id="demo-1", title="Demo: Project Errors"),
    Page(id="demo-2", title="Demo: Bug Tracker"),
)

# Glyphs
HIGHLIGHT_SYMBOL = "▶ "
SELECTED_SYMBOL = "✓"
CURSOR_GLYPH = "▌"
SUCCESS_PREFIX = "✓ "
ERROR_PREFIX = "✗ "

# =============================================================================
# Key names
# =============================================================================
# Normalized names handed to faultnote.tui.events.handle_key. Printable
# characters are passed through as themselves.

KEY_TAB = "tab"
KEY_BACKTAB = "s-tab"
KEY_UP = "up"
KEY_DOWN = "down"
KEY_ENTER = "enter"
KEY_ESCAPE = "escape"
KEY_BACKSPACE = "backspace"
KEY_FORCE_QUIT = "force-quit"

# (key, description) hints for the command bar
NORMAL_MODE_HINTS: tuple[tuple[str, str], ...] = (
    ("q", "Quit"),
    ("Tab", "Switch Focus"),
    ("↑↓", "Navigate"),
    ("e/i", "Edit"),
    ("Enter", "Select/Submit"),
    ("c", "Clear"),
    ("r", "Refresh"),
)

EDITING_MODE_HINTS: tuple[tuple[str, str], ...] = (
    ("Esc", "Exit Edit"),
    ("Tab", "Next Field"),
    ("Enter", "New Line"),
    ("↑↓", "Switch Field"),
    ("Ctrl+C", "Quit"),
)
