"""UI-agnostic state management for the TUI.

This module provides testable state classes that can be used without
prompt_toolkit. The state layer tracks the page list, the entry form,
focus and edit mode, and validates submissions.
"""

from faultnote.tui.models.app_state import AppState, Status, StatusKind
from faultnote.tui.models.entry_form import EntryForm
from faultnote.tui.models.focus import EntryField, Focus, InputMode, Phase

__all__ = [
    "AppState",
    "EntryField",
    "EntryForm",
    "Focus",
    "InputMode",
    "Phase",
    "Status",
    "StatusKind",
]
