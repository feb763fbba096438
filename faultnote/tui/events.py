"""Keyboard dispatch for the FaultNote TUI.

``handle_key`` turns one normalized key name into a state transition.
Transitions that need the network are returned as a ``Command`` for the
caller to run, which keeps this module free of I/O.
"""

from __future__ import annotations

from enum import Enum

from faultnote.tui.constants import (
    KEY_BACKSPACE,
    KEY_BACKTAB,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_FORCE_QUIT,
    KEY_TAB,
    KEY_UP,
)
from faultnote.tui.models import AppState


class Command(str, Enum):
    """Side-effecting actions requested by a key press."""

    SUBMIT = "submit"
    REFRESH = "refresh"


def handle_key(state: AppState, key: str) -> Command | None:
    """Apply a key press to the state.

    Args:
        state: Application state to mutate
        key: Normalized key name (see faultnote.tui.constants) or a
             single printable character

    Returns:
        A command for the caller to execute, or None
    """
    if key == KEY_FORCE_QUIT:
        state.quit()
        return None
    if state.is_editing():
        _handle_editing_mode(state, key)
        return None
    return _handle_normal_mode(state, key)


def _handle_normal_mode(state: AppState, key: str) -> Command | None:
    if key in ("q", "Q"):
        state.quit()

    elif key == KEY_TAB:
        state.cycle_focus()
    elif key == KEY_BACKTAB:
        state.cycle_focus(reverse=True)

    elif key in (KEY_UP, "k"):
        state.handle_up()
    elif key in (KEY_DOWN, "j"):
        state.handle_down()

    elif key in ("e", "i"):
        state.enter_edit_mode()

    elif key == KEY_ENTER:
        if state.is_page_list_focused():
            state.select_highlighted()
        else:
            return Command.SUBMIT

    elif key == "c":
        state.clear_inputs()
        state.set_status("Inputs cleared")

    elif key == "r":
        return Command.REFRESH

    elif key == KEY_ESCAPE:
        state.clear_status()

    return None


def _handle_editing_mode(state: AppState, key: str) -> None:
    if key == KEY_ESCAPE:
        state.exit_edit_mode()

    elif key == KEY_BACKSPACE:
        state.delete_char()

    elif key == KEY_ENTER:
        state.add_newline()

    elif key == KEY_TAB:
        state.next_field()

    elif key == KEY_BACKTAB:
        state.previous_field()

    elif key == KEY_UP:
        state.exit_edit_mode()
        state.previous_field()
    elif key == KEY_DOWN:
        state.exit_edit_mode()
        state.next_field()

    elif len(key) == 1 and key.isprintable():
        state.add_char(key)
