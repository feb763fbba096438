"""Rendering for the FaultNote TUI.

Every function here is a pure function of AppState that returns
prompt_toolkit formatted text or a style string. The application wires
them into ``FormattedTextControl``s so each redraw reflects the current
state.
"""

from __future__ import annotations

from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

from faultnote.tui.constants import (
    APP_SUBTITLE,
    APP_TITLE,
    CURSOR_GLYPH,
    EDITING_MODE_HINTS,
    HIGHLIGHT_SYMBOL,
    NORMAL_MODE_HINTS,
    SELECTED_SYMBOL,
)
from faultnote.tui.models import AppState, EntryField, Focus, StatusKind


# Application style
STYLE = Style.from_dict({
    "title": "bold #00d7d7",
    "subtitle": "#d0d0d0",
    "mode.normal": "bg:#005f87 #ffffff",
    "mode.editing": "bg:#00af00 #000000",
    "mode.submitting": "bg:#d7af00 #000000",
    "status": "#ffff00",
    "status.loading": "#d7af00 italic",
    "status.success": "bold #00ff00",
    "status.error": "bold #ff0000",
    # Panels: border colour follows focus
    "frame.border": "#606060",
    "frame.label": "#a0a0a0",
    "panel.focused frame.border": "#d7d700",
    "panel.focused frame.label": "bold #d7d700",
    "panel.editing frame.border": "#00af00",
    "panel.editing frame.label": "bold #00af00",
    "title-bar frame.border": "#00d7d7",
    # Page list
    "page": "#ffffff",
    "page.highlighted": "bg:#2d559b #ffffff",
    "page.highlighted.focused": "bg:#2d559b #ffff00 bold",
    "page.selected": "#00ff00",
    "page.empty": "#808080 italic",
    # Fields
    "field-text": "#ffffff",
    "field-text.placeholder": "#606060 italic",
    "cursor": "#00ff00",
    # Command bar
    "command.key": "bold #00d7d7",
    "command.desc": "#ffffff",
})


def get_panel_style(state: AppState, target: Focus) -> str:
    """Style class for the frame around a focus target."""
    if state.focus is not target:
        return "class:panel"
    if state.is_editing():
        return "class:panel.editing"
    return "class:panel.focused"


def render_title_bar(state: AppState) -> FormattedText:
    """App name, mode badge and status message."""
    if state.submitting:
        mode = ("class:mode.submitting", " SUBMITTING ")
    elif state.is_editing():
        mode = ("class:mode.editing", " EDITING ")
    else:
        mode = ("class:mode.normal", " NORMAL ")

    parts: list[tuple[str, str]] = [
        ("class:title", f" {APP_TITLE} "),
        ("class:subtitle", f"{APP_SUBTITLE} "),
        mode,
        ("", " "),
    ]

    if state.status is not None:
        style = {
            StatusKind.INFO: "class:status",
            StatusKind.LOADING: "class:status.loading",
            StatusKind.SUCCESS: "class:status.success",
            StatusKind.ERROR: "class:status.error",
        }[state.status.kind]
        parts.append((style, f" {state.status} "))

    return FormattedText(parts)


def render_page_list_title(state: AppState) -> str:
    suffix = " (loading...)" if state.loading_pages else ""
    return f"📚 Notion Pages{suffix}"


def render_page_list(state: AppState) -> FormattedText:
    """One line per page: highlight marker, title, and a tick on the selected page."""
    if not state.pages:
        return FormattedText([("class:page.empty", " No pages loaded")])

    focused = state.is_page_list_focused()
    parts: list[tuple[str, str]] = []
    for idx, page in enumerate(state.pages):
        is_highlighted = idx == state.highlighted_index
        is_selected = page.id == state.selected_page_id

        prefix = HIGHLIGHT_SYMBOL if is_highlighted else " " * len(HIGHLIGHT_SYMBOL)
        if is_highlighted:
            style = "class:page.highlighted.focused" if focused else "class:page.highlighted"
        else:
            style = "class:page"

        parts.append((style, f"{prefix}{page.title} "))
        if is_selected:
            parts.append(("class:page.selected", SELECTED_SYMBOL))
        if idx < len(state.pages) - 1:
            parts.append(("", "\n"))

    return FormattedText(parts)


def render_field_title(state: AppState, entry_field: EntryField) -> str:
    marker = " ✎" if state.editing_field is entry_field else ""
    return f"{entry_field.label}{marker}"


def render_field(state: AppState, entry_field: EntryField) -> FormattedText:
    """Field content, with a cursor glyph while it is being edited."""
    text = state.form.get(entry_field)
    editing = state.editing_field is entry_field

    parts: list[tuple[str, str]] = []
    if text:
        parts.append(("class:field-text", text))
    elif not editing and state.is_field_focused(entry_field):
        parts.append(("class:field-text.placeholder", "Press e to edit"))

    if editing:
        parts.append(("class:cursor", CURSOR_GLYPH))

    return FormattedText(parts)


def render_command_bar(state: AppState) -> FormattedText:
    """Key hints for the current mode."""
    hints = EDITING_MODE_HINTS if state.is_editing() else NORMAL_MODE_HINTS

    parts: list[tuple[str, str]] = []
    for key, desc in hints:
        parts.append(("class:command.key", f" [{key}] "))
        parts.append(("class:command.desc", f"{desc}  "))
    return FormattedText(parts)
