"""Main application state container for the TUI.

This class is a UI-agnostic representation of everything the screen
shows: the fetched pages, the highlighted and selected page, the entry
form, the focus target, the input mode and the status line. It can be
tested without prompt_toolkit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from faultnote.lib.errors import FaultNoteError
from faultnote.lib.records import FaultEntry, Page
from faultnote.tui.constants import ERROR_PREFIX, SUCCESS_PREFIX
from faultnote.tui.models.entry_form import EntryForm
from faultnote.tui.models.focus import EntryField, Focus, InputMode, Phase


class StatusKind(str, Enum):
    """Severity of the status line message."""

    INFO = "info"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Status:
    """A message shown in the title bar."""

    kind: StatusKind
    text: str

    def __str__(self) -> str:
        if self.kind == StatusKind.SUCCESS:
            return f"{SUCCESS_PREFIX}{self.text}"
        if self.kind == StatusKind.ERROR:
            return f"{ERROR_PREFIX}{self.text}"
        return self.text


@dataclass
class AppState:
    """UI-agnostic state for the FaultNote screen.

    Attributes:
        running: False once the user asked to quit
        focus: Region receiving keyboard input
        mode: Navigation or text editing
        pages: Pages fetched from Notion (replaced wholesale on refresh)
        highlighted_index: Cursor position in the page list
        selected_page_id: Page chosen as append target, if any
        form: The entry being written
        status: Message for the title bar
        submitting: A submission is in flight
        loading_pages: A page refresh is in flight
    """

    running: bool = True
    focus: Focus = Focus.PAGE_LIST
    mode: InputMode = InputMode.NORMAL

    pages: list[Page] = field(default_factory=list)
    highlighted_index: int = 0
    selected_page_id: str | None = None

    form: EntryForm = field(default_factory=EntryForm)
    status: Status | None = None

    submitting: bool = False
    loading_pages: bool = False

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def quit(self) -> None:
        self.running = False

    def is_running(self) -> bool:
        return self.running

    @property
    def phase(self) -> Phase:
        """Coarse phase for display: submitting wins, then editing, then status."""
        if self.submitting:
            return Phase.SUBMITTING
        if self.is_editing():
            return Phase.EDITING
        if self.status is not None and self.status.kind == StatusKind.ERROR:
            return Phase.ERROR
        if self.status is not None and self.status.kind == StatusKind.SUCCESS:
            return Phase.DONE
        return Phase.BROWSING

    # -------------------------------------------------------------------------
    # Focus
    # -------------------------------------------------------------------------

    def cycle_focus(self, reverse: bool = False) -> None:
        """Move focus to the next (or previous) target, wrapping around."""
        self.focus = self.focus.previous() if reverse else self.focus.next()
        if self.focus is Focus.PAGE_LIST:
            self.mode = InputMode.NORMAL

    def is_page_list_focused(self) -> bool:
        return self.focus is Focus.PAGE_LIST

    def is_field_focused(self, entry_field: EntryField) -> bool:
        return self.focus.entry_field is entry_field

    def next_field(self) -> None:
        """Focus the next form field, wrapping from Code back to Error."""
        self._step_field(1)

    def previous_field(self) -> None:
        """Focus the previous form field, wrapping from Error to Code."""
        self._step_field(-1)

    def _step_field(self, offset: int) -> None:
        current = self.focus.entry_field
        fields = list(EntryField)
        if current is None:
            target = fields[0] if offset > 0 else fields[-1]
        else:
            target = fields[(fields.index(current) + offset) % len(fields)]
        self.focus = Focus.for_field(target)

    def handle_up(self) -> None:
        if self.is_page_list_focused():
            self.previous_page()
        else:
            self.previous_field()

    def handle_down(self) -> None:
        if self.is_page_list_focused():
            self.next_page()
        else:
            self.next_field()

    # -------------------------------------------------------------------------
    # Pages
    # -------------------------------------------------------------------------

    def set_pages(self, pages: Iterable[Page]) -> None:
        """Replace the page list.

        The highlight goes back to the top. The selection survives only
        if the selected page is still present.
        """
        self.pages = list(pages)
        self.highlighted_index = 0
        if self.selected_page_id is not None and self.selected_page is None:
            self.selected_page_id = None

    def next_page(self) -> None:
        if not self.pages:
            return
        self.highlighted_index = (self.highlighted_index + 1) % len(self.pages)

    def previous_page(self) -> None:
        if not self.pages:
            return
        self.highlighted_index = (self.highlighted_index - 1) % len(self.pages)

    @property
    def highlighted_page(self) -> Page | None:
        if 0 <= self.highlighted_index < len(self.pages):
            return self.pages[self.highlighted_index]
        return None

    @property
    def selected_page(self) -> Page | None:
        for page in self.pages:
            if page.id == self.selected_page_id:
                return page
        return None

    def select_highlighted(self) -> Page | None:
        """Make the highlighted page the append target."""
        page = self.highlighted_page
        if page is None:
            self.set_error("No pages loaded")
            return None
        self.selected_page_id = page.id
        self.set_status(f"Selected page: {page.title}")
        return page

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def enter_edit_mode(self) -> None:
        """Start editing the focused field. No-op on the page list."""
        if self.focus.entry_field is not None:
            self.mode = InputMode.EDITING

    def exit_edit_mode(self) -> None:
        self.mode = InputMode.NORMAL

    def is_editing(self) -> bool:
        return self.mode is InputMode.EDITING

    @property
    def editing_field(self) -> EntryField | None:
        """The field being edited, or None in navigation mode."""
        if not self.is_editing():
            return None
        return self.focus.entry_field

    def add_char(self, char: str) -> None:
        entry_field = self.focus.entry_field
        if entry_field is not None:
            self.form.append(entry_field, char)

    def add_newline(self) -> None:
        self.add_char("\n")

    def delete_char(self) -> None:
        entry_field = self.focus.entry_field
        if entry_field is not None:
            self.form.backspace(entry_field)

    def clear_inputs(self) -> None:
        """Empty every field and move field focus back to Error."""
        self.form.clear()
        if self.focus.entry_field is not None:
            self.focus = Focus.ERROR

    # -------------------------------------------------------------------------
    # Submission
    # -------------------------------------------------------------------------

    def submission_blocker(self) -> str | None:
        """Why submitting is not allowed right now, or None if it is."""
        if self.submitting:
            return "A submission is already in progress"
        if self.selected_page is None:
            return "Select a page first (Enter on the page list)"
        missing = self.form.missing_required()
        if missing:
            names = ", ".join(f.value.capitalize() for f in missing)
            return f"Fill in {names} first"
        return None

    def begin_submission(self) -> tuple[Page, FaultEntry] | None:
        """Validate and mark a submission as in flight.

        Returns the target page and a snapshot of the form, or None after
        setting an error status when submitting is not allowed.
        """
        reason = self.submission_blocker()
        if reason is not None:
            self.set_error(reason)
            return None
        page = self.selected_page
        assert page is not None
        self.submitting = True
        self.status = Status(StatusKind.LOADING, f"Submitting to {page.title}...")
        return page, self.form.to_entry()

    def finish_submission(self, page: Page, error: FaultNoteError | None = None) -> None:
        """Record the outcome of a submission started with begin_submission."""
        self.submitting = False
        if error is None:
            self.set_success(f"Logged entry to {page.title}")
        else:
            self.set_error(f"Submit failed: {error.message}")

    # -------------------------------------------------------------------------
    # Status line
    # -------------------------------------------------------------------------

    def set_status(self, message: str) -> None:
        self.status = Status(StatusKind.INFO, message)

    def set_loading(self, message: str) -> None:
        self.status = Status(StatusKind.LOADING, message)

    def set_success(self, message: str) -> None:
        self.status = Status(StatusKind.SUCCESS, message)

    def set_error(self, message: str) -> None:
        self.status = Status(StatusKind.ERROR, message)

    def clear_status(self) -> None:
        self.status = None
