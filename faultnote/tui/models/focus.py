"""Focus targets, input modes and form fields."""

from __future__ import annotations

from enum import Enum


class EntryField(str, Enum):
    """The four fields of a fault log entry, in display order."""

    ERROR = "error"
    PROBLEM = "problem"
    SOLUTION = "solution"
    CODE = "code"

    @property
    def label(self) -> str:
        return _FIELD_LABELS[self]

    @property
    def required(self) -> bool:
        """Whether the field must be non-blank before submitting."""
        return self is not EntryField.CODE


_FIELD_LABELS = {
    EntryField.ERROR: "🔴 Error",
    EntryField.PROBLEM: "🟡 Problem",
    EntryField.SOLUTION: "🟢 Solution",
    EntryField.CODE: "💻 Code (optional)",
}


class Focus(str, Enum):
    """The UI region that currently receives keyboard input.

    Tab walks the members in declaration order and wraps around, so
    pressing it ``len(Focus)`` times returns to the starting target.
    """

    PAGE_LIST = "page_list"
    ERROR = "error"
    PROBLEM = "problem"
    SOLUTION = "solution"
    CODE = "code"

    @property
    def entry_field(self) -> EntryField | None:
        """The form field this focus edits, or None for the page list."""
        if self is Focus.PAGE_LIST:
            return None
        return EntryField(self.value)

    @classmethod
    def for_field(cls, field: EntryField) -> "Focus":
        return cls(field.value)

    def next(self) -> "Focus":
        return self._step(1)

    def previous(self) -> "Focus":
        return self._step(-1)

    def _step(self, offset: int) -> "Focus":
        members = list(Focus)
        return members[(members.index(self) + offset) % len(members)]


class InputMode(str, Enum):
    """Whether keystrokes navigate or edit the focused field."""

    NORMAL = "normal"
    EDITING = "editing"


class Phase(str, Enum):
    """Coarse state of the application, derived from AppState."""

    BROWSING = "browsing"
    EDITING = "editing"
    SUBMITTING = "submitting"
    DONE = "done"
    ERROR = "error"
