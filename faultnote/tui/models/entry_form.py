"""Editable four-field form for a fault log entry."""

from __future__ import annotations

from dataclasses import dataclass

from faultnote.lib.records import FaultEntry
from faultnote.tui.models.focus import EntryField


@dataclass
class EntryForm:
    """Text buffers for the error, problem, solution and code fields.

    Buffers are plain strings mutated in place by keystrokes. Submitting
    takes a snapshot (``to_entry``) and never modifies the form.
    """

    error: str = ""
    problem: str = ""
    solution: str = ""
    code: str = ""

    def get(self, field: EntryField) -> str:
        return getattr(self, field.value)

    def set(self, field: EntryField, text: str) -> None:
        setattr(self, field.value, text)

    def append(self, field: EntryField, text: str) -> None:
        """Append text to the end of a field."""
        self.set(field, self.get(field) + text)

    def backspace(self, field: EntryField) -> None:
        """Remove the last character of a field (no-op when empty)."""
        self.set(field, self.get(field)[:-1])

    def clear(self) -> None:
        for field in EntryField:
            self.set(field, "")

    def is_blank(self, field: EntryField) -> bool:
        return not self.get(field).strip()

    def missing_required(self) -> list[EntryField]:
        """Required fields that are empty or whitespace-only."""
        return [f for f in EntryField if f.required and self.is_blank(f)]

    def to_entry(self) -> FaultEntry:
        """Snapshot the form. A blank code field becomes None."""
        return FaultEntry(
            error=self.error,
            problem=self.problem,
            solution=self.solution,
            code=None if self.is_blank(EntryField.CODE) else self.code,
        )
