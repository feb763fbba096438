"""Domain records exchanged between the UI and the Notion client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

__all__ = ["Page", "FaultEntry"]


@dataclass(frozen=True)
class Page:
    """A Notion page that can receive fault log entries."""

    id: str
    title: str

    def __str__(self) -> str:
        return self.title


@dataclass(frozen=True)
class FaultEntry:
    """Snapshot of a submitted form.

    Attributes:
        error: Error message or exception text
        problem: What went wrong
        solution: How it was fixed
        code: Optional code snippet (None when left blank)
    """

    error: str
    problem: str
    solution: str
    code: Optional[str] = None

    def has_code(self) -> bool:
        """Check if a non-blank code snippet is attached."""
        return bool(self.code and self.code.strip())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "error": self.error,
            "problem": self.problem,
            "solution": self.solution,
            "code": self.code,
        }
