"""Shared fixtures for TUI tests."""

from __future__ import annotations

import pytest

from faultnote.lib.errors import FaultNoteError
from faultnote.lib.records import FaultEntry, Page
from faultnote.tui.models import AppState


class FakeNotionClient:
    """Stands in for NotionClient and records every call."""

    def __init__(
        self,
        pages: list[Page] | None = None,
        *,
        list_error: FaultNoteError | None = None,
        append_error: FaultNoteError | None = None,
    ) -> None:
        self.pages = pages or []
        self.list_error = list_error
        self.append_error = append_error
        self.list_calls = 0
        self.appended: list[tuple[str, FaultEntry]] = []

    def list_pages(self) -> list[Page]:
        self.list_calls += 1
        if self.list_error is not None:
            raise self.list_error
        return list(self.pages)

    def append_entry(self, page_id: str, entry: FaultEntry) -> None:
        if self.append_error is not None:
            raise self.append_error
        self.appended.append((page_id, entry))

    def close(self) -> None:
        pass


@pytest.fixture
def two_pages() -> list[Page]:
    """The Notes/Bugs pair used in navigation scenarios."""
    return [Page(id="page-notes", title="Notes"), Page(id="page-bugs", title="Bugs")]


@pytest.fixture
def state(two_pages: list[Page]) -> AppState:
    """State with two pages loaded and nothing selected."""
    app_state = AppState()
    app_state.set_pages(two_pages)
    return app_state


@pytest.fixture
def ready_state(state: AppState) -> AppState:
    """State with "Bugs" selected and the required fields filled in."""
    state.highlighted_index = 1
    state.select_highlighted()
    state.form.error = "NullPointerException"
    state.form.problem = "User was null after logout"
    state.form.solution = "Guard the session lookup"
    return state


@pytest.fixture
def fake_client(two_pages: list[Page]) -> FakeNotionClient:
    return FakeNotionClient(two_pages)
