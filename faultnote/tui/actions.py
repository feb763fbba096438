"""Remote actions triggered from the TUI.

Each action is split in three so the application can run the slow middle
step in a worker thread:

- ``start_*`` validates against the state and marks the action in flight
- ``run_*`` performs the Notion call and returns the result or the error
- ``finish_*`` writes the outcome back into the state

``load_pages`` and ``submit_entry`` chain the three steps synchronously.
"""

from __future__ import annotations

import logging

from faultnote.lib.errors import FaultNoteError
from faultnote.lib.notion import NotionClient
from faultnote.lib.records import FaultEntry, Page
from faultnote.tui.models import AppState

logger = logging.getLogger(__name__)

NOT_CONNECTED_MESSAGE = "Not connected to Notion (set API_KEY and press r)"


# =============================================================================
# Page list
# =============================================================================

def start_refresh(state: AppState, client: NotionClient | None) -> bool:
    """Mark a page refresh as started. Returns False if it cannot run."""
    if client is None:
        state.set_error(NOT_CONNECTED_MESSAGE)
        return False
    if state.loading_pages:
        return False
    state.loading_pages = True
    state.set_loading("Fetching pages from Notion...")
    return True


def run_refresh(client: NotionClient) -> list[Page] | FaultNoteError:
    """Fetch pages, returning the error instead of raising it."""
    try:
        return client.list_pages()
    except FaultNoteError as exc:
        logger.warning("Failed to fetch pages: %s", exc, extra={"error": exc.to_dict()})
        return exc


def finish_refresh(state: AppState, result: list[Page] | FaultNoteError) -> None:
    state.loading_pages = False
    if isinstance(result, FaultNoteError):
        state.set_error(f"Failed to fetch pages: {result.message}")
        return
    state.set_pages(result)
    if result:
        state.set_success(f"Loaded {len(result)} pages from Notion")
    else:
        state.set_status("No pages found. Share a page with the integration first.")


def load_pages(state: AppState, client: NotionClient | None) -> bool:
    """Fetch pages into the state. Returns True on success."""
    if not start_refresh(state, client):
        return False
    assert client is not None
    result = run_refresh(client)
    finish_refresh(state, result)
    return not isinstance(result, FaultNoteError)


# =============================================================================
# Submission
# =============================================================================

def start_submission(
    state: AppState,
    client: NotionClient | None,
) -> tuple[Page, FaultEntry] | None:
    """Validate and begin a submission.

    Returns the target page and a snapshot of the form, or None (with an
    error status set) when nothing should be sent.
    """
    if state.submitting:
        state.set_status("A submission is already in progress")
        return None
    if client is None:
        state.set_error(NOT_CONNECTED_MESSAGE)
        return None
    return state.begin_submission()


def run_submission(
    client: NotionClient,
    page: Page,
    entry: FaultEntry,
) -> FaultNoteError | None:
    """Append the entry, returning the error instead of raising it."""
    try:
        client.append_entry(page.id, entry)
    except FaultNoteError as exc:
        logger.warning(
            "Failed to append entry to %s: %s", page.id, exc, extra={"error": exc.to_dict()}
        )
        return exc
    return None


def finish_submission(state: AppState, page: Page, error: FaultNoteError | None) -> None:
    state.finish_submission(page, error)


def submit_entry(state: AppState, client: NotionClient | None) -> bool:
    """Submit the form to the selected page. Returns True on success.

    The form is left untouched either way.
    """
    payload = start_submission(state, client)
    if payload is None:
        return False
    assert client is not None
    page, entry = payload
    error = run_submission(client, page, entry)
    finish_submission(state, page, error)
    return error is None
