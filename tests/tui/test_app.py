"""Tests for the prompt_toolkit application shell.

Most tests drive the methods the key bindings call. ``TestRunningApp``
runs the real Application against a pipe input so Notion calls go
through the worker thread.
"""

from __future__ import annotations

import threading
import time
from typing import Callable

from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout
from prompt_toolkit.output import DummyOutput

from faultnote.lib.errors import NetworkError
from faultnote.tui.app import FaultNoteApp, normalize_key
from faultnote.tui.constants import (
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_FORCE_QUIT,
    KEY_TAB,
)
from faultnote.tui.models import AppState, EntryField, Focus, Phase, StatusKind

from tests.tui.conftest import FakeNotionClient


class TestNormalizeKey:
    """Tests for prompt_toolkit key translation."""

    def test_named_keys(self) -> None:
        assert normalize_key(Keys.Tab) == KEY_TAB
        assert normalize_key(Keys.Enter) == KEY_ENTER
        assert normalize_key(Keys.ControlJ) == KEY_ENTER
        assert normalize_key(Keys.Escape) == KEY_ESCAPE
        assert normalize_key(Keys.Backspace) == KEY_BACKSPACE
        assert normalize_key(Keys.Down) == KEY_DOWN

    def test_quit_chords(self) -> None:
        assert normalize_key(Keys.ControlC) == KEY_FORCE_QUIT
        assert normalize_key(Keys.ControlQ) == KEY_FORCE_QUIT

    def test_printable_characters_pass_through(self) -> None:
        assert normalize_key("a") == "a"
        assert normalize_key(" ") == " "
        assert normalize_key("é") == "é"

    def test_unused_keys(self) -> None:
        assert normalize_key(Keys.F5) is None
        assert normalize_key(Keys.ControlX) is None


class TestFaultNoteApp:
    """Tests for FaultNoteApp without a running event loop."""

    def test_defaults(self) -> None:
        app = FaultNoteApp()
        assert app.client is None
        assert app.state.is_running() is True
        assert app.app is None

    def test_create_layout(self, state: AppState) -> None:
        app = FaultNoteApp(state=state)
        assert isinstance(app._create_layout(), Layout)

    def test_create_bindings(self) -> None:
        bindings = FaultNoteApp()._create_bindings()
        assert len(bindings.bindings) == 2

    def test_handle_quit_without_running_app(self, state: AppState) -> None:
        app = FaultNoteApp(state=state)
        app.handle("q")
        assert app.state.is_running() is False

    def test_full_session(self, fake_client: FakeNotionClient) -> None:
        """Select a page, fill the fields and submit through key presses."""
        state = AppState()
        state.set_pages(fake_client.pages)
        app = FaultNoteApp(client=fake_client, state=state)

        for key in (KEY_DOWN, KEY_ENTER, KEY_TAB, "e"):
            app.handle(key)
        for text in ("TypeError", "Wrong argument", "Cast to int"):
            for char in text:
                app.handle(char)
            app.handle(KEY_TAB)
        app.handle(KEY_ESCAPE)
        app.handle(KEY_ENTER)

        assert len(fake_client.appended) == 1
        page_id, entry = fake_client.appended[0]
        assert page_id == "page-bugs"
        assert (entry.error, entry.problem, entry.solution) == (
            "TypeError",
            "Wrong argument",
            "Cast to int",
        )
        assert state.phase is Phase.DONE

    def test_submit_failure(self, ready_state: AppState, two_pages) -> None:
        client = FakeNotionClient(two_pages, append_error=NetworkError("Request to Notion timed out"))
        app = FaultNoteApp(client=client, state=ready_state)

        app.submit()

        assert ready_state.phase is Phase.ERROR
        assert "timed out" in ready_state.status.text

    def test_refresh(self, fake_client: FakeNotionClient) -> None:
        app = FaultNoteApp(client=fake_client)
        app.handle("r")
        assert fake_client.list_calls == 1
        assert [p.title for p in app.state.pages] == ["Notes", "Bugs"]

    def test_paste_only_while_editing(self, state: AppState) -> None:
        app = FaultNoteApp(state=state)
        app.paste("ignored")
        assert all(state.form.is_blank(f) for f in EntryField)

        app.handle(KEY_TAB)
        app.handle("e")
        app.paste("line one\r\nline two\x1b")
        assert state.form.error == "line one\nline two"


def wait_for(predicate: Callable[[], bool], timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return False


def run_with_keys(app: FaultNoteApp, script: Callable[[Callable[[str], None]], None]) -> None:
    """Run ``app`` on a pipe input while ``script`` types into it from another thread."""
    with create_pipe_input() as pipe_input:
        with create_app_session(input=pipe_input, output=DummyOutput()):
            driver = threading.Thread(target=script, args=(pipe_input.send_text,), daemon=True)
            driver.start()
            app.run()
            driver.join(timeout=5)


class TestRunningApp:
    """Tests that run the real Application with a worker thread."""

    def test_submit_twice_appends_twice(self, ready_state: AppState, fake_client: FakeNotionClient) -> None:
        ready_state.focus = Focus.ERROR
        app = FaultNoteApp(client=fake_client, state=ready_state)

        def script(send: Callable[[str], None]) -> None:
            try:
                for count in (1, 2):
                    send("\r")
                    wait_for(lambda: len(fake_client.appended) == count and not ready_state.submitting)
            finally:
                send("\x03")

        run_with_keys(app, script)

        assert len(fake_client.appended) == 2
        assert fake_client.appended[0] == fake_client.appended[1]
        assert ready_state.phase is Phase.DONE
        assert ready_state.submitting is False
        assert ready_state.form.error == "NullPointerException"
        assert ready_state.form.problem == "User was null after logout"
        assert ready_state.form.solution == "Guard the session lookup"

    def test_failed_submit_clears_submitting(self, ready_state: AppState, two_pages) -> None:
        ready_state.focus = Focus.ERROR
        client = FakeNotionClient(two_pages, append_error=NetworkError("Request to Notion timed out"))
        app = FaultNoteApp(client=client, state=ready_state)

        def script(send: Callable[[str], None]) -> None:
            try:
                send("\r")
                wait_for(
                    lambda: not ready_state.submitting
                    and ready_state.status is not None
                    and ready_state.status.kind == StatusKind.ERROR
                )
            finally:
                send("\x03")

        run_with_keys(app, script)

        assert ready_state.phase is Phase.ERROR
        assert ready_state.submitting is False
        assert "timed out" in ready_state.status.text

    def test_ctrl_c_while_editing_quits(self, ready_state: AppState) -> None:
        ready_state.focus = Focus.PROBLEM
        app = FaultNoteApp(state=ready_state)

        def script(send: Callable[[str], None]) -> None:
            send("e")
            wait_for(ready_state.is_editing)
            send("\x03")

        run_with_keys(app, script)

        assert ready_state.is_running() is False
        assert ready_state.form.problem == "User was null after logout"
