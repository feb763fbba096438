"""Full-screen prompt_toolkit application for logging faults to Notion.

Page list on the left, the four entry fields on the right, a title bar
with mode and status on top and key hints at the bottom. Every key goes
through ``faultnote.tui.events.handle_key``; Notion calls run in a
worker thread so the screen keeps redrawing while they are in flight.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from prompt_toolkit import Application
from prompt_toolkit.eventloop import run_in_executor_with_context
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import FormattedTextControl, HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.dimension import Dimension as D
from prompt_toolkit.widgets import Frame

from faultnote.lib.notion import NotionClient
from faultnote.tui.actions import (
    finish_refresh,
    finish_submission,
    run_refresh,
    run_submission,
    start_refresh,
    start_submission,
)
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
from faultnote.tui.events import Command, handle_key
from faultnote.tui.models import AppState, EntryField, Focus
from faultnote.tui.ui import (
    STYLE,
    get_panel_style,
    render_command_bar,
    render_field,
    render_field_title,
    render_page_list,
    render_page_list_title,
    render_title_bar,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# prompt_toolkit key -> name understood by handle_key
_KEY_NAMES: dict[str, str] = {
    Keys.Tab: KEY_TAB,
    Keys.BackTab: KEY_BACKTAB,
    Keys.Up: KEY_UP,
    Keys.Down: KEY_DOWN,
    Keys.Enter: KEY_ENTER,
    Keys.ControlJ: KEY_ENTER,
    Keys.Escape: KEY_ESCAPE,
    Keys.Backspace: KEY_BACKSPACE,
    Keys.ControlC: KEY_FORCE_QUIT,
    Keys.ControlQ: KEY_FORCE_QUIT,
}


def normalize_key(key: str) -> str | None:
    """Translate a prompt_toolkit key into a handle_key name.

    Returns None for keys FaultNote does not use.
    """
    name = _KEY_NAMES.get(key)
    if name is not None:
        return name
    if isinstance(key, Keys):
        return None
    if len(key) == 1 and key.isprintable():
        return key
    return None


class FaultNoteApp:
    """Full-screen fault logger.

    Tab cycles focus between the page list and the four fields, Enter
    selects a page or submits, e edits the focused field, q quits.
    """

    def __init__(
        self,
        client: NotionClient | None = None,
        state: AppState | None = None,
    ) -> None:
        self.client = client
        self.state = state or AppState()
        self.app: Application | None = None

    def run(self) -> None:
        """Run the full-screen application until the user quits."""
        self.app = Application(
            layout=self._create_layout(),
            key_bindings=self._create_bindings(),
            style=STYLE,
            full_screen=True,
            mouse_support=False,
        )
        # Esc leaves edit mode; don't wait half a second for a meta sequence
        self.app.ttimeoutlen = 0.05
        self.app.run()

    # -------------------------------------------------------------------------
    # Layout
    # -------------------------------------------------------------------------

    def _create_layout(self) -> Layout:
        """Create the application layout."""
        title_bar = Frame(
            Window(
                content=FormattedTextControl(lambda: render_title_bar(self.state)),
                height=1,
            ),
            style="class:title-bar",
        )

        page_list = self._panel(
            Frame(
                Window(
                    content=FormattedTextControl(lambda: render_page_list(self.state)),
                    wrap_lines=False,
                ),
                title=lambda: render_page_list_title(self.state),
            ),
            Focus.PAGE_LIST,
            width=D(weight=1),
        )

        fields = HSplit(
            [self._create_field_frame(entry_field) for entry_field in EntryField],
            width=D(weight=3),
        )

        command_bar = Frame(
            Window(
                content=FormattedTextControl(lambda: render_command_bar(self.state)),
                height=1,
            ),
            title="Commands",
        )

        return Layout(
            HSplit([
                title_bar,
                VSplit([page_list, fields]),
                command_bar,
            ])
        )

    def _create_field_frame(self, entry_field: EntryField) -> HSplit:
        frame = Frame(
            Window(
                content=FormattedTextControl(lambda: render_field(self.state, entry_field)),
                wrap_lines=True,
            ),
            title=lambda: render_field_title(self.state, entry_field),
        )
        return self._panel(frame, Focus.for_field(entry_field), height=D(weight=1))

    def _panel(self, frame: Frame, target: Focus, **dimensions: Any) -> HSplit:
        # Frame takes a static style only; this one is re-evaluated per redraw
        return HSplit(
            [frame],
            style=lambda: get_panel_style(self.state, target),
            **dimensions,
        )

    # -------------------------------------------------------------------------
    # Input
    # -------------------------------------------------------------------------

    def _create_bindings(self) -> KeyBindings:
        """Create key bindings."""
        kb = KeyBindings()

        @kb.add(Keys.Any)
        def dispatch_(event):
            """Route every key through the state machine."""
            key = normalize_key(event.key_sequence[0].key)
            if key is not None:
                self.handle(key)

        @kb.add(Keys.BracketedPaste)
        def paste_(event):
            """Insert pasted text into the field being edited."""
            self.paste(event.data)

        return kb

    def handle(self, key: str) -> None:
        """Apply one normalized key and run any command it produces."""
        command = handle_key(self.state, key)
        if command is Command.SUBMIT:
            self.submit()
        elif command is Command.REFRESH:
            self.refresh()

        if not self.state.is_running():
            self._exit()

    def paste(self, text: str) -> None:
        if not self.state.is_editing():
            return
        for char in text.replace("\r\n", "\n").replace("\r", "\n"):
            if char == "\n" or char.isprintable():
                self.state.add_char(char)

    # -------------------------------------------------------------------------
    # Remote actions
    # -------------------------------------------------------------------------

    def submit(self) -> None:
        """Send the form to the selected page."""
        payload = start_submission(self.state, self.client)
        if payload is None:
            return
        client = self.client
        assert client is not None
        page, entry = payload
        logger.info("Submitting entry to %s", page.id)
        self._run_in_background(
            lambda: run_submission(client, page, entry),
            lambda error: finish_submission(self.state, page, error),
        )

    def refresh(self) -> None:
        """Re-fetch the page list."""
        if not start_refresh(self.state, self.client):
            return
        client = self.client
        assert client is not None
        self._run_in_background(
            lambda: run_refresh(client),
            lambda result: finish_refresh(self.state, result),
        )

    def _run_in_background(self, work: Callable[[], T], done: Callable[[T], None]) -> None:
        """Run ``work`` off the event loop, then apply ``done`` on it.

        Without a running application (before start-up) the work runs inline.
        """
        app = self.app
        if app is None or not app.is_running:
            done(work())
            return

        async def runner() -> None:
            result = await run_in_executor_with_context(work)
            done(result)
            app.invalidate()

        app.create_background_task(runner())

    def _exit(self) -> None:
        if self.app is not None and self.app.is_running:
            self.app.exit()
