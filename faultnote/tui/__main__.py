"""Entry point for running the TUI as a module.

Usage:
    python -m faultnote.tui                       # Start logging faults
    python -m faultnote.tui --log-file fn.log -v  # With debug logging
"""

from __future__ import annotations

import argparse
import logging
import sys

from faultnote.lib.env import load_env_file
from faultnote.lib.errors import AuthError, ConfigurationError
from faultnote.lib.logging import setup_logging
from faultnote.lib.notion import NotionClient
from faultnote.tui.actions import load_pages
from faultnote.tui.app import FaultNoteApp
from faultnote.tui.constants import DEMO_PAGES
from faultnote.tui.models import AppState
from faultnote.tui.settings import FaultNoteSettings

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="faultnote",
        description="Log errors, problems and solutions to a Notion page.",
        epilog="The Notion integration token is read from API_KEY (or a .env file).",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to this file (overrides log_file in .faultnote.yaml)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Write logs as JSON lines",
    )
    return parser.parse_args(argv)


def connect(settings: FaultNoteSettings, state: AppState) -> NotionClient | None:
    """Create the Notion client and load pages into ``state``.

    Without a token the state gets demo pages and an error status, and
    None is returned.
    """
    try:
        config = settings.notion_config()
    except AuthError as exc:
        logger.warning("Starting without Notion: %s", exc.message)
        state.set_pages(DEMO_PAGES)
        state.set_error(f"Notion API error: {exc.message}. Using demo pages.")
        return None

    client = NotionClient(config)
    state.set_status("Connected to Notion API")
    load_pages(state, client)
    return client


def main(argv: list[str] | None = None) -> None:
    """Run the TUI application."""
    args = _parse_args(argv)

    load_env_file()
    try:
        settings = FaultNoteSettings.load()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    setup_logging(
        verbose=args.verbose,
        json_format=args.json_logs,
        log_file=args.log_file or settings.log_file,
    )

    state = AppState()
    try:
        client = connect(settings, state)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    try:
        FaultNoteApp(client=client, state=state).run()
    finally:
        if client is not None:
            client.close()

    print("Thanks for using FaultNote! 👋")


if __name__ == "__main__":
    main()
