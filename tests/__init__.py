"""FaultNote Test Suite.

Test organization:
- unit/: Notion client, block payloads, errors, auth, env, logging, settings
- tui/: state machine, key dispatch, remote actions, renderers, app shell

No test talks to the real Notion API; the client is exercised through
httpx.MockTransport and the TUI through a fake client.
"""
