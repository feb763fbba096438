"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture(autouse=True)
def no_real_token(monkeypatch):
    """Keep a developer's real Notion token out of the test run."""
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.delenv("NOTION_TOKEN", raising=False)
