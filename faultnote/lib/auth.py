"""Notion authentication utilities.

The integration token is read from the environment exactly once at
startup and carried in an ``AuthConfig`` that is handed to the client.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from faultnote.lib.errors import AuthError

logger = logging.getLogger(__name__)

__all__ = [
    "AuthConfig",
    "DEFAULT_TOKEN_ENV",
    "NOTION_VERSION",
    "build_auth_headers",
]

DEFAULT_TOKEN_ENV = "API_KEY"

# Stable API version the block payloads are written against
NOTION_VERSION = "2022-06-28"


@dataclass(frozen=True)
class AuthConfig:
    """Credentials for the Notion API.

    Examples:
        auth = AuthConfig(token="secret_abc")

        # From the environment
        auth = AuthConfig.from_env()             # reads API_KEY
        auth = AuthConfig.from_env("NOTION_KEY")
    """

    token: str = field(repr=False)
    notion_version: str = NOTION_VERSION

    def __post_init__(self) -> None:
        if not self.token or not self.token.strip():
            raise AuthError("Notion integration token is empty")

    @classmethod
    def from_env(
        cls,
        var_name: str = DEFAULT_TOKEN_ENV,
        *,
        notion_version: str = NOTION_VERSION,
    ) -> "AuthConfig":
        """Build credentials from an environment variable.

        Raises:
            AuthError: If the variable is unset or blank
        """
        token = os.environ.get(var_name, "").strip()
        if not token:
            raise AuthError(
                f"{var_name} not found in environment variables",
                suggestion=f"Export {var_name} or add it to a .env file.",
            )
        logger.debug("Loaded Notion token from %s", var_name)
        return cls(token=token, notion_version=notion_version)


def build_auth_headers(
    config: AuthConfig,
    *,
    extra_headers: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """Build the HTTP headers every Notion request carries.

    Args:
        config: Authentication configuration
        extra_headers: Additional headers to include

    Returns:
        Headers dict with Authorization and Notion-Version set
    """
    headers: Dict[str, str] = {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "Authorization": f"Bearer {config.token}",
        "Notion-Version": config.notion_version,
    }

    if extra_headers:
        headers.update(extra_headers)

    return headers
