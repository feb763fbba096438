"""TUI project settings loader.

Reads optional FaultNote configuration from .faultnote.yaml in the
working directory. Values may reference environment variables with
${VAR_NAME} syntax.

Example .faultnote.yaml:
    faultnote:
      token_env: NOTION_TOKEN        # Variable holding the integration token
      base_url: https://api.notion.com
      timeout: 15                    # Seconds per request
      page_size: 50                  # Pages fetched from search
      code_language: python          # Language for code blocks
      log_file: ./faultnote.log      # Where to write logs (off by default)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from faultnote.lib.auth import DEFAULT_TOKEN_ENV, NOTION_VERSION, AuthConfig
from faultnote.lib.blocks import DEFAULT_CODE_LANGUAGE
from faultnote.lib.env import expand_options
from faultnote.lib.errors import ConfigurationError
from faultnote.lib.notion import DEFAULT_BASE_URL, NotionConfig

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = ".faultnote.yaml"


@dataclass
class FaultNoteSettings:
    """TUI configuration settings."""

    # Environment variable holding the Notion integration token
    token_env: str = DEFAULT_TOKEN_ENV

    base_url: str = DEFAULT_BASE_URL
    notion_version: str = NOTION_VERSION
    timeout: float = 30.0
    page_size: int = 100
    code_language: str = DEFAULT_CODE_LANGUAGE

    # Log file path; logging is off when unset
    log_file: str | None = None

    @classmethod
    def load(cls, project_root: Path | None = None) -> "FaultNoteSettings":
        """Load settings from .faultnote.yaml in project root.

        Args:
            project_root: Project root directory. Defaults to cwd.

        Returns:
            FaultNoteSettings with values from config file or defaults.

        Raises:
            ConfigurationError: If a value has the wrong type.
        """
        root = project_root or Path.cwd()
        config_path = root / SETTINGS_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            # A broken settings file should not keep the UI from starting
            logger.warning("Ignoring unreadable %s: %s", config_path, exc)
            return cls()

        section = config.get("faultnote") if isinstance(config, dict) else None
        if section is None:
            section = {}
        if not isinstance(section, dict):
            raise ConfigurationError(
                "The 'faultnote' section must be a mapping",
                field="faultnote",
                value=section,
            )
        return cls.from_dict(expand_options(section))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FaultNoteSettings":
        """Create settings from a (already expanded) mapping."""
        defaults = cls()
        return cls(
            token_env=str(data.get("token_env", defaults.token_env)),
            base_url=str(data.get("base_url", defaults.base_url)),
            notion_version=str(data.get("notion_version", defaults.notion_version)),
            timeout=_coerce(data, "timeout", float, defaults.timeout),
            page_size=_coerce(data, "page_size", int, defaults.page_size),
            code_language=str(data.get("code_language", defaults.code_language)),
            log_file=data.get("log_file") or None,
        )

    def notion_config(self) -> NotionConfig:
        """Build the client configuration, reading the token from the environment.

        Raises:
            AuthError: If the token variable is unset.
            ConfigurationError: If a connection setting is invalid.
        """
        auth = AuthConfig.from_env(self.token_env, notion_version=self.notion_version)
        return NotionConfig(
            auth=auth,
            base_url=self.base_url,
            timeout=self.timeout,
            page_size=self.page_size,
            code_language=self.code_language,
        )


def _coerce(data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    if key not in data or data[key] is None:
        return default
    try:
        return kind(data[key])
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"Setting '{key}' must be {kind.__name__}",
            field=key,
            value=data[key],
        ) from exc
