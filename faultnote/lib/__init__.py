"""FaultNote library modules.

Notion access, block building, configuration and error types. Nothing in
here depends on prompt_toolkit.
"""

from faultnote.lib.auth import AuthConfig, build_auth_headers
from faultnote.lib.blocks import create_error_block, entry_to_blocks, extract_page_info
from faultnote.lib.env import expand_env_vars, expand_options, load_env_file
from faultnote.lib.errors import (
    ApiError,
    AuthError,
    ConfigurationError,
    DecodeError,
    FaultNoteError,
    NetworkError,
)
from faultnote.lib.notion import NotionClient, NotionConfig
from faultnote.lib.records import FaultEntry, Page

__all__ = [
    # Records
    "FaultEntry",
    "Page",
    # Notion
    "AuthConfig",
    "NotionClient",
    "NotionConfig",
    "build_auth_headers",
    "create_error_block",
    "entry_to_blocks",
    "extract_page_info",
    # Environment
    "expand_env_vars",
    "expand_options",
    "load_env_file",
    # Errors
    "ApiError",
    "AuthError",
    "ConfigurationError",
    "DecodeError",
    "FaultNoteError",
    "NetworkError",
]
