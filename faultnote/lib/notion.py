"""Notion API client.

Two operations, each a single blocking round trip:

- list the pages the integration can see
- append a fault log entry to a page

Example:
    from faultnote.lib.auth import AuthConfig
    from faultnote.lib.notion import NotionClient, NotionConfig

    config = NotionConfig(auth=AuthConfig.from_env())
    with NotionClient(config) as client:
        pages = client.list_pages()
        client.append_entry(pages[0].id, entry)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx

from faultnote.lib.auth import AuthConfig, build_auth_headers
from faultnote.lib.blocks import DEFAULT_CODE_LANGUAGE, entry_to_blocks, extract_page_info
from faultnote.lib.errors import ApiError, AuthError, ConfigurationError, DecodeError, NetworkError
from faultnote.lib.records import FaultEntry, Page

logger = logging.getLogger(__name__)

__all__ = ["NotionClient", "NotionConfig", "DEFAULT_BASE_URL"]

DEFAULT_BASE_URL = "https://api.notion.com"

AUTH_STATUS_CODES = {401, 403}

# Largest page_size the search endpoint accepts
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class NotionConfig:
    """Connection settings for the Notion API."""

    auth: AuthConfig
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0
    page_size: int = MAX_PAGE_SIZE
    code_language: str = DEFAULT_CODE_LANGUAGE

    def __post_init__(self) -> None:
        """Validate configuration on instantiation."""
        errors: List[str] = []

        if not self.base_url:
            errors.append("base_url is required (e.g., 'https://api.notion.com')")

        if self.timeout <= 0:
            errors.append(f"timeout must be positive, got {self.timeout}")

        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            errors.append(f"page_size must be between 1 and {MAX_PAGE_SIZE}, got {self.page_size}")

        if errors:
            raise ConfigurationError(
                "Invalid Notion configuration",
                details={"errors": "; ".join(errors)},
            )


class NotionClient:
    """Synchronous Notion client built on httpx.

    Every failure surfaces as a FaultNoteError subclass so callers only
    need to handle one hierarchy.
    """

    def __init__(
        self,
        config: NotionConfig,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.config = config
        self._client = httpx.Client(
            base_url=config.base_url.rstrip("/"),
            headers=build_auth_headers(config.auth),
            timeout=config.timeout,
            transport=transport,
        )

    def __enter__(self) -> "NotionClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._client.close()

    def list_pages(self) -> List[Page]:
        """Fetch the pages shared with the integration.

        Only the first batch of results is returned; pagination cursors
        are not followed.

        Raises:
            AuthError: Token missing or rejected
            NetworkError: Service unreachable
            ApiError: Request rejected
            DecodeError: Response is not a search result
        """
        body = {
            "filter": {"property": "object", "value": "page"},
            "page_size": self.config.page_size,
        }
        data = self._request("POST", "/v1/search", operation="list_pages", json=body)

        results = data.get("results")
        if not isinstance(results, list):
            raise DecodeError(
                "Search response has no results list",
                operation="list_pages",
                details={"keys": ", ".join(sorted(data))},
            )

        pages: List[Page] = []
        for result in results:
            if not isinstance(result, dict):
                continue
            page = extract_page_info(result)
            if page is not None:
                pages.append(page)

        if data.get("has_more"):
            logger.warning(
                "Notion reported more than %d pages; only the first batch is shown",
                len(results),
            )

        logger.info("Fetched %d pages from Notion", len(pages))
        return pages

    def append_entry(self, page_id: str, entry: FaultEntry) -> None:
        """Append a fault log entry to the end of a page.

        Raises:
            AuthError: Token missing or rejected
            NetworkError: Service unreachable
            ApiError: Request rejected (e.g. unknown page id)
        """
        body = {"children": entry_to_blocks(entry, self.config.code_language)}
        self._request(
            "PATCH",
            f"/v1/blocks/{page_id}/children",
            operation="append_entry",
            json=body,
            decode=False,
        )
        logger.info("Appended fault log entry to page %s", page_id)

    def _request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        json: Dict[str, Any],
        decode: bool = True,
    ) -> Dict[str, Any]:
        logger.debug("%s %s", method, path)
        try:
            response = self._client.request(method, path, json=json)
        except httpx.TimeoutException as exc:
            raise NetworkError(
                "Request to Notion timed out",
                operation=operation,
                url=path,
                cause=exc,
            ) from exc
        except httpx.RequestError as exc:
            raise NetworkError(
                "Could not reach the Notion API",
                operation=operation,
                url=path,
                cause=exc,
            ) from exc

        if response.is_error:
            self._raise_for_status(response, operation)

        if not decode:
            return {}

        try:
            data = response.json()
        except ValueError as exc:
            raise DecodeError(
                "Notion returned a response that is not JSON",
                operation=operation,
                cause=exc,
            ) from exc

        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(data).__name__}",
                operation=operation,
            )
        return data

    def _raise_for_status(self, response: httpx.Response, operation: str) -> None:
        code: Optional[str] = None
        message = response.reason_phrase or "request failed"
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            code = payload.get("code")
            message = payload.get("message") or message

        status = response.status_code
        if status in AUTH_STATUS_CODES:
            raise AuthError(
                f"Notion rejected the token ({status}): {message}",
                status_code=status,
                operation=operation,
            )
        raise ApiError(
            f"Notion API error {status}: {message}",
            status_code=status,
            code=code,
            operation=operation,
        )
