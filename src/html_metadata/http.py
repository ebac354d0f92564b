# ABOUTME: HTTP client abstraction for fetching HTML pages to extract metadata from.
# ABOUTME: Single attempt per request with an injectable transport for testing.

import logging
from typing import Any, Protocol, runtime_checkable

import httpx

from html_metadata.errors import MetadataError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "html-metadata/0.1.0"
DEFAULT_TIMEOUT = 30.0


class HtmlFetchError(MetadataError):
    """Raised when an HTML page cannot be fetched."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for fetching the HTML text of a page."""

    def get_text(self, url: str) -> str: ...


class HtmlHttpClient:
    """HTTP client that returns page bodies as text.

    Wraps httpx.Client and follows redirects. Failed requests are not
    retried.
    """

    def __init__(
        self,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": user_agent},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    def get_text(self, url: str) -> str:
        """Send a GET request and return the decoded body.

        Args:
            url: The page to fetch.

        Returns:
            The response body, decoded using the charset httpx detects.

        Raises:
            HtmlFetchError: On transport errors or any non-200 status.
        """
        try:
            response = self._client.get(url)
        except httpx.HTTPError as exc:
            raise HtmlFetchError(f"Request failed: {url}: {exc}") from exc

        if response.status_code != 200:
            logger.warning("HTTP %d from %s", response.status_code, url)
            raise HtmlFetchError(f"HTTP {response.status_code} from {url}")
        return response.text

    def close(self) -> None:
        self._client.close()
