"""Minimal GitHub code search client."""

from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

import requests
from pydantic import BaseModel, Field

from greyhack_mcp import __version__
from greyhack_mcp.core.exceptions import UpstreamServiceError
from greyhack_mcp.core.logger import get_logger

logger = get_logger(__name__)

MISSING_TOKEN_MESSAGE = "GITHUB_TOKEN environment variable not set. Please provide a GitHub token."

# Statuses worth another attempt; everything else >= 400 fails immediately.
_TRANSIENT_STATUSES = frozenset({500, 502, 503, 504})


class PermanentUpstreamError(UpstreamServiceError):
    """An upstream error that another attempt will not fix (bad token, invalid query, ...)."""

    pass


class CodeSearchItem(BaseModel):
    """One code search hit, reduced to the fields the search tool returns."""

    name: str
    path: str
    repository: str
    url: str
    content: Optional[str] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "CodeSearchItem":
        return cls(
            name=item.get("name", ""),
            path=item.get("path", ""),
            repository=(item.get("repository") or {}).get("full_name", ""),
            url=item.get("html_url", ""),
            content=item.get("content") or None,
        )


class CodeSearchPage(BaseModel):
    """
    A page of code search results.

    Attributes:
        total_count: Total number of matches reported by GitHub, not the page size.
        items: The hits on this page.
    """

    total_count: int = 0
    items: List[CodeSearchItem] = Field(default_factory=list)


class GitHubCodeSearchClient:
    """Calls ``GET /search/code`` with a bearer token."""

    def __init__(
        self,
        token: Optional[str],
        *,
        base_url: str = "https://api.github.com",
        timeout: float = 10.0,
        max_retries: int = 1,
        retry_delay: float = 1.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.token = token.strip() if token and token.strip() else None
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._session = session or requests.Session()

    @property
    def authenticated(self) -> bool:
        return self.token is not None

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"greyhack-mcp-server/{__version__}",
        }

    def search_code(self, query: str, per_page: int = 30) -> CodeSearchPage:
        """
        Runs a code search.

        Args:
            query: The full GitHub search query, qualifiers included.
            per_page: Page size requested from GitHub (1-100).

        Returns:
            The first page of results.

        Raises:
            UpstreamServiceError: If no token is configured, the call times out,
                the network fails or GitHub answers with an error status.
        """
        if not self.authenticated:
            raise UpstreamServiceError(MISSING_TOKEN_MESSAGE)

        url = f"{self.base_url}/search/code"
        params = {"q": query, "per_page": max(1, min(per_page, 100))}

        delay = self.retry_delay
        attempt = 0
        while True:
            try:
                response = self._request(url, params)
            except PermanentUpstreamError:
                raise
            except UpstreamServiceError as e:
                if attempt >= self.max_retries:
                    raise
                logger.warning(
                    f"GitHub search failed (Retry: {attempt + 1}/{self.max_retries}): {e}. Waiting {delay}s..."
                )
                time.sleep(delay)
                delay *= 2  # Exponential backoff
                attempt += 1
                continue

            try:
                data = response.json()
            except ValueError as e:
                raise PermanentUpstreamError("GitHub returned a response that is not valid JSON") from e
            if not isinstance(data, dict):
                raise PermanentUpstreamError(f"GitHub returned {type(data).__name__} instead of a search result object")

            page = CodeSearchPage(
                total_count=data.get("total_count", 0),
                items=[CodeSearchItem.from_api(item) for item in data.get("items") or []],
            )
            logger.debug("GitHub search returned %d of %d matches.", len(page.items), page.total_count)
            return page

    def _request(self, url: str, params: Dict[str, Any]) -> requests.Response:
        """
        Performs one HTTP request.

        Raises:
            UpstreamServiceError: For timeouts, connection errors and 5xx answers.
            PermanentUpstreamError: For any other error status.
        """
        logger.debug("GET %s q=%r", url, params["q"])
        try:
            response = self._session.get(url, headers=self._headers(), params=params, timeout=self.timeout)
        except requests.Timeout as e:
            raise UpstreamServiceError(f"request timed out after {self.timeout} seconds") from e
        except requests.RequestException as e:
            raise UpstreamServiceError(f"network error: {e}") from e

        if response.status_code in _TRANSIENT_STATUSES:
            raise UpstreamServiceError(f"GitHub API {response.status_code}: {_error_message(response)}")
        if response.status_code >= 400:
            raise PermanentUpstreamError(f"GitHub API {response.status_code}: {_error_message(response)}")
        return response


def _error_message(response: requests.Response) -> str:
    try:
        message = response.json().get("message")
    except (ValueError, AttributeError):
        message = None
    return message or (response.text or "")[:500]
