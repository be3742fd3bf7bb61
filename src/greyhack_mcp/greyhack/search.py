"""The ``search_greyhack_code`` tool."""

from typing import Any, Dict

from greyhack_mcp.core.exceptions import UpstreamServiceError
from greyhack_mcp.core.logger import get_logger
from .github import GitHubCodeSearchClient

logger = get_logger(__name__)

DEFAULT_MAX_RESULTS = 5

# Qualifiers appended to every query so results stay on GreyScript sources.
SEARCH_QUALIFIERS = "language:greyscript OR language:js extension:.gs extension:.txt"


def build_search_query(query: str) -> str:
    return f"{query} {SEARCH_QUALIFIERS}"


class CodeSearchHandler:
    """Searches GitHub for Grey Hack code examples.

    Stateless apart from the client it delegates to, so a single instance is
    shared by every invocation.
    """

    def __init__(self, client: GitHubCodeSearchClient) -> None:
        self.client = client

    def __call__(self, params: Dict[str, Any]) -> Dict[str, Any]:
        query: str = params["query"]
        max_results = max(0, int(params.get("max_results", DEFAULT_MAX_RESULTS)))

        try:
            page = self.client.search_code(build_search_query(query), per_page=max_results)
        except UpstreamServiceError as e:
            logger.error(f"Error searching GitHub: {e}")
            raise UpstreamServiceError(f"Error searching GitHub: {e}") from e

        return {
            "results": [item.model_dump() for item in page.items[:max_results]],
            "total_count": page.total_count,
        }
