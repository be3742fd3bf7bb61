from typing import Any, Dict, List
from unittest.mock import MagicMock

import pytest

from greyhack_mcp.core import Settings, ToolDispatcher, ToolRegistry
from greyhack_mcp.greyhack import GitHubCodeSearchClient, build_registry


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings with a dummy token; no real GitHub calls are made in tests."""
    monkeypatch.setenv("GITHUB_TOKEN", "test-token")
    return Settings()


def make_search_response(total_count: int, count: int, status_code: int = 200) -> MagicMock:
    """Builds a fake ``requests.Response`` for ``GET /search/code``."""
    items: List[Dict[str, Any]] = [
        {
            "name": f"script{i}.gs",
            "path": f"src/script{i}.gs",
            "repository": {"full_name": f"owner/repo{i}"},
            "html_url": f"https://github.com/owner/repo{i}/blob/main/src/script{i}.gs",
        }
        for i in range(count)
    ]
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = {"total_count": total_count, "items": items}
    return response


@pytest.fixture
def mock_session() -> MagicMock:
    session = MagicMock()
    session.get.return_value = make_search_response(total_count=10, count=10)
    return session


@pytest.fixture
def github_client(mock_session: MagicMock) -> GitHubCodeSearchClient:
    return GitHubCodeSearchClient("test-token", max_retries=0, session=mock_session)


@pytest.fixture
def registry(settings: Settings, github_client: GitHubCodeSearchClient) -> ToolRegistry:
    return build_registry(settings, client=github_client)


@pytest.fixture
def dispatcher(registry: ToolRegistry) -> ToolDispatcher:
    return ToolDispatcher(registry=registry, tool_timeout=5.0)
