from unittest.mock import MagicMock, patch

import pytest
import requests

from greyhack_mcp.core import Failure, InvocationRequest, Success, ToolDispatcher
from greyhack_mcp.core.exceptions import UpstreamServiceError
from greyhack_mcp.greyhack import CodeSearchHandler, GitHubCodeSearchClient, build_search_query
from greyhack_mcp.greyhack.github import MISSING_TOKEN_MESSAGE, PermanentUpstreamError

from conftest import make_search_response


@pytest.mark.asyncio
async def test_results_are_truncated_but_total_count_is_upstream(dispatcher: ToolDispatcher) -> None:
    result = await dispatcher.dispatch(
        InvocationRequest(tool_name="search_greyhack_code", parameters={"query": "scanner", "max_results": 2})
    )

    assert isinstance(result, Success)
    assert len(result.data["results"]) == 2
    assert result.data["total_count"] == 10


@pytest.mark.asyncio
async def test_result_items_have_fixed_shape(dispatcher: ToolDispatcher) -> None:
    result = await dispatcher.dispatch(
        InvocationRequest(tool_name="search_greyhack_code", parameters={"query": "scanner", "max_results": 1})
    )

    assert isinstance(result, Success)
    assert result.data["results"][0] == {
        "name": "script0.gs",
        "path": "src/script0.gs",
        "repository": "owner/repo0",
        "url": "https://github.com/owner/repo0/blob/main/src/script0.gs",
        "content": None,
    }


def test_query_qualifiers_and_headers_are_sent(github_client: GitHubCodeSearchClient, mock_session: MagicMock) -> None:
    CodeSearchHandler(github_client)({"query": "ssh", "max_results": 3})

    args, kwargs = mock_session.get.call_args
    assert args[0] == "https://api.github.com/search/code"
    assert kwargs["params"]["q"] == "ssh language:greyscript OR language:js extension:.gs extension:.txt"
    assert kwargs["params"]["per_page"] == 3
    assert kwargs["headers"]["Authorization"] == "Bearer test-token"
    assert kwargs["timeout"] == github_client.timeout


def test_build_search_query() -> None:
    assert build_search_query("crack").startswith("crack language:greyscript")


@pytest.mark.asyncio
async def test_missing_token_is_a_failure_without_calling_github(
    dispatcher: ToolDispatcher, github_client: GitHubCodeSearchClient, mock_session: MagicMock
) -> None:
    github_client.token = None

    result = await dispatcher.dispatch(
        InvocationRequest(tool_name="search_greyhack_code", parameters={"query": "scanner"})
    )

    assert isinstance(result, Failure)
    assert MISSING_TOKEN_MESSAGE in result.message
    assert result.error_type == "UpstreamServiceError"
    mock_session.get.assert_not_called()


@pytest.mark.parametrize("blank", [None, "", "   "])
def test_blank_token_means_unauthenticated(blank: str) -> None:
    assert not GitHubCodeSearchClient(blank, session=MagicMock()).authenticated


@pytest.mark.asyncio
async def test_http_error_is_a_failure(dispatcher: ToolDispatcher, mock_session: MagicMock) -> None:
    response = make_search_response(0, 0, status_code=401)
    response.json.return_value = {"message": "Bad credentials"}
    mock_session.get.return_value = response

    result = await dispatcher.dispatch(
        InvocationRequest(tool_name="search_greyhack_code", parameters={"query": "scanner"})
    )

    assert isinstance(result, Failure)
    assert result.message == "Error searching GitHub: GitHub API 401: Bad credentials"


@pytest.mark.asyncio
async def test_upstream_timeout_is_a_failure(dispatcher: ToolDispatcher, mock_session: MagicMock) -> None:
    mock_session.get.side_effect = requests.Timeout("read timed out")

    result = await dispatcher.dispatch(
        InvocationRequest(tool_name="search_greyhack_code", parameters={"query": "scanner"})
    )

    assert isinstance(result, Failure)
    assert "timed out" in result.message
    assert result.message.startswith("Error searching GitHub:")


def test_transient_error_is_retried() -> None:
    session = MagicMock()
    session.get.side_effect = [make_search_response(0, 0, status_code=503), make_search_response(3, 3)]
    client = GitHubCodeSearchClient("token", max_retries=1, retry_delay=0.5, session=session)

    with patch("greyhack_mcp.greyhack.github.time.sleep") as mock_sleep:
        page = client.search_code("q")

    assert page.total_count == 3
    assert session.get.call_count == 2
    mock_sleep.assert_called_once_with(0.5)


def test_retries_are_exhausted() -> None:
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("connection refused")
    client = GitHubCodeSearchClient("token", max_retries=2, retry_delay=0.1, session=session)

    with patch("greyhack_mcp.greyhack.github.time.sleep") as mock_sleep:
        with pytest.raises(UpstreamServiceError, match="network error"):
            client.search_code("q")

    assert session.get.call_count == 3
    assert [c.args[0] for c in mock_sleep.call_args_list] == [0.1, 0.2]


def test_permanent_error_is_not_retried() -> None:
    session = MagicMock()
    response = make_search_response(0, 0, status_code=422)
    response.json.return_value = {"message": "Validation Failed"}
    session.get.return_value = response
    client = GitHubCodeSearchClient("token", max_retries=3, session=session)

    with pytest.raises(PermanentUpstreamError, match="422: Validation Failed"):
        client.search_code("q")

    assert session.get.call_count == 1


def test_invalid_json_is_an_upstream_error() -> None:
    session = MagicMock()
    response = MagicMock(status_code=200)
    response.json.side_effect = ValueError("no json")
    session.get.return_value = response
    client = GitHubCodeSearchClient("token", max_retries=0, session=session)

    with pytest.raises(UpstreamServiceError, match="not valid JSON"):
        client.search_code("q")


@pytest.mark.asyncio
async def test_non_object_json_is_a_search_failure(mock_session: MagicMock, dispatcher: ToolDispatcher) -> None:
    mock_session.get.return_value.json.return_value = [{"name": "script.gs"}]

    result = await dispatcher.dispatch(
        InvocationRequest(tool_name="search_greyhack_code", parameters={"query": "scanner"})
    )

    assert isinstance(result, Failure)
    assert result.error_type == "UpstreamServiceError"
    assert result.message == "Error searching GitHub: GitHub returned list instead of a search result object"
    assert mock_session.get.call_count == 1
