"""Declarations of the four Grey Hack tools and the registry that serves them."""

from typing import List, Optional

from greyhack_mcp.core import Settings, ToolDefinition, ToolParameter, ToolRegistry
from greyhack_mcp.core.logger import get_logger
from .generate import DEFAULT_GAME_VERSION, SCRIPT_TYPES, generate_greyhack_script
from .github import GitHubCodeSearchClient
from .search import DEFAULT_MAX_RESULTS, CodeSearchHandler
from .transpile import transpile_greyscript
from .validation import DEFAULT_VERSION, validate_greyscript

logger = get_logger(__name__)


def build_definitions(settings: Settings, client: Optional[GitHubCodeSearchClient] = None) -> List[ToolDefinition]:
    """Creates the tool definitions in the order they are listed to clients.

    Args:
        settings: Server settings, used to configure the GitHub client.
        client: Optional prebuilt GitHub client, mainly for tests.
    """
    if client is None:
        client = GitHubCodeSearchClient(
            settings.github_token,
            base_url=settings.github_api_url,
            timeout=settings.github_timeout,
            max_retries=settings.github_max_retries,
            retry_delay=settings.github_retry_delay,
        )
    if not client.authenticated:
        logger.warning("GITHUB_TOKEN is not set; search_greyhack_code will fail until it is provided.")

    return [
        ToolDefinition(
            name="search_greyhack_code",
            description="Search for Grey Hack code examples on GitHub",
            func=CodeSearchHandler(client),
            parameters=(
                ToolParameter(
                    name="query",
                    type="string",
                    description="The search query for finding Grey Hack code",
                    required=True,
                ),
                ToolParameter(
                    name="max_results",
                    type="integer",
                    description="Maximum number of results to return",
                    default=DEFAULT_MAX_RESULTS,
                ),
            ),
        ),
        ToolDefinition(
            name="transpile_greyscript",
            description="Transpile GreyScript code to JavaScript using Greybel-JS",
            func=transpile_greyscript,
            parameters=(
                ToolParameter(
                    name="code",
                    type="string",
                    description="The GreyScript code to transpile",
                    required=True,
                ),
            ),
        ),
        ToolDefinition(
            name="validate_greyscript",
            description="Validate GreyScript code against the official API documentation",
            func=validate_greyscript,
            parameters=(
                ToolParameter(
                    name="code",
                    type="string",
                    description="The GreyScript code to validate",
                    required=True,
                ),
                ToolParameter(
                    name="version",
                    type="string",
                    description="The Grey Hack game version to validate against",
                    default=DEFAULT_VERSION,
                ),
            ),
        ),
        ToolDefinition(
            name="generate_greyhack_script",
            description="Generate a GreyScript code template for common Grey Hack game tasks",
            func=generate_greyhack_script,
            parameters=(
                ToolParameter(
                    name="script_type",
                    type="string",
                    description="The type of script to generate",
                    required=True,
                    enum=SCRIPT_TYPES,
                ),
                ToolParameter(
                    name="custom_description",
                    type="string",
                    description="Description of the custom script to generate (only used if script_type is 'custom')",
                ),
                ToolParameter(
                    name="game_version",
                    type="string",
                    description="The Grey Hack game version to target",
                    default=DEFAULT_GAME_VERSION,
                ),
            ),
        ),
    ]


def build_registry(
    settings: Settings,
    client: Optional[GitHubCodeSearchClient] = None,
    registry: Optional[ToolRegistry] = None,
) -> ToolRegistry:
    """Registers every Grey Hack tool and freezes the registry.

    Args:
        settings: Server settings.
        client: Optional prebuilt GitHub client.
        registry: Registry to fill. Defaults to a new ``MCPToolRegistry``.
    """
    if registry is None:
        from greyhack_mcp.server.registry import MCPToolRegistry

        registry = MCPToolRegistry()

    for definition in build_definitions(settings, client):
        registry.register(definition)
    registry.freeze()
    return registry
