"""Grey Hack tool handlers and their declarations."""

from .catalog import build_definitions, build_registry
from .generate import SCRIPT_TYPES, generate_greyhack_script, render_script
from .github import CodeSearchItem, CodeSearchPage, GitHubCodeSearchClient
from .search import CodeSearchHandler, build_search_query
from .transpile import transpile_greyscript
from .validation import extract_api_calls, validate_greyscript, version_key

__all__ = [
    "build_definitions",
    "build_registry",
    "SCRIPT_TYPES",
    "generate_greyhack_script",
    "render_script",
    "CodeSearchItem",
    "CodeSearchPage",
    "GitHubCodeSearchClient",
    "CodeSearchHandler",
    "build_search_query",
    "transpile_greyscript",
    "extract_api_calls",
    "validate_greyscript",
    "version_key",
]
