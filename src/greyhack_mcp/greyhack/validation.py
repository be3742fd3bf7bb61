"""The ``validate_greyscript`` tool: a substring scan against a small API table."""

import re
from typing import Any, Dict, List, Tuple

DEFAULT_VERSION = "0.8.0"

KNOWN_APIS: Tuple[str, ...] = ("get_router", "get_shell", "get_file", "get_folders", "get_files", "nslookup")

# name -> (version it was deprecated in, replacement)
DEPRECATED_APIS: Dict[str, Tuple[str, str]] = {
    "get_connect_ip": ("0.8.0", "get_router"),
}

INVALID_SYMBOLS: Tuple[str, ...] = ("unknown_function",)

_LEADING_DIGITS = re.compile(r"\d+")


def version_key(version: str) -> Tuple[int, ...]:
    """Turns a dotted version string into a tuple of integers.

    Each component contributes its leading digits, or 0 when it has none, so
    "0.10.0" sorts after "0.8.0" and "1.0-beta" reads as (1, 0).
    """
    key = []
    for part in version.strip().lstrip("vV").split("."):
        match = _LEADING_DIGITS.match(part)
        key.append(int(match.group()) if match else 0)
    while len(key) > 1 and key[-1] == 0:
        key.pop()
    return tuple(key)


def version_at_least(version: str, minimum: str) -> bool:
    return version_key(version) >= version_key(minimum)


def extract_api_calls(code: str) -> List[str]:
    """Returns the known API names that occur in ``code``, in table order."""
    return [api for api in KNOWN_APIS if api in code]


def validate_greyscript(params: Dict[str, Any]) -> Dict[str, Any]:
    """Validate GreyScript code against the official API documentation"""
    code: str = params["code"]
    version: str = params.get("version", DEFAULT_VERSION)

    warnings: List[str] = []
    errors: List[str] = []

    for name, (since, replacement) in DEPRECATED_APIS.items():
        if name in code and version_at_least(version, since):
            warnings.append(f"{name} is deprecated in version {since}+, use {replacement} instead")

    for name in INVALID_SYMBOLS:
        if name in code:
            errors.append(f"{name} is not a valid API function")

    return {
        "valid": not warnings and not errors,
        "warnings": warnings,
        "errors": errors,
        "api_calls": extract_api_calls(code),
    }
