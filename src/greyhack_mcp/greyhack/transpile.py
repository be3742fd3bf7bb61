"""The ``transpile_greyscript`` tool.

There is no GreyScript to JavaScript translation yet. The tool answers with a
fixed placeholder program and flags the result with ``implemented: False``.
"""

from typing import Any, Dict

from greyhack_mcp.core.logger import get_logger

logger = get_logger(__name__)

_PLACEHOLDER = """// Transpiled from GreyScript to JavaScript
function main() {{
  // Transpiled code would go here
  console.log("Transpiled code from GreyScript");
  // Original code length: {length} characters
}}

main();"""


def transpile_greyscript(params: Dict[str, Any]) -> Dict[str, Any]:
    """Transpile GreyScript code to JavaScript using Greybel-JS"""
    code: str = params["code"]
    logger.warning("transpile_greyscript is not implemented yet; returning placeholder output.")
    return {
        "original": code,
        "transpiled": _PLACEHOLDER.format(length=len(code)),
        "success": True,
        "implemented": False,
    }
