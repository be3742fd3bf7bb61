"""The ``generate_greyhack_script`` tool."""

from string import Template
from typing import Any, Dict, NamedTuple, Optional

from greyhack_mcp.core.exceptions import InvalidScriptType
from . import templates

DEFAULT_GAME_VERSION = "0.8.0"


class ScriptKind(NamedTuple):
    description: str
    template: Template


SCRIPT_KINDS: Dict[str, ScriptKind] = {
    "port_scanner": ScriptKind("A port scanner for network reconnaissance", templates.PORT_SCANNER),
    "password_cracker": ScriptKind("A password cracking utility", templates.PASSWORD_CRACKER),
    "file_browser": ScriptKind("A file browser utility", templates.FILE_BROWSER),
    "ssh_tool": ScriptKind("An SSH connection tool", templates.SSH_TOOL),
}

SCRIPT_TYPES = (*SCRIPT_KINDS, "custom")


def render_script(script_type: str, game_version: str, custom_description: Optional[str] = None) -> str:
    """Renders the template for ``script_type``.

    Raises:
        InvalidScriptType: If ``script_type`` is not one of ``SCRIPT_TYPES``.
    """
    if script_type == "custom":
        return templates.CUSTOM.substitute(
            version=game_version,
            header=custom_description or "Custom script template",
            description=custom_description or "No description provided",
        )
    try:
        kind = SCRIPT_KINDS[script_type]
    except KeyError:
        raise InvalidScriptType("Invalid script type specified") from None
    return kind.template.substitute(version=game_version)


def generate_greyhack_script(params: Dict[str, Any]) -> Dict[str, Any]:
    """Generate a GreyScript code template for common Grey Hack game tasks"""
    script_type: str = params["script_type"]
    custom_description: Optional[str] = params.get("custom_description")
    game_version: str = params.get("game_version", DEFAULT_GAME_VERSION)

    code = render_script(script_type, game_version, custom_description)
    if script_type == "custom":
        description = custom_description or "Custom script"
    else:
        description = SCRIPT_KINDS[script_type].description

    return {
        "script_type": script_type,
        "description": description,
        "code": code,
        "game_version": game_version,
    }
