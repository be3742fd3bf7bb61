"""Data models for a single tool invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Optional, Union


@dataclass(frozen=True)
class InvocationRequest:
    """A request to run ``tool_name`` with ``parameters``."""

    tool_name: str
    parameters: Mapping[str, Any] = field(default_factory=dict)
    call_id: Optional[str] = None


@dataclass(frozen=True)
class Success:
    """The handler completed and produced ``data``."""

    tool_name: str
    data: Dict[str, Any]
    call_id: Optional[str] = None

    ok: ClassVar[bool] = True

    def to_payload(self) -> Dict[str, Any]:
        return self.data


@dataclass(frozen=True)
class Failure:
    """The handler failed. ``message`` is meant for the caller, ``error_type`` names the error class."""

    tool_name: str
    message: str
    error_type: str = "ToolExecutionError"
    call_id: Optional[str] = None

    ok: ClassVar[bool] = False

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


InvocationResult = Union[Success, Failure]
