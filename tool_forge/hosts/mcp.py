"""
MCPTool — reference base class for the MCP tool host.

A subclass declares its description and input schema at class level and
implements ``call`` as a classmethod returning a :class:`Response`.
``to_dict()`` renders the entry served by MCP ``tools/list``.

Importing this module registers :class:`MCPTool` as the ``"mcp"`` host.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tool_forge.hosts import MCP_HOST, _snake_case, register_host


# ──────────────────────────────────────────────
# Protocol types
# ──────────────────────────────────────────────


@dataclass
class InputSchema:
    """JSON Schema describing a tool's arguments."""

    properties: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    required: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": self.properties,
            "required": self.required,
        }


@dataclass
class Response:
    """Result of MCP ``tools/call``.

    Attributes:
        content: Content blocks, e.g. ``[{"type": "text", "text": "..."}]``.
        is_error: Whether the tool reported an error.
    """

    content: List[Dict[str, Any]] = field(default_factory=list)
    is_error: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content, "isError": self.is_error}


# ──────────────────────────────────────────────
# MCPTool
# ──────────────────────────────────────────────


class MCPTool:
    """Base class for tools served over MCP."""

    Response = Response

    _name: Optional[str] = None
    _description: Optional[str] = None
    _input_schema: Optional[InputSchema] = None

    @classmethod
    def tool_name(cls, name: Optional[str] = None) -> Optional[str]:
        """Return the tool name, or set it when *name* is given."""
        if name is None:
            return cls.__dict__.get("_name") or _snake_case(cls.__name__)
        cls._name = name
        return None

    @classmethod
    def description(cls, text: Optional[str] = None) -> Optional[str]:
        """Return the description, or set it when *text* is given."""
        if text is None:
            return cls.__dict__.get("_description")
        cls._description = text
        return None

    @classmethod
    def input_schema(
        cls,
        properties: Optional[Dict[str, Dict[str, Any]]] = None,
        required: Optional[List[str]] = None,
    ) -> Optional[InputSchema]:
        """Return the input schema, or declare it when arguments are given."""
        if properties is None and required is None:
            return cls.__dict__.get("_input_schema") or InputSchema()
        cls._input_schema = InputSchema(
            properties=dict(properties or {}),
            required=list(required or []),
        )
        return None

    @classmethod
    def call(cls, /, server_context: Any = None, **kwargs: Any) -> Response:
        raise NotImplementedError(f"{cls.__name__} must implement call()")

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        """Render the ``tools/list`` entry for this tool."""
        return {
            "name": cls.tool_name(),
            "description": cls.description() or "",
            "inputSchema": cls.input_schema().to_dict(),
        }


register_host(MCP_HOST, MCPTool)
