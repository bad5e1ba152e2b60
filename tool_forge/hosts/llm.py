"""
LLMTool — reference base class for the LLM function-calling host.

Subclasses declare their metadata with class-level calls and override
``execute``::

    class Weather(LLMTool):
        pass

    Weather.description("Current weather for a city")
    Weather.param("city", type="string", desc="City name")

Importing this module registers :class:`LLMTool` as the ``"llm"`` host.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from tool_forge.hosts import LLM_HOST, _snake_case, register_host

logger = logging.getLogger("tool_forge.hosts")


@dataclass
class ToolParameter:
    """A parameter declared on an :class:`LLMTool` subclass."""

    name: str
    type: str = "string"
    description: Optional[str] = None
    required: bool = True


class LLMTool:
    """Base class for tools exposed to an LLM."""

    _name: Optional[str] = None
    _description: Optional[str] = None
    _parameters: Dict[str, ToolParameter] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._parameters = dict(cls._parameters)

    # ─── Class-level declarations ───

    @classmethod
    def tool_name(cls, name: Optional[str] = None) -> Optional[str]:
        """Return the tool name, or set it when *name* is given.

        Defaults to the snake_cased class name.
        """
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
    def param(
        cls,
        name: str,
        type: str = "string",
        desc: Optional[str] = None,
        required: bool = True,
    ) -> None:
        """Declare a parameter."""
        cls._parameters[str(name)] = ToolParameter(
            name=str(name),
            type=type,
            description=desc,
            required=required,
        )

    @classmethod
    def parameters(cls) -> Dict[str, ToolParameter]:
        """Return the declared parameters in declaration order."""
        return dict(cls._parameters)

    # ─── Execution ───

    def execute(self, /, **kwargs: Any) -> Any:
        raise NotImplementedError(f"{type(self).__name__} must implement execute()")

    def call(self, args: Optional[Mapping[str, Any]] = None) -> Any:
        """Dispatch a mapping of arguments (e.g. from a tool call) to ``execute``."""
        call_args = {str(k): v for k, v in (args or {}).items()}
        logger.debug("Tool %s called with: %r", self.tool_name(), call_args)
        result = self.execute(**call_args)
        logger.debug("Tool %s returned: %r", self.tool_name(), result)
        return result

    # ─── Schema export ───

    @classmethod
    def to_json_schema(cls) -> Dict[str, Any]:
        """Export this tool as a JSON Schema object."""
        properties: Dict[str, Any] = {}
        required = []

        for p in cls._parameters.values():
            prop: Dict[str, Any] = {"type": str(p.type)}
            if p.description:
                prop["description"] = p.description
            properties[p.name] = prop
            if p.required:
                required.append(p.name)

        schema: Dict[str, Any] = {
            "name": cls.tool_name(),
            "description": cls.description() or "",
            "parameters": {
                "type": "object",
                "properties": properties,
            },
        }
        if required:
            schema["parameters"]["required"] = required

        return schema

    @classmethod
    def to_openai_schema(cls) -> Dict[str, Any]:
        """Export in OpenAI function calling format.

        Returns::

            {
                "type": "function",
                "function": { "name": ..., "description": ..., "parameters": ... }
            }
        """
        return {
            "type": "function",
            "function": cls.to_json_schema(),
        }


register_host(LLM_HOST, LLMTool)
