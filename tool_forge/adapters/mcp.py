"""MCP host adapter — ToolDefinition → MCPTool subclass."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from tool_forge.adapters import class_name_for, helper_namespace, require_host
from tool_forge.core.config import ForgeConfig
from tool_forge.definition import ToolDefinition
from tool_forge.hosts import MCP_HOST

logger = logging.getLogger("tool_forge.adapters")

_JSON_KEY_TYPES = (str, int, float, bool, type(None))


def format_result(value: Any, indent: int = 2) -> str:
    """Encode an execute block result as the text of an MCP content block.

    Strings pass through, mappings and sequences become indented JSON,
    anything else goes through ``str()``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(_json_keys(value), indent=indent, ensure_ascii=False, default=str)
    return str(value)


def _json_keys(value: Any) -> Any:
    """Stringify mapping keys json cannot encode, at any depth."""
    if isinstance(value, Mapping):
        return {
            k if isinstance(k, _JSON_KEY_TYPES) else str(k): _json_keys(v)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_json_keys(v) for v in value]
    return value


def build_input_schema(
    definition: ToolDefinition,
) -> Tuple[Dict[str, Dict[str, Any]], List[str]]:
    """Return ``(properties, required)`` for *definition*'s params."""
    properties: Dict[str, Dict[str, Any]] = {}
    required: List[str] = []

    for spec in definition.params:
        prop: Dict[str, Any] = {"type": str(spec.type)}
        if spec.description:
            prop["description"] = spec.description
        properties[str(spec.name)] = prop
        if spec.required:
            required.append(str(spec.name))

    return properties, required


def to_mcp_tool(
    definition: ToolDefinition,
    base: Optional[type] = None,
    config: Optional[ForgeConfig] = None,
) -> type:
    """Materialize *definition* as a subclass of the MCP host base.

    The returned class exposes ``call(server_context=None, **kwargs)`` as a
    classmethod. Each call creates a fresh helper object carrying both
    helper kinds, runs ``definition.execute_block(helpers, **kwargs)`` and
    wraps the encoded result in ``base.Response``.

    Raises:
        LoadConfigurationError: If no MCP host is loaded and *base* is not given.
    """
    base = require_host(MCP_HOST, base, "MCP tool host", "tool_forge.hosts.mcp")
    indent = (config or ForgeConfig()).json_indent
    tool_name = str(definition.name)

    helper_cls = type(
        class_name_for(definition.name, "Helpers"),
        (object,),
        dict(helper_namespace(definition), __module__=__name__),
    )

    def call(cls: type, /, server_context: Any = None, **kwargs: Any) -> Any:
        block = definition.execute_block
        if block is None:
            raise RuntimeError(f"Tool {definition.name!r} has no execute block")
        logger.debug("MCP tool call: %s(%s)", tool_name, ", ".join(kwargs))
        result = block(helper_cls(), **kwargs)
        return cls.Response([{"type": "text", "text": format_result(result, indent)}])

    namespace: Dict[str, Any] = {
        "__module__": __name__,
        "__doc__": definition.description(),
        "definition": definition,
        "helper_class": helper_cls,
        "call": classmethod(call),
    }
    tool_cls = type(class_name_for(definition.name), (base,), namespace)

    properties, required = build_input_schema(definition)
    tool_cls.tool_name(tool_name)
    tool_cls.description(definition.description())
    tool_cls.input_schema(properties=properties, required=required)

    logger.debug(
        "Materialized MCP tool %s (properties=%s, required=%s)",
        tool_name,
        list(properties),
        required,
    )
    return tool_cls
