"""
Adapters — materialize a :class:`~tool_forge.definition.ToolDefinition`
as a host-specific tool class.

- :func:`tool_forge.adapters.llm.to_llm_tool` — LLM function-calling host.
- :func:`tool_forge.adapters.mcp.to_mcp_tool` — MCP host.
"""

from __future__ import annotations

import functools
import logging
from typing import AbstractSet, Any, Callable, Dict, Optional

from tool_forge.errors import LoadConfigurationError
from tool_forge.hosts import resolve_host

logger = logging.getLogger("tool_forge.adapters")


def require_host(kind: str, base: Optional[type], label: str, module: str) -> type:
    """Return the injected *base* or the registered host for *kind*.

    Raises:
        LoadConfigurationError: If neither is available.
    """
    if base is None:
        base = resolve_host(kind)
    if base is None:
        raise LoadConfigurationError(
            kind,
            f"{label} is not loaded. Please import {module!r} "
            f"or register a base class with register_host({kind!r}, ...) first.",
        )
    return base


def class_name_for(name: Any, suffix: str = "") -> str:
    """``"greeting_tool"`` -> ``"GreetingTool"``."""
    parts = [p for p in str(name).replace("-", "_").split("_") if p]
    return "".join(p[:1].upper() + p[1:] for p in parts) + suffix or "Tool"


def helper_namespace(
    definition: Any,
    reserved: AbstractSet[str] = frozenset(),
) -> Dict[str, Callable]:
    """Build the name -> callable table for a definition's helpers.

    Instance helpers are wrapped so they receive the instance first;
    class-scope helpers become static methods. Helpers whose name is in
    *reserved* would shadow the host API, so they are left out and logged.
    """
    helpers = definition.helper_methods
    namespace: Dict[str, Any] = {}
    for method_name, block in helpers.instance.items():
        namespace[method_name] = _instance_method(block)
    for method_name, block in helpers.class_scope.items():
        namespace[method_name] = staticmethod(block)

    for method_name in sorted(set(reserved).intersection(namespace)):
        logger.warning(
            "Tool %r: helper %r collides with the host API and is not installed",
            definition.name,
            method_name,
        )
        del namespace[method_name]
    return namespace


def _instance_method(block: Callable) -> Callable:
    @functools.wraps(block)
    def method(self: Any, /, *args: Any, **kwargs: Any) -> Any:
        return block(self, *args, **kwargs)

    return method
