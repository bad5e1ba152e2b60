"""LLM host adapter — ToolDefinition → LLMTool subclass."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from tool_forge.adapters import class_name_for, helper_namespace, require_host
from tool_forge.definition import ToolDefinition
from tool_forge.hosts import LLM_HOST

logger = logging.getLogger("tool_forge.adapters")


def to_llm_tool(definition: ToolDefinition, base: Optional[type] = None) -> type:
    """Materialize *definition* as a subclass of the LLM host base.

    - The description is snapshotted at adapt time.
    - Params are declared in order with name, type and description only;
      ``required`` and ``default`` are not forwarded.
    - Instance helpers become instance methods, class-scope helpers
      static methods.
    - Helpers named like an attribute of the host API are skipped with a
      WARNING so the class-level declarations keep working.
    - ``execute(**kwargs)`` runs ``definition.execute_block(self, **kwargs)``
      and returns its result unchanged.

    Raises:
        LoadConfigurationError: If no LLM host is loaded and *base* is not given.
    """
    base = require_host(LLM_HOST, base, "LLM tool host", "tool_forge.hosts.llm")

    def execute(self: Any, /, **kwargs: Any) -> Any:
        block = definition.execute_block
        if block is None:
            raise RuntimeError(f"Tool {definition.name!r} has no execute block")
        return block(self, **kwargs)

    reserved = {attr for attr in dir(base) if not attr.startswith("__")}
    reserved.update(("execute", "definition"))
    namespace: Dict[str, Any] = helper_namespace(definition, reserved)
    namespace.update(
        {
            "__module__": __name__,
            "__doc__": definition.description(),
            "definition": definition,
            "execute": execute,
        }
    )
    tool_cls = type(class_name_for(definition.name), (base,), namespace)

    tool_cls.tool_name(str(definition.name))
    tool_cls.description(definition.description())
    for spec in definition.params:
        tool_cls.param(spec.name, type=spec.type, desc=spec.description)

    logger.debug(
        "Materialized LLM tool %s (%d params, %d helpers)",
        definition.name,
        len(definition.params),
        len(definition.helper_methods.instance) + len(definition.helper_methods.class_scope),
    )
    return tool_cls
