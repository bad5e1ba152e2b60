"""
ToolDefinition — framework-agnostic tool declaration and builder DSL.

A definition is configured once and then adapted any number of times
into host-specific tool classes (see :mod:`tool_forge.adapters`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from tool_forge.core.config import ForgeConfig

logger = logging.getLogger("tool_forge.definition")


# ──────────────────────────────────────────────
# ParamSpec
# ──────────────────────────────────────────────


@dataclass
class ParamSpec:
    """Description of a single tool parameter.

    ``type`` is stored verbatim (``"string"``, ``"integer"``, ``"boolean"``,
    ``"number"``, ``"array"``, ``"object"`` or anything else the caller
    passes). ``default`` is informational only; no adapter substitutes it.
    """

    name: str
    type: str = "string"
    description: Optional[str] = None
    required: bool = True
    default: Any = None


# ──────────────────────────────────────────────
# HelperMethods
# ──────────────────────────────────────────────


@dataclass
class HelperMethods:
    """Named helper callables available to the execute block.

    Attributes:
        instance: Helpers bound to the execution context. Each receives
            the context as its first argument.
        class_scope: Helpers without instance context, reached through
            ``type(ctx)`` inside the execute block.
    """

    instance: Dict[str, Callable] = field(default_factory=dict)
    class_scope: Dict[str, Callable] = field(default_factory=dict)


# ──────────────────────────────────────────────
# ToolDefinition
# ──────────────────────────────────────────────


class ToolDefinition:
    """Declarative description of a tool.

    Usage::

        def configure(t):
            t.description("Greets a user")
            t.param("name", type="string", description="User name")

            @t.execute
            def run(ctx, name):
                return f"Hello, {name}!"

        greeting = ToolDefinition("greeting_tool", configure)
    """

    def __init__(
        self,
        name: str,
        configure: Optional[Callable[["ToolDefinition"], Any]] = None,
    ) -> None:
        self._name = name
        self._description: Optional[str] = None
        self._params: List[ParamSpec] = []
        self._execute_block: Optional[Callable] = None
        self._helper_methods = HelperMethods()

        if configure is not None:
            configure(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def params(self) -> List[ParamSpec]:
        return self._params

    @property
    def execute_block(self) -> Optional[Callable]:
        return self._execute_block

    @property
    def helper_methods(self) -> HelperMethods:
        return self._helper_methods

    # ─── DSL ───

    def description(self, text: Optional[str] = None) -> Optional[str]:
        """Return the description, or set it when *text* is given."""
        if text is None:
            return self._description
        self._description = text
        return None

    def param(
        self,
        name: str,
        type: str = "string",
        description: Optional[str] = None,
        required: bool = True,
        default: Any = None,
    ) -> ParamSpec:
        """Declare a parameter. Declaration order is preserved."""
        if any(p.name == name for p in self._params):
            logger.warning("Tool %r: parameter %r declared more than once", self._name, name)
        spec = ParamSpec(
            name=name,
            type=type,
            description=description,
            required=required,
            default=default,
        )
        self._params.append(spec)
        return spec

    def execute(self, block: Callable) -> Callable:
        """Store the execution block. The last declaration wins.

        The block is called as ``block(ctx, **args)`` where ``ctx`` exposes
        the instance helpers. Returns *block* so this works as a decorator.
        """
        if self._execute_block is not None:
            logger.debug("Tool %r: execute block replaced", self._name)
        self._execute_block = block
        return block

    def helper(self, method_name: str, block: Optional[Callable] = None) -> Any:
        """Register an instance helper ``block(ctx, *args, **kwargs)``.

        Without *block*, returns a decorator.
        """
        if block is None:
            def decorator(fn: Callable) -> Callable:
                return self.helper(method_name, fn)
            return decorator

        self._helper_methods.instance[method_name] = block
        return block

    def class_helper(self, method_name: str, block: Optional[Callable] = None) -> Any:
        """Register a class-scope helper ``block(*args, **kwargs)``.

        Without *block*, returns a decorator.
        """
        if block is None:
            def decorator(fn: Callable) -> Callable:
                return self.class_helper(method_name, fn)
            return decorator

        self._helper_methods.class_scope[method_name] = block
        return block

    # ─── Adapters ───

    def to_llm_tool(self, base: Optional[type] = None) -> type:
        """Materialize as an LLM host tool class. See :func:`tool_forge.adapters.llm.to_llm_tool`."""
        from tool_forge.adapters.llm import to_llm_tool

        return to_llm_tool(self, base=base)

    def to_mcp_tool(
        self,
        base: Optional[type] = None,
        config: Optional["ForgeConfig"] = None,
    ) -> type:
        """Materialize as an MCP host tool class. See :func:`tool_forge.adapters.mcp.to_mcp_tool`."""
        from tool_forge.adapters.mcp import to_mcp_tool

        return to_mcp_tool(self, base=base, config=config)

    def __repr__(self) -> str:
        return f"ToolDefinition(name={self._name!r}, params={[p.name for p in self._params]!r})"


def define(
    name: str,
    configure: Optional[Callable[[ToolDefinition], Any]] = None,
) -> ToolDefinition:
    """Create a :class:`ToolDefinition`, running *configure* on it."""
    return ToolDefinition(name, configure)
