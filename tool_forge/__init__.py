"""
tool_forge — declare a tool once, materialize it for several host frameworks.

Quick Start::

    import tool_forge
    import tool_forge.hosts.mcp

    def configure(t):
        t.description("Greets a user")
        t.param("name", type="string", description="User name")

        @t.execute
        def run(ctx, name):
            return f"Hello, {name}!"

    greeting = tool_forge.define("greeting_tool", configure)

    GreetingTool = greeting.to_mcp_tool()
    response = GreetingTool.call(server_context=None, name="Alice")
    # response.content == [{"type": "text", "text": "Hello, Alice!"}]
"""

__version__ = "0.1.0"

from tool_forge.definition import HelperMethods, ParamSpec, ToolDefinition, define
from tool_forge.errors import LoadConfigurationError, ToolForgeError
from tool_forge.core.config import ForgeConfig
from tool_forge.hosts import LLM_HOST, MCP_HOST, register_host, resolve_host, unregister_host

__all__ = [
    "__version__",
    "define",
    "ToolDefinition",
    "ParamSpec",
    "HelperMethods",
    "ToolForgeError",
    "LoadConfigurationError",
    "ForgeConfig",
    "LLM_HOST",
    "MCP_HOST",
    "register_host",
    "unregister_host",
    "resolve_host",
]
