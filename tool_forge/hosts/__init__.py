"""
Host registry — which target frameworks are loaded in this process.

A host is *loaded* when a base class is registered under its kind.
Importing :mod:`tool_forge.hosts.llm` or :mod:`tool_forge.hosts.mcp`
registers the bundled reference bases; any class satisfying the same
contract can be registered instead.

Usage::

    import tool_forge.hosts.mcp  # registers MCPTool under "mcp"

    from tool_forge.hosts import resolve_host, MCP_HOST
    base = resolve_host(MCP_HOST)
"""

from __future__ import annotations

import logging
import re
from typing import Dict, Optional

logger = logging.getLogger("tool_forge.hosts")

LLM_HOST = "llm"
MCP_HOST = "mcp"

# None marks a host as absent.
_HOSTS: Dict[str, Optional[type]] = {}


def _snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def register_host(kind: str, base: Optional[type]) -> None:
    """Register *base* as the tool base class for host *kind*."""
    previous = _HOSTS.get(kind)
    if previous is not None and previous is not base:
        logger.warning("Host %r already registered (%s), overwriting", kind, previous.__name__)
    _HOSTS[kind] = base
    logger.debug("Host registered: %s -> %s", kind, getattr(base, "__name__", base))


def unregister_host(kind: str) -> None:
    """Remove the base class registered for *kind*, if any."""
    _HOSTS.pop(kind, None)


def resolve_host(kind: str) -> Optional[type]:
    """Return the base class for *kind*, or ``None`` if it is not loaded."""
    return _HOSTS.get(kind)


__all__ = [
    "LLM_HOST",
    "MCP_HOST",
    "register_host",
    "unregister_host",
    "resolve_host",
]
