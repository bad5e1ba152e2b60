"""Exceptions raised by tool_forge."""

from __future__ import annotations


class ToolForgeError(Exception):
    """Base class for all tool_forge errors."""


class LoadConfigurationError(ToolForgeError, ImportError):
    """Raised at adapt time when a target host framework is not loaded.

    Attributes:
        host: Kind of the missing host (``"llm"`` or ``"mcp"``).
    """

    def __init__(self, host: str, message: str) -> None:
        self.host = host
        super().__init__(message)
