"""
tool_forge configuration.

Built in code or loaded from environment variables (.env supported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _to_int(value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class ForgeConfig:
    """Adapter and logging settings.

    Attributes:
        json_indent: Indent used when MCP results are encoded as JSON.
        debug: Enable DEBUG logging in :func:`tool_forge.utils.logger.setup_logging`.
        log_file: Optional log file path.
    """

    json_indent: int = 2
    debug: bool = False
    log_file: str = ""

    @classmethod
    def from_env(cls, env_file: str = ".env") -> ForgeConfig:
        """
        Load settings from a .env file and the environment.

        Environment variables take precedence over the .env file.
        """
        load_dotenv(env_file, override=False)

        return cls(
            json_indent=_to_int(os.getenv("TOOL_FORGE_JSON_INDENT"), 2),
            debug=_to_bool(os.getenv("TOOL_FORGE_DEBUG")),
            log_file=os.getenv("TOOL_FORGE_LOG_FILE", "").strip(),
        )

    def summary(self) -> str:
        """Return a one-line summary of the configuration."""
        return (
            f"JSON indent: {self.json_indent} | "
            f"Debug: {'on' if self.debug else 'off'} | "
            f"Log file: {self.log_file or 'stderr only'}"
        )
