"""
Logging setup for tool_forge.

Standard ``logging`` configuration for applications that build tools with
tool_forge.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from tool_forge.core.config import ForgeConfig


def setup_logging(
    level: int = logging.INFO,
    log_file: str = "",
    debug: bool = False,
    config: Optional[ForgeConfig] = None,
) -> logging.Logger:
    """
    Configure root logging.

    Args:
        level: Default log level.
        log_file: Log file path (empty for terminal only).
        debug: Force DEBUG level.
        config: Optional :class:`ForgeConfig`; its ``debug`` and ``log_file``
            override the matching arguments when set.

    Returns:
        The ``tool_forge`` logger.
    """
    if config is not None:
        debug = debug or config.debug
        log_file = log_file or config.log_file

    if debug:
        level = logging.DEBUG

    log_format = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

    logging.basicConfig(level=level, format=log_format, force=True)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        fh = RotatingFileHandler(
            log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        fh.setFormatter(logging.Formatter(log_format))
        fh.setLevel(logging.INFO)
        logging.getLogger().addHandler(fh)

    return logging.getLogger("tool_forge")
