"""Mini README: Application-wide logging helpers for Pocketledger.

Structure:
    * get_logger - returns module loggers, installing the shared handler lazily.
    * configure_root_logger - installs the handler once and applies a level.

Usage:
    Modules call ``get_logger(__name__)`` at import time. That only installs
    the stream handler; it never decides the level. Entry points (the CLI and
    the application factory) call ``configure_root_logger`` with the level from
    settings, and that level wins no matter how many loggers were created
    before. Repeated calls never stack duplicate handlers, which matters under
    the uvicorn reloader and in test sessions.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

DEFAULT_LEVEL = logging.INFO
_HANDLER: Optional[logging.Handler] = None


def _resolve_level(level: Union[int, str]) -> int:
    """Accept numeric levels or names such as ``"debug"``."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def _install_handler(root_logger: logging.Logger) -> None:
    global _HANDLER
    if _HANDLER is not None:
        return

    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(_HANDLER)
    root_logger.setLevel(DEFAULT_LEVEL)


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Install the shared handler and, when given, apply ``level`` to the root logger."""

    root_logger = logging.getLogger()
    _install_handler(root_logger)
    if level is not None:
        root_logger.setLevel(_resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger; the root level is left untouched."""

    _install_handler(logging.getLogger())
    return logging.getLogger(name)
