"""Global logger configuration for the cons_core project."""

import logging
import sys
from typing import Optional

from ..settings import LOG_LEVEL

__all__ = ["logger", "setup_logger"]

_FALLBACK_LEVEL = logging.WARNING


def _resolve_level(level: str) -> int:
    """Nombre de nivel -> entero; nombres desconocidos caen a WARNING."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else _FALLBACK_LEVEL


def setup_logger(
    name: str = "cons_core",
    level: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Configure and return a logger instance with a stdout handler.

    Opt-in: the library itself never calls this at import time, so the
    host application's logging configuration stays in charge.

    Args:
        name: Logger name (typically project name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(level))
        logger.propagate = False

    return logger


# Library default: silent unless the host configures logging
logger = logging.getLogger("cons_core")
logger.addHandler(logging.NullHandler())
