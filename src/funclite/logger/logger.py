"""Package-wide logging for funclite.

A single stdout handler is attached to the ``funclite`` logger; modules log
through children of it obtained with ``get_logger(__name__)``. Level and
format defaults come from ``funclite.core.config.settings``.
"""

import logging
import sys

from funclite.core.config import settings

__all__ = ["logger", "setup_logger", "get_logger"]

ROOT_NAME = "funclite"


def setup_logger(
    name: str = ROOT_NAME,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Attach a stdout handler to ``name`` unless it already has one.

    Args:
        name: Logger name.
        level: Level name, defaults to ``settings.LOG_LEVEL``.
        format_string: ``logging.Formatter`` format, defaults to
            ``settings.LOG_FORMAT``.

    Returns:
        The configured logger. Repeated calls return it untouched.
    """
    configured = logging.getLogger(name)
    if configured.handlers:
        return configured

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt=format_string or settings.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    configured.addHandler(handler)
    configured.setLevel((level or settings.LOG_LEVEL).upper())
    configured.propagate = False
    return configured


def get_logger(module_name: str) -> logging.Logger:
    """Child of the package logger for ``module_name`` (usually ``__name__``)."""
    if module_name == ROOT_NAME or module_name.startswith(ROOT_NAME + "."):
        return logging.getLogger(module_name)
    return logger.getChild(module_name)


logger = setup_logger()
