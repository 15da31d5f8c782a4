"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``htmltext`` namespace.
    - Allow an optional verbose mode for the command line.

Notes/Edge cases:
    - Library modules never configure handlers themselves; the package root
      carries a ``NullHandler`` so embedding applications stay in control.
    - :func:`configure_logging` is idempotent.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "htmltext"
_HANDLER_FLAG = "_htmltext_cli_handler"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package namespace."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Repeated calls only adjust the level and rebind the handler to the
    current ``sys.stderr``.
    """

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for h in root.handlers:
        if getattr(h, _HANDLER_FLAG, False) and isinstance(h, logging.StreamHandler):
            h.setStream(sys.stderr)
            return root
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    setattr(handler, _HANDLER_FLAG, True)
    root.addHandler(handler)
    return root


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
