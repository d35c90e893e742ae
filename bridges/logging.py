"""Logging for the graph engine.

Diagnostics from every module go to loggers under ``bridges``. Announcements
meant for the person at the editor (algorithm results, unmet preconditions)
go to the ``bridges.announce`` child logger, so a host application can route
them to a dialog while diagnostics stay on the console.

Example:
    >>> import logging
    >>> from bridges.logging import setup_root_logger
    >>> setup_root_logger(level=logging.DEBUG)  # show algorithm progress
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "bridges"
ANNOUNCE_LOGGER_NAME = f"{ROOT_LOGGER_NAME}.announce"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by setup_root_logger; None until the first call
_handler: Optional[logging.Handler] = None


def setup_root_logger(
    level: int = logging.INFO,
    handler: Optional[logging.Handler] = None,
    format_string: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Install the package handler on the ``bridges`` logger.

    Without ``handler``, a repeated call keeps the existing handler and only
    updates the level. Passing a handler replaces the one installed before.

    Args:
        level: Level of the ``bridges`` logger.
        handler: Destination for records; a stdout stream handler by default.
        format_string: Format applied to ``handler``.

    Returns:
        The ``bridges`` logger.
    """
    global _handler

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    if _handler is not None and handler is None:
        return root

    if _handler is not None:
        root.removeHandler(_handler)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string))
    root.addHandler(handler)
    _handler = handler
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger placed under the ``bridges`` hierarchy.

    Names outside the hierarchy are prefixed, so ``get_logger("ui")`` yields
    ``bridges.ui``.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the ``bridges`` logger and its package handler."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
    if _handler is not None:
        _handler.setLevel(level)


def log_notifier(title: str, message: str) -> None:
    """Default graph notifier: log the announcement at INFO.

    The record carries ``title`` and ``body`` attributes for handlers that
    present announcements separately.
    """
    logging.getLogger(ANNOUNCE_LOGGER_NAME).info(
        "%s: %s", title, message, extra={"title": title, "body": message}
    )


setup_root_logger()
