"""Logging setup for the numwords command line.

Library modules only ever call ``logging.getLogger(__name__)``. Handlers are
installed on the ``numwords`` logger by ``configure_logging`` and nowhere
else; the root logger is left to the application.

Example:
    >>> from numwords.log import configure_logging
    >>> configure_logging("DEBUG")
    >>> numwords.cardinal(21, "fi")   # DEBUG lines go to stderr
"""

from __future__ import annotations

import logging
import sys
import threading

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "numwords"

PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_handler: logging.Handler | None = None
_lock = threading.Lock()


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{level}'")
    return resolved


def configure_logging(level: str | int = "WARNING", *, rich_output: bool = True) -> logging.Logger:
    """Configure the ``numwords`` logger.

    Calling it again replaces the handler installed by the previous call,
    so repeated calls never duplicate output.

    Args:
        level: Level name or number.
        rich_output: Use a rich handler; otherwise a plain stream handler.

    Returns:
        The ``numwords`` logger.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    global _handler

    numeric = _resolve_level(level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    with _lock:
        if _handler is not None:
            package_logger.removeHandler(_handler)

        if rich_output:
            handler: logging.Handler = RichHandler(
                console=Console(stderr=True),
                show_path=False,
                rich_tracebacks=False,
            )
            handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        else:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

        handler.setLevel(numeric)
        package_logger.addHandler(handler)
        package_logger.setLevel(numeric)
        package_logger.propagate = False
        _handler = handler

    return package_logger


def reset_logging() -> None:
    """Remove the installed handler and restore propagation."""
    global _handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    with _lock:
        if _handler is not None:
            package_logger.removeHandler(_handler)
            _handler = None
        package_logger.setLevel(logging.NOTSET)
        package_logger.propagate = True
