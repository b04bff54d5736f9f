"""File logging for applications that own the terminal.

stdout and stderr belong to the UI while the loop runs, so diagnostics
go to a file instead.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_handlers: dict[str, logging.Handler] = {}


def enable_debug_log(path: str, level: int = logging.DEBUG) -> logging.Handler:
    """Append ``tessera`` log records to *path*.

    Calling this again with the same path returns the existing handler.
    """
    existing = _handlers.get(path)
    if existing is not None:
        return existing

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)

    logger = logging.getLogger("tessera")
    logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)
    _handlers[path] = handler
    return handler


def disable_debug_log(path: str) -> None:
    handler = _handlers.pop(path, None)
    if handler is None:
        return
    logging.getLogger("tessera").removeHandler(handler)
    handler.close()
