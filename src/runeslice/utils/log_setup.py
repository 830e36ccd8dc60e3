"""Process-wide logging configuration for the CLI.

Library modules only create ``logging.getLogger(__name__)`` loggers;
the handler is installed once, here, by the CLI entry point.  Rich is
used for the handler when it is importable so log records share the
styled stderr stream with the rest of the CLI output.
"""

from __future__ import annotations

import logging

_LOGGER_NAME = "runeslice"
_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        return handler

    from rich.console import Console

    return RichHandler(console=Console(stderr=True), show_time=False, show_path=False)


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    logger.addHandler(_build_handler())
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger
