"""Logging setup for the CLI process.

Diagnostics go to stderr through Rich so they never mix with command
results printed on stdout.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "dcl_cli"


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Attach a single Rich handler to the package logger.

    Calling this more than once replaces the previous handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            markup=False,
        )

    logger.handlers = [handler]
    logger.propagate = False
    return logger
