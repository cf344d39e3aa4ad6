"""Console logging for the mise-devcontainer CLI.

Log records go to stderr through Rich so that generated JSON on stdout
stays machine-readable.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "mise_devcontainer"


def level_for_verbosity(verbosity: int) -> int:
    """Map a -v count to a logging level (WARNING, INFO, then DEBUG)."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int = 0) -> RichHandler:
    """Attach a stderr RichHandler to the package logger.

    Calling this again replaces the handler installed by a previous call.
    """
    level = level_for_verbosity(verbosity)
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        level=level,
        console=Console(stderr=True),
        show_time=False,
        show_path=level == logging.DEBUG,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
