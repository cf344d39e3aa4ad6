import logging

import pytest
from rich.logging import RichHandler

from mise_devcontainer.utils.log import configure_logging, level_for_verbosity


@pytest.mark.parametrize("verbosity, level", [
    (0, logging.WARNING),
    (1, logging.INFO),
    (2, logging.DEBUG),
    (5, logging.DEBUG),
])
def test_level_for_verbosity(verbosity, level):
    assert level_for_verbosity(verbosity) == level


def test_configure_logging_replaces_handler():
    logger = logging.getLogger("mise_devcontainer")

    configure_logging(1)
    handler = configure_logging(2)

    rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
    assert rich_handlers == [handler]
    assert logger.level == logging.DEBUG
    assert handler.level == logging.DEBUG
