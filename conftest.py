import logging

import pytest

pytest_plugins = ["tests.fixtures.browsers"]


@pytest.fixture(autouse=True)
def reset_bookmarker_logger():
    """Restore the package logger after tests that configure it."""
    logger = logging.getLogger("bookmarker")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
