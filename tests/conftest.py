import logging

import pytest

from bijective_compress.shared.config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Detach handlers bound to a previous test's captured stdout."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
