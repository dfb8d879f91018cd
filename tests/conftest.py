import logging

import pytest
import structlog

from viewkit.logging_setup import PACKAGE_LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers the CLI attaches to short-lived CliRunner streams."""
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
