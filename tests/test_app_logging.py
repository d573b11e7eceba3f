"""Tests for logging configuration."""

import io
import logging
from typing import Iterator

import pytest

from biteparse.app_logging import PACKAGE_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True


def test_configure_logging_is_idempotent() -> None:
    configure_logging(logging.DEBUG)
    logger = configure_logging(logging.WARNING)

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_level_name_and_stream() -> None:
    stream = io.StringIO()
    configure_logging("debug", stream=stream)

    logging.getLogger("biteparse.core.pipeline").debug("split %s", "kávé")

    assert stream.getvalue() == "DEBUG: biteparse.core.pipeline: split kávé\n"
