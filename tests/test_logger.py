import logging

import pytest

from classcharts import setup_logger
from classcharts.logger import HANDLER_NAME


@pytest.fixture
def restore_logging():
    logger = logging.getLogger("classcharts")
    urllib3_logger = logging.getLogger("urllib3")
    handlers, level, urllib3_level = list(logger.handlers), logger.level, urllib3_logger.level

    yield logger

    logger.handlers[:] = handlers
    logger.setLevel(level)
    urllib3_logger.setLevel(urllib3_level)


def test_setup_logger_is_idempotent(restore_logging):
    logger = setup_logger(logging.DEBUG)
    setup_logger(logging.WARNING)

    handlers = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
    assert len(handlers) == 1
    assert handlers[0].level == logging.WARNING
    assert logger.level == logging.WARNING
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_debug_level_keeps_urllib3_quiet(restore_logging):
    setup_logger(logging.DEBUG)

    assert logging.getLogger("urllib3").level == logging.INFO
