import logging

import pytest

from mixedprod import logger, mixed_product


@pytest.fixture(name="root_logger")
def _clean_logger():
    root_logger = logging.getLogger(logger.ROOT_LOGGER_NAME)
    level = root_logger.level
    yield root_logger
    logger.stop_logger()
    root_logger.setLevel(level)


def test_start_logger_adds_one_handler(root_logger):
    handler = logger.start_logger()
    assert logger.get_console_handler() is handler
    assert handler in root_logger.handlers
    assert handler.level == logging.WARNING

    again = logger.start_logger("INFO")
    assert again is handler
    assert root_logger.handlers.count(handler) == 1
    assert handler.level == logging.INFO


def test_stop_logger_removes_handler(root_logger):
    handler = logger.start_logger()
    logger.stop_logger()
    assert handler not in root_logger.handlers
    assert logger.get_console_handler() is None
    logger.stop_logger()


def test_discoveries_reach_the_console(root_logger, capsys):
    logger.start_logger(logging.DEBUG)
    list(mixed_product([0, 1], [0, 1, 2, 3]))
    err = capsys.readouterr().err
    assert "Discovered length 4 of iterable 1, padded to 5" in err
    assert "finished after 10 step(s), yielding 8 tuple(s)" in err
