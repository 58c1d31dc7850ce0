"""
Console logging for mixedprod.

Every module logs to ``logging.getLogger(__name__)``, i.e. below the
``mixedprod`` logger. ``start_logger`` attaches a single console handler
to that logger, configured from the ``logger`` section of the config.
"""
import logging
from typing import Optional, Union

import mixedprod

_LOG = logging.getLogger(__name__)

ROOT_LOGGER_NAME = "mixedprod"

console_handler: Optional[logging.Handler] = None


def get_console_handler() -> Optional[logging.Handler]:
    return console_handler


def start_logger(level: Optional[Union[int, str]] = None) -> logging.Handler:
    """
    Log mixedprod messages to the console.

    Args:
        level: Level of the console handler. Defaults to
            ``config["logger"]["console_level"]``.
    Returns:
        The console handler, which is created only on the first call.
    """
    global console_handler
    logger_config = mixedprod.config["logger"]
    if level is None:
        level = logger_config["console_level"]

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if console_handler is None:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(logger_config["format"]))
        root_logger.addHandler(console_handler)
    console_handler.setLevel(level)
    if root_logger.level == logging.NOTSET or root_logger.level > console_handler.level:
        root_logger.setLevel(console_handler.level)
    _LOG.info(f"Started console logging at level {logging.getLevelName(console_handler.level)}")
    return console_handler


def stop_logger() -> None:
    global console_handler
    if console_handler is None:
        return
    logging.getLogger(ROOT_LOGGER_NAME).removeHandler(console_handler)
    console_handler.close()
    console_handler = None
