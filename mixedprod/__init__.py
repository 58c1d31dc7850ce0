"""Set up the main mixedprod namespace."""

# flake8: noqa (we don't need the "<...> imported but unused" error)

import atexit
import logging

from mixedprod.config import Config
from .version import __version__

config: Config = Config()

from mixedprod.logger import start_logger
from mixedprod.product import (
    EMPTY_PRODUCT,
    MixedProduct,
    MixedProductError,
    MixedProductIterator,
    PaddingSchedule,
    ProductNode,
    mixed_product,
)

if config["logger"]["start_logging_on_import"]:
    start_logger()

atexit.register(logging.shutdown)


def test(**kwargs):
    """
    Run the mixedprod tests. This requires pytest, which is part of the
    ``test`` extra. All arguments are forwarded to pytest.main
    """
    try:
        import pytest
    except ImportError:
        print("Need pytest to run tests")
        return
    args = ['--pyargs', 'mixedprod.tests']
    retcode = pytest.main(args, **kwargs)
    return retcode


test.__test__ = False  # type: ignore # Don't try to run this method as a test
