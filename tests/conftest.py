import logging

import pytest


@pytest.fixture(autouse=True)
def reset_spendr_logger():
    """spendr.cli.main() attaches a stderr handler; drop it so later tests don't write to a closed capture."""
    yield
    pkg_logger = logging.getLogger("spendr")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)
