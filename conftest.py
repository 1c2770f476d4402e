import pytest  # noqa: F401
import logging


def pytest_configure(config):
    """
    Let debug output from the library through to pytest's log capture.
    This hook is called early in the pytest process.
    """
    logging.getLogger("affinekit").setLevel(logging.DEBUG)
