import logging

import pytest

"""
Pytest configuration file for the iawk test suite.

Shared fixtures for logging isolation and scratch input files.
"""


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration before each test"""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    logging.basicConfig(level=logging.NOTSET)
    yield


@pytest.fixture
def write_input(tmp_path):
    """Returns a helper that writes raw bytes to a file under tmp_path and returns its path."""
    def _write(data, name="input.txt"):
        path = tmp_path / name
        path.write_bytes(data if isinstance(data, bytes) else data.encode("utf-8"))
        return path
    return _write
