"""Pytest configuration shared by all test suites"""

import logging

import pytest


@pytest.fixture
def debug_logging(caplog):
    """Capture DEBUG records from search_processors loggers"""
    caplog.set_level(logging.DEBUG, logger="search_processors")
    return caplog
