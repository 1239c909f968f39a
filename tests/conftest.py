"""Configuration for pytest tests.

A custom command line option is added to the pytest configuration,
but it must be provided *after* all standard pytest options.

    pytest tests --exhaustive

runs the tests marked ``exhaustive`` as well, which sweep every class in
:py:mod:`beans` instead of checking hand-picked cases.
"""
import logging

import pytest

logger = logging.getLogger("pytest_config")
logger.setLevel(logging.DEBUG)


def pytest_addoption(parser):
    """Add command-line user options for the pytest invocation."""
    parser.addoption(
        "--exhaustive", action="store_true", default=False, help="run exhaustive coverage with extra tests"
    )


def pytest_configure(config):
    config.addinivalue_line("markers", "exhaustive: mark test to run only for exhaustive testing")


def pytest_collection_modifyitems(config, items):
    skip_exhaustive = pytest.mark.skip(reason="use --exhaustive for more exhaustive testing")
    if not config.getoption("--exhaustive"):
        for item in items:
            if "exhaustive" in item.keywords:
                item.add_marker(skip_exhaustive)


@pytest.fixture
def reflector_log(caplog):
    """Capture DEBUG records from the reflector.

    The package logger has only a NullHandler, so records reach caplog's
    handler on the root logger through propagation.
    """
    caplog.set_level(logging.DEBUG, logger="propreflect")
    return caplog
