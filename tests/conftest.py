import pytest

from infix_evaluator.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by a test so later tests start quiet"""
    yield
    configure_logging(LogLevel.SILENT)
