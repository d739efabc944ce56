import logging

import pytest

from infix_evaluator import parse_and_evaluate, ParseError
from infix_evaluator.logging_system import (
    CalculatorLogger, LogLevel, configure_logging, get_logger, set_log_level
)


def messages(caplog):
    return [record.getMessage() for record in caplog.records if record.name == 'infix_evaluator']


def test_detailed_level_traces_splits(caplog):
    caplog.set_level(logging.DEBUG, logger='infix_evaluator')
    configure_logging(LogLevel.DETAILED)
    assert parse_and_evaluate("1+2*3") == 7.0
    logged = messages(caplog)
    assert "split '1+2*3' at 1 ('+')" in logged
    assert "  split '2*3' at 1 ('*')" in logged
    assert any(m.startswith("value") and m.endswith("7.0") for m in logged)


def test_minimal_level_is_quiet_on_success(caplog):
    caplog.set_level(logging.DEBUG, logger='infix_evaluator')
    configure_logging(LogLevel.MINIMAL)
    parse_and_evaluate("(1+2)^2")
    assert messages(caplog) == []


def test_parse_failure_logged_at_moderate(caplog):
    caplog.set_level(logging.DEBUG, logger='infix_evaluator')
    configure_logging(LogLevel.MODERATE)
    with pytest.raises(ParseError):
        parse_and_evaluate("1+")
    assert any(m.startswith("Failed to parse '1+'") for m in messages(caplog))


def test_verbose_level_reports_tree_shape(caplog):
    caplog.set_level(logging.DEBUG, logger='infix_evaluator')
    configure_logging(LogLevel.VERBOSE)
    parse_and_evaluate("-4")
    assert "DEBUG: parsed neg(4.0) (size=2, depth=2)" in messages(caplog)


def test_silent_logger_has_no_handlers():
    logger = CalculatorLogger(LogLevel.SILENT)
    assert logger.logger.handlers == []


def test_set_log_level():
    configure_logging(LogLevel.MINIMAL)
    set_log_level(LogLevel.VERBOSE)
    assert get_logger().log_level == LogLevel.VERBOSE


def test_log_file(tmp_path):
    log_path = tmp_path / "evaluator.log"
    configure_logging(LogLevel.DETAILED, log_to_file=True, log_file_path=str(log_path))
    parse_and_evaluate("4/2")
    assert "split '4/2' at 1 ('/')" in log_path.read_text()
