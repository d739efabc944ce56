"""
Logging System for the Infix Evaluator

This module provides a centralized logger with verbosity levels so the parser
can trace its split decisions without cluttering normal output.
"""

import logging
import sys
from typing import Optional, Dict, Any
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels"""
    SILENT = 0      # No output
    MINIMAL = 1     # Default, quiet on success
    MODERATE = 2    # Parse failures and key milestones
    DETAILED = 3    # One line per split decision
    VERBOSE = 4     # All information including debug details


class CalculatorLogger:
    """
    Centralized logger for parsing and evaluation
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        # Create logger
        self.logger = logging.getLogger('infix_evaluator')
        self.logger.setLevel(logging.DEBUG)
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()  # Remove any existing handlers

        # Create formatter
        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler on stderr; stdout carries the result
        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (optional)
        if log_to_file:
            if log_file_path is None:
                log_file_path = f"infix_evaluator_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def split_step(self, depth: int, expr: str, index: int, token: str):
        """Log one recursive split decision"""
        if not self._should_log(LogLevel.DETAILED):
            return

        indent = "  " * depth
        self.logger.info(f"{indent}split {expr!r} at {index} ({token!r})")

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def result_summary(self, results: Dict[str, Any]):
        """Log a key/value summary of one evaluation"""
        if not self._should_log(LogLevel.DETAILED):
            return

        for key, value in results.items():
            self.logger.info(f"{key:.<20} {value}")


# Global logger instance
_global_logger: Optional[CalculatorLogger] = None


def get_logger() -> CalculatorLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculatorLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = CalculatorLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> CalculatorLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = CalculatorLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)


def log_split_step(depth: int, expr: str, index: int, token: str):
    """Log split decision"""
    get_logger().split_step(depth, expr, index, token)
