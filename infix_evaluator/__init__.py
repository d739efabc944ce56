# Python

"""Infix Evaluator Package

Parses one line of infix arithmetic into an expression tree and reduces it
to a double-precision value.
"""

from .errors import (
  ParseError, IndexOutOfRangeError, InvalidOperatorError,
  NumberFormatError, ParenthesisError
)
from .expression_tree import (
  Expression, Node, NumberNode, BinaryOpNode, NegationNode, ParenthesisNode,
  OpType
)
from .parsing import build_tree, locate_parenthesis, find_minimum_priority_token
from .calculator import parse_expression, evaluate_tree, parse_and_evaluate
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "ParseError", "IndexOutOfRangeError", "InvalidOperatorError",
  "NumberFormatError", "ParenthesisError",
  "Expression", "Node", "NumberNode", "BinaryOpNode", "NegationNode", "ParenthesisNode",
  "OpType",
  "build_tree", "locate_parenthesis", "find_minimum_priority_token",
  "parse_expression", "evaluate_tree", "parse_and_evaluate",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
