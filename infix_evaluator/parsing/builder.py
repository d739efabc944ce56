"""
Recursive Expression Builder

Turns an infix string into an expression tree by splitting it at its
minimum-priority token and recursing into the pieces.
"""

from ..errors import IndexOutOfRangeError, NumberFormatError, ParenthesisError
from ..expression_tree.core.node import (
    Node, NumberNode, BinaryOpNode, NegationNode, ParenthesisNode
)
from ..expression_tree.core.operators import BINARY_OP_MAP, operator_from_char
from ..logging_system import log_split_step
from .scanner import WHITESPACE, find_minimum_priority_token
from .spans import locate_parenthesis


def build_tree(expr: str, depth: int = 0) -> Node:
    """
    Build the tree for expr.

    Every (sub)string is trimmed on entry, so operands cut out of the middle
    of the input behave the same as the input itself.

    Raises:
        NumberFormatError: a leaf is not a float literal (including empty
            operands such as in "1+" or "")
        ParenthesisError: a '(' won the scan without enclosing the whole
            substring, e.g. "2(3)" or "(1))"
        IndexOutOfRangeError: the scanner returned an index past the end
    """
    expr = expr.strip(WHITESPACE)
    if not expr:
        raise NumberFormatError("Empty operand", expr)

    parenthesis_spans = locate_parenthesis(expr)
    index = find_minimum_priority_token(expr, parenthesis_spans)
    if not 0 <= index < len(expr):
        raise IndexOutOfRangeError("Index out of range", expr, index)

    token = expr[index]
    log_split_step(depth, expr, index, token)

    if token == '-' and index == 0:
        return NegationNode(build_tree(expr[index + 1:], depth + 1))

    if token in BINARY_OP_MAP:
        return BinaryOpNode(
            operator_from_char(token),
            build_tree(expr[:index], depth + 1),
            build_tree(expr[index + 1:], depth + 1),
        )

    if token == '(':
        if index != 0 or parenthesis_spans[:1] != [(0, len(expr) - 1)]:
            raise ParenthesisError(
                "Parenthesis group does not span the whole expression", expr, index
            )
        return ParenthesisNode(build_tree(expr[1:-1], depth + 1))

    return parse_number(expr)


def parse_number(expr: str) -> NumberNode:
    try:
        value = float(expr)
    except ValueError as e:
        raise NumberFormatError(f"Invalid number: {expr!r}", expr) from e
    return NumberNode(value)
