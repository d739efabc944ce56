"""Core expression tree components."""

from .node import Node, NumberNode, BinaryOpNode, NegationNode, ParenthesisNode
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, OP_SYMBOLS, operator_from_char,
    evaluate_binary_op_fast, evaluate_unary_op_fast
)

__all__ = [
    'Node', 'NumberNode', 'BinaryOpNode', 'NegationNode', 'ParenthesisNode',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'OP_SYMBOLS', 'operator_from_char',
    'evaluate_binary_op_fast', 'evaluate_unary_op_fast'
]
