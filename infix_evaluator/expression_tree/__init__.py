"""Expression Tree Module

Core expression tree functionality for infix arithmetic.
"""

from .expression import Expression
from .core.node import (
    Node,
    NumberNode,
    BinaryOpNode,
    NegationNode,
    ParenthesisNode
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    operator_from_char,
    evaluate_binary_op_fast,
    evaluate_unary_op_fast
)
from .utils import (
    get_all_nodes,
    calculate_tree_depth,
    count_nodes_by_type,
    validate_tree_structure
)

__all__ = [
    "Expression",
    "Node", "NumberNode", "BinaryOpNode", "NegationNode", "ParenthesisNode",
    "NodeType", "OpType", "BINARY_OP_MAP", "operator_from_char",
    "evaluate_binary_op_fast", "evaluate_unary_op_fast",
    "get_all_nodes", "calculate_tree_depth", "count_nodes_by_type",
    "validate_tree_structure"
]
