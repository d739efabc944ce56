"""
Tree Utility Functions

Traversal and structural checks for parsed expression trees.
"""

from typing import List, Dict
from collections import Counter

from ..core.node import Node, NumberNode, BinaryOpNode, NegationNode, ParenthesisNode
from ..core.operators import NodeType

_NODE_TYPES = {
    NumberNode: NodeType.NUMBER,
    BinaryOpNode: NodeType.BINARY_OP,
    NegationNode: NodeType.NEGATION,
    ParenthesisNode: NodeType.PARENTHESIS,
}


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative)"""
    stack = [node]
    all_nodes = []

    while stack:
        current_node = stack.pop()
        all_nodes.append(current_node)
        # Reversed so the left child is visited first
        stack.extend(reversed(current_node.children()))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    depth = 0
    level = [node]
    while level:
        depth += 1
        level = [child for current in level for child in current.children()]
    return depth


def node_type_of(node: Node) -> NodeType:
    return _NODE_TYPES[type(node)]


def count_nodes_by_type(node: Node) -> Dict[NodeType, int]:
    return dict(Counter(node_type_of(n) for n in get_all_nodes(node)))


def validate_tree_structure(node: Node) -> bool:
    """
    Check the structural invariants of a parsed tree.

    Every leaf is a NumberNode, binary nodes have exactly two children and
    unary wrappers exactly one, and no node object appears twice (no sharing,
    no cycles).
    """
    seen = set()
    stack = [node]

    while stack:
        current_node = stack.pop()
        if id(current_node) in seen:
            return False
        seen.add(id(current_node))

        if type(current_node) not in _NODE_TYPES:
            return False

        children = current_node.children()
        if isinstance(current_node, NumberNode):
            if children:
                return False
        elif isinstance(current_node, BinaryOpNode):
            if len(children) != 2:
                return False
        elif len(children) != 1:
            return False

        stack.extend(children)

    return True
