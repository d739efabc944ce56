"""Utilities for expression trees."""

from .tree_utils import (
    get_all_nodes, calculate_tree_depth, node_type_of,
    count_nodes_by_type, validate_tree_structure
)

__all__ = [
    'get_all_nodes', 'calculate_tree_depth', 'node_type_of',
    'count_nodes_by_type', 'validate_tree_structure'
]
