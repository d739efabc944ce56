"""Infix string to expression tree."""

from .spans import locate_parenthesis
from .scanner import (
    Priority, TOKEN_PRIORITIES, find_minimum_priority_token,
    is_negation_marker, is_exponent_sign
)
from .builder import build_tree, parse_number

__all__ = [
    'locate_parenthesis',
    'Priority', 'TOKEN_PRIORITIES', 'find_minimum_priority_token',
    'is_negation_marker', 'is_exponent_sign',
    'build_tree', 'parse_number'
]
