"""
Parenthesis Span Locator

Finds the top-level (depth-1) parenthesis groups of a string so the scanner
can step over each one as a single opaque token.
"""

from typing import List, Tuple


def locate_parenthesis(expr: str) -> List[Tuple[int, int]]:
    """
    Return the (open_index, close_index) pair of every top-level group.

    Pairs come out in left-to-right order. Nested groups are not reported on
    their own, only through their enclosing group. Balance is not checked:
    an unterminated '(' produces no pair and a stray ')' just drives the
    depth below zero.
    """
    spans = []
    depth = 0
    current = -1

    for i, char in enumerate(expr):
        if char == '(':
            if depth == 0:
                current = i
            depth += 1
        elif char == ')':
            if depth == 1:
                spans.append((current, i))
            depth -= 1

    return spans
