"""
Minimum-Priority Token Scanner

Picks the operator that becomes the root of a (sub)expression's tree. The
scan is a single left-to-right pass that steps over top-level parenthesis
groups and keeps the best (index, priority) seen so far.
"""

from enum import IntEnum
from typing import Dict, Iterable, Tuple

WHITESPACE = ' \t\n\r'
OPERATOR_CHARS = frozenset('+-*/^')


class Priority(IntEnum):
    """Split preference: the lowest value becomes the root"""
    ADDITIVE = 1
    MULTIPLICATIVE = 2
    NEGATION = 3
    EXPONENT = 4
    GROUP = 5
    NONE = 255


TOKEN_PRIORITIES: Dict[str, Priority] = {
    '+': Priority.ADDITIVE,
    '-': Priority.ADDITIVE,
    '*': Priority.MULTIPLICATIVE,
    '/': Priority.MULTIPLICATIVE,
    '^': Priority.EXPONENT,
    '(': Priority.GROUP,
}


def _previous_token(expr: str, index: int) -> str:
    """Nearest non-whitespace character before index, or '' at the start"""
    for char in reversed(expr[:index]):
        if char not in WHITESPACE:
            return char
    return ''


def is_negation_marker(expr: str, index: int) -> bool:
    """A '-' is unary when nothing but whitespace or an operator precedes it"""
    if expr[index] != '-':
        return False
    previous = _previous_token(expr, index)
    return previous == '' or previous in OPERATOR_CHARS


def is_exponent_sign(expr: str, index: int) -> bool:
    """True for the sign in literals such as 1e-3 or 2.5E+4"""
    if expr[index] not in '+-' or index < 2:
        return False
    return expr[index - 1] in 'eE' and (expr[index - 2].isdigit() or expr[index - 2] == '.')


def find_minimum_priority_token(expr: str, parenthesis_spans: Iterable[Tuple[int, int]]) -> int:
    """
    Return the index of the token to split expr at.

    Binary operators replace the running best on equal priority, so the
    rightmost of several equal operators wins and recursion on the left part
    yields left associativity. A negation only wins when strictly better,
    i.e. the leftmost one. Only a negation with nothing in front of it is a
    candidate: any other negation belongs to the operand of the operator
    preceding it. The leading negation ranks between '*' '/' and '^', so
    -5^2 reads as -(5^2) while -2+3 reads as (-2)+3.

    Returns 0 when no operator is found at top level, meaning the whole
    string is a terminal.
    """
    spans = iter(parenthesis_spans)
    current_span = next(spans, None)

    best_index, best_priority = 0, Priority.NONE
    for i, char in enumerate(expr):
        if current_span is not None:
            start, end = current_span
            if start < i < end:
                continue
            if i == end:
                current_span = next(spans, None)
                continue

        if char in WHITESPACE:
            continue

        if char == '-' and is_negation_marker(expr, i):
            if _previous_token(expr, i) != '':
                continue
            if Priority.NEGATION < best_priority:
                best_index, best_priority = i, Priority.NEGATION
            continue

        if is_exponent_sign(expr, i):
            continue

        priority = TOKEN_PRIORITIES.get(char)
        if priority is None:
            # Digits, '.', letters and stray ')' are never split points
            continue

        if priority <= best_priority:
            best_index, best_priority = i, priority

    return best_index
