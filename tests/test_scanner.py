from infix_evaluator.parsing import (
    Priority, find_minimum_priority_token, is_exponent_sign, is_negation_marker,
    locate_parenthesis
)


def scan(expr):
    return find_minimum_priority_token(expr, locate_parenthesis(expr))


def test_priority_order():
    assert Priority.ADDITIVE < Priority.MULTIPLICATIVE < Priority.NEGATION
    assert Priority.NEGATION < Priority.EXPONENT < Priority.GROUP < Priority.NONE


def test_lowest_precedence_operator_wins():
    assert scan("1+2") == 1
    assert scan("2+3*4") == 1
    assert scan("2*3+4") == 3
    assert scan("2*3^2") == 1
    assert scan("2^3*4") == 3


def test_rightmost_of_equal_operators_wins():
    assert scan("1-2-3") == 3
    assert scan("8/4/2") == 3
    assert scan("2^3^2") == 3
    assert scan("1+2-3") == 3


def test_leftmost_negation_wins():
    assert scan("--5") == 0
    assert scan("---5") == 0


def test_leading_negation_ranks_between_product_and_power():
    assert scan("-5^2") == 0
    assert scan("-2+3") == 2
    assert scan("-2*3") == 2


def test_negation_after_operator_is_never_a_split_point():
    assert scan("2^-3") == 1
    assert scan("2*-3") == 1
    assert scan("5 - -3") == 2


def test_parenthesis_groups_are_opaque():
    assert scan("(2+3)*4") == 5
    assert scan("4*(2+3)") == 1
    assert scan("(1-2-3)") == 0


def test_whitespace_is_skipped():
    assert scan("1 - 2") == 2
    assert scan("  -  5") == 2
    assert scan("1\t+\t2") == 2


def test_terminal_defaults_to_start():
    assert scan("42") == 0
    assert scan("3.25") == 0
    assert scan("1e3") == 0


def test_exponent_sign_belongs_to_literal():
    assert scan("1e-3") == 0
    assert scan("2.5E+4") == 0
    assert scan("2*1e-3") == 1
    assert scan("1e-3-1") == 4


def test_is_negation_marker():
    assert is_negation_marker("-2", 0)
    assert is_negation_marker("1*-2", 2)
    assert is_negation_marker("1 * - 2", 4)
    assert not is_negation_marker("1-2", 1)
    assert not is_negation_marker("3 -2", 2)
    assert not is_negation_marker("(1)-2", 3)
    assert not is_negation_marker("1+2", 1)


def test_is_exponent_sign():
    assert is_exponent_sign("1e-3", 2)
    assert is_exponent_sign("1.E+3", 3)
    assert not is_exponent_sign("e-3", 1)
    assert not is_exponent_sign("1-3", 1)
