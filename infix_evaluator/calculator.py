"""Parse-then-evaluate entry points."""

from .errors import ParseError
from .expression_tree import Expression
from .logging_system import LogLevel, get_logger, log_debug, log_info


def parse_expression(expression: str) -> Expression:
    """Parse one line of infix arithmetic; raises ParseError subclasses."""
    try:
        tree = Expression.from_string(expression)
    except ParseError as e:
        log_info(f"Failed to parse {expression!r}: {e}", LogLevel.MODERATE)
        raise
    log_debug(f"parsed {tree.to_string()} (size={tree.size()}, depth={tree.depth()})")
    return tree


def evaluate_tree(tree: Expression) -> float:
    """Reduce a parsed tree to its value; never raises."""
    return tree.evaluate()


def parse_and_evaluate(expression: str) -> float:
    """
    Parse and evaluate expression in one step.

    Division by zero and negative bases raised to fractional powers follow
    IEEE rules (inf, -inf, nan); only malformed input raises.
    """
    tree = parse_expression(expression)
    value = evaluate_tree(tree)
    get_logger().result_summary({
        'expression': expression.strip(),
        'tree': tree.to_string(),
        'value': value,
    })
    return value
