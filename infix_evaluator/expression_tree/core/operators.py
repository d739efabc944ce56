import numpy as np
import numba
from enum import IntEnum

from ...errors import InvalidOperatorError

class NodeType(IntEnum):
  NUMBER = 0
  BINARY_OP = 1
  NEGATION = 2
  PARENTHESIS = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  NEG = 5

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
OP_SYMBOLS = {op_type: symbol for symbol, op_type in BINARY_OP_MAP.items()}


def operator_from_char(char: str) -> OpType:
  try:
    return BINARY_OP_MAP[char]
  except KeyError:
    raise InvalidOperatorError(f"Invalid operator: {char!r}") from None

# error_model='numpy' keeps IEEE results (inf, nan) instead of raising
# ZeroDivisionError. No fastmath: it would assume away inf and nan.
@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op_fast(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  elif op_type == OpType.POW:
    # Negative base with a fractional exponent gives nan, never complex
    return left_val ** right_val
  return np.nan

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op_fast(operand_val, op_type):
  if op_type == OpType.NEG:
    return -operand_val
  return np.nan
