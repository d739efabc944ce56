import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Tuple
from .operators import (
  NodeType, OpType, OP_SYMBOLS,
  evaluate_binary_op_fast, evaluate_unary_op_fast
)


class Node(ABC):
  """Base node class with size and hash caching"""

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  @abstractmethod
  def evaluate(self) -> float:
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  def size(self) -> int:
    """Node count of this subtree"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children())
    return self._size_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class NumberNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self.value = np.float64(value)

  def evaluate(self) -> float:
    return float(self.value)

  def to_string(self) -> str:
    return repr(float(self.value))

  def to_sympy(self):
    return sp.Float(float(self.value))

  def children(self):
    return ()

  def _compute_hash(self) -> int:
    # hex() keeps nan hashable by value
    return hash((NodeType.NUMBER, float(self.value).hex()))


class BinaryOpNode(Node):
  __slots__ = ('op_type', 'left', 'right')

  def __init__(self, op_type: OpType, left: Node, right: Node):
    super().__init__()
    self.op_type = op_type
    self.left = left
    self.right = right

  @property
  def operator(self) -> str:
    return OP_SYMBOLS[self.op_type]

  def evaluate(self) -> float:
    left_val = self.left.evaluate()
    right_val = self.right.evaluate()
    return float(evaluate_binary_op_fast(left_val, right_val, self.op_type))

  def to_string(self) -> str:
    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def to_sympy(self):
    # evaluate=False keeps the parsed shape instead of folding constants
    left = self.left.to_sympy()
    right = self.right.to_sympy()
    if self.op_type == OpType.ADD:
      return sp.Add(left, right, evaluate=False)
    elif self.op_type == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right, evaluate=False), evaluate=False)
    elif self.op_type == OpType.MUL:
      return sp.Mul(left, right, evaluate=False)
    elif self.op_type == OpType.DIV:
      return sp.Mul(left, sp.Pow(right, -1, evaluate=False), evaluate=False)
    elif self.op_type == OpType.POW:
      return sp.Pow(left, right, evaluate=False)
    else:
      raise RuntimeWarning(f"to_sympy reached unexpected operation at node {type(self)}")

  def children(self):
    return (self.left, self.right)

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self.op_type, hash(self.left), hash(self.right)))


class NegationNode(Node):
  __slots__ = ('operand',)

  def __init__(self, operand: Node):
    super().__init__()
    self.operand = operand

  def evaluate(self) -> float:
    return float(evaluate_unary_op_fast(self.operand.evaluate(), OpType.NEG))

  def to_string(self) -> str:
    return f"neg({self.operand.to_string()})"

  def to_sympy(self):
    return sp.Mul(-1, self.operand.to_sympy(), evaluate=False)

  def children(self):
    return (self.operand,)

  def _compute_hash(self) -> int:
    return hash((NodeType.NEGATION, hash(self.operand)))


class ParenthesisNode(Node):
  """Transparent wrapper recording an explicit (...) group"""

  __slots__ = ('operand',)

  def __init__(self, operand: Node):
    super().__init__()
    self.operand = operand

  def evaluate(self) -> float:
    return self.operand.evaluate()

  def to_string(self) -> str:
    return f"paren({self.operand.to_string()})"

  def to_sympy(self):
    return self.operand.to_sympy()

  def children(self):
    return (self.operand,)

  def _compute_hash(self) -> int:
    return hash((NodeType.PARENTHESIS, hash(self.operand)))
