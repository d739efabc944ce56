import sympy as sp
from typing import Optional
from .core.node import Node
from .utils.tree_utils import calculate_tree_depth


class Expression:
  """Expression class wrapping a parsed tree root"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self) -> float:
    return self.root.evaluate()

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def clear_cache(self):
    """Clear cached values"""
    self._string_cache = None

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def latex(self) -> str:
    return sp.latex(self.to_sympy())

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return hash(self) == hash(other)

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"

  @classmethod
  def from_string(cls, expr_str: str) -> 'Expression':
    """Parse an infix string; raises ParseError on malformed input"""
    from ..parsing.builder import build_tree

    return cls(build_tree(expr_str))
