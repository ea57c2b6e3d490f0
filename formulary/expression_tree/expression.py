import numpy as np
from typing import Callable, List, Mapping, Optional, Sequence
from .core.node import Node, Bindings
from .utils.tree_utils import get_variable_names
import sympy as sp


class Expression:
  """Formula record wrapping a root node, with a cached text form"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    self.root = root
    self._string_cache: Optional[str] = None

  def get_value(self, bindings: Optional[Bindings] = None) -> float:
    return self.root.get_value(bindings)

  def evaluate(self, data: Mapping[str, np.ndarray]) -> np.ndarray:
    """Evaluate over sample columns; the result has the broadcast shape of the inputs."""
    result = self.root.evaluate(data)
    if not data:
      return np.asarray(result, dtype=np.float64)
    shape = np.broadcast(*[np.asarray(v) for v in data.values()]).shape
    return np.array(np.broadcast_to(result, shape), dtype=np.float64)

  def set_variable(self, name: str, value: float):
    self.root.set_variable(name, value)
    self.clear_cache()

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def to_latex(self) -> str:
    return self.root.to_latex()

  def clone(self) -> 'Expression':
    return Expression(self.root.clone())

  def count(self) -> int:
    """Node count"""
    return self.root.count()

  def depth(self) -> int:
    return self.root.get_depth()

  def free_variables(self) -> List[str]:
    """Sorted names of the variables appearing in the tree"""
    return sorted(get_variable_names(self.root))

  def clear_cache(self):
    """Clear cached values"""
    self._string_cache = None

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  # Function: f(*columns) -> values, argument order follows variable_names
  def lambdify(self, variable_names: Optional[Sequence[str]] = None) -> Callable:
    if variable_names is None:
      variable_names = self.free_variables()
    symbols = [sp.Symbol(name) for name in variable_names]
    return sp.lambdify(symbols, self.to_sympy(), modules='numpy')

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"
