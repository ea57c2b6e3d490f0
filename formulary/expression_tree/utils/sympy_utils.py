import sympy as sp
from typing import Union
from ..core.node import Node

class SymPyConverter:
  """Bridge between expression trees and SymPy"""

  def to_sympy(self, node: Union[Node, sp.Expr]) -> sp.Expr:
    """Convert a tree to a SymPy expression; SymPy input passes through"""
    if isinstance(node, Node):
      return node.to_sympy()
    return sp.sympify(node)

  def latex(self, node: Node) -> str:
    """SymPy's own LaTeX for the tree, canonicalised by SymPy"""
    return sp.latex(self.to_sympy(node))

  def is_equivalent(self, a: Union[Node, sp.Expr], b: Union[Node, sp.Expr]) -> bool:
    """True when SymPy can prove a - b simplifies to zero"""
    difference = sp.simplify(self.to_sympy(a) - self.to_sympy(b))
    return difference == 0

  def free_symbol_names(self, node: Node) -> set:
    return {str(s) for s in self.to_sympy(node).free_symbols}
