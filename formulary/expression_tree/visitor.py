"""Double-dispatch protocol over the node kinds.

Node.accept() calls exactly the visit_* method matching the node kind;
Node.accept_recursive() does the same for the whole subtree in pre-order.
Subclasses override only the kinds they care about.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
  from .core.node import (
    ConstantNode, VariableNode, AdditionNode, MultiplicationNode,
    ExponentiationNode, FunctionNode, PlaceholderNode
  )


class ExpressionNodeVisitor:

  def visit_constant(self, node: 'ConstantNode'):
    pass

  def visit_variable(self, node: 'VariableNode'):
    pass

  def visit_addition(self, node: 'AdditionNode'):
    pass

  def visit_multiplication(self, node: 'MultiplicationNode'):
    pass

  def visit_exponentiation(self, node: 'ExponentiationNode'):
    pass

  def visit_function(self, node: 'FunctionNode'):
    pass

  def visit_placeholder(self, node: 'PlaceholderNode'):
    pass
