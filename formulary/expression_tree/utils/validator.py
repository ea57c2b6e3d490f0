import numpy as np
from typing import List
from ..core.node import (
  Node, ConstantNode, VariableNode, SequenceNode, ExponentiationNode, FunctionNode, PlaceholderNode
)
from ..core.operators import EVALUATED_FUNCTIONS


class ExpressionValidator:
  """Structural checks for trees handed over by external builders.

  Nodes never validate themselves; callers that do not trust their tree
  source run it through here first.
  """

  @staticmethod
  def is_valid_expression(node: Node) -> bool:
    return not ExpressionValidator.validation_errors(node)

  @staticmethod
  def validation_errors(node: Node) -> List[str]:
    errors: List[str] = []
    ExpressionValidator._collect_errors(node, 'root', errors)
    return errors

  @staticmethod
  def _collect_errors(node, path: str, errors: List[str]):
    if not isinstance(node, Node):
      errors.append(f"{path}: expected a Node, got {type(node).__name__}")
      return

    if isinstance(node, ConstantNode):
      if not np.isfinite(node.value):
        errors.append(f"{path}: constant is not finite ({node.value})")

    elif isinstance(node, (VariableNode, PlaceholderNode)):
      if not isinstance(node.name, str) or not node.name:
        errors.append(f"{path}: empty name")

    elif isinstance(node, SequenceNode):
      if not node.terms:
        errors.append(f"{path}: {type(node).__name__} has no terms")
      for i, t in enumerate(node.terms):
        ExpressionValidator._collect_errors(t.expression, f"{path}.terms[{i}]", errors)

    elif isinstance(node, ExponentiationNode):
      ExpressionValidator._collect_errors(node.base, f"{path}.base", errors)
      ExpressionValidator._collect_errors(node.exponent, f"{path}.exponent", errors)

    elif isinstance(node, FunctionNode):
      if node.function not in EVALUATED_FUNCTIONS:
        errors.append(f"{path}: function {node.function!r} has no evaluation rule")
      ExpressionValidator._collect_errors(node.argument, f"{path}.argument", errors)

    else:
      errors.append(f"{path}: unknown node kind {type(node).__name__}")
