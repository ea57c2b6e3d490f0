"""Core expression tree components."""

from .node import (
  Node, ConstantNode, VariableNode, Term, SequenceNode, AdditionNode, MultiplicationNode,
  ExponentiationNode, FunctionNode, PlaceholderNode, format_value
)
from .operators import (
  NodeType, FunctionId, FUNCTION_NAME_MAP, FUNCTION_ID_MAP, EVALUATED_FUNCTIONS,
  function_from_name, function_to_name, check_supported,
  evaluate_function, evaluate_function_fast, evaluate_power, evaluate_sum, evaluate_product
)

__all__ = [
  'Node', 'ConstantNode', 'VariableNode', 'Term', 'SequenceNode', 'AdditionNode',
  'MultiplicationNode', 'ExponentiationNode', 'FunctionNode', 'PlaceholderNode', 'format_value',
  'NodeType', 'FunctionId', 'FUNCTION_NAME_MAP', 'FUNCTION_ID_MAP', 'EVALUATED_FUNCTIONS',
  'function_from_name', 'function_to_name', 'check_supported',
  'evaluate_function', 'evaluate_function_fast', 'evaluate_power', 'evaluate_sum', 'evaluate_product'
]
