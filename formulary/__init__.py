"""formulary

Algebraic expression trees: numeric evaluation, text and LaTeX rendering,
and isolation of a variable in an equation.
"""

from .expression_tree import (
  Expression, ExpressionNodeVisitor,
  Node, ConstantNode, VariableNode, Term, SequenceNode,
  AdditionNode, MultiplicationNode, ExponentiationNode, FunctionNode, PlaceholderNode,
  NodeType, FunctionId, EVALUATED_FUNCTIONS, function_from_name, function_to_name,
  SymPyConverter, ExpressionValidator
)
from .equation import Equation, SolveResult, EquationSolver, SolverState
from .exceptions import FormularyError, UnboundVariableError, UnsupportedFunctionError
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "ExpressionNodeVisitor",
  "Node", "ConstantNode", "VariableNode", "Term", "SequenceNode",
  "AdditionNode", "MultiplicationNode", "ExponentiationNode", "FunctionNode", "PlaceholderNode",
  "NodeType", "FunctionId", "EVALUATED_FUNCTIONS", "function_from_name", "function_to_name",
  "SymPyConverter", "ExpressionValidator",
  "Equation", "SolveResult", "EquationSolver", "SolverState",
  "FormularyError", "UnboundVariableError", "UnsupportedFunctionError",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
