"""Expression Tree Module

Node taxonomy, traversal protocol and evaluation for algebraic expressions.
"""

from .expression import Expression
from .visitor import ExpressionNodeVisitor
from .core.node import (
    Node,
    ConstantNode,
    VariableNode,
    Term,
    SequenceNode,
    AdditionNode,
    MultiplicationNode,
    ExponentiationNode,
    FunctionNode,
    PlaceholderNode
)
from .core.operators import (
    NodeType,
    FunctionId,
    FUNCTION_NAME_MAP,
    EVALUATED_FUNCTIONS,
    function_from_name,
    function_to_name
)
from .utils import SymPyConverter, ExpressionValidator

__all__ = [
    "Expression", "ExpressionNodeVisitor",
    "Node", "ConstantNode", "VariableNode", "Term", "SequenceNode",
    "AdditionNode", "MultiplicationNode", "ExponentiationNode", "FunctionNode", "PlaceholderNode",
    "NodeType", "FunctionId", "FUNCTION_NAME_MAP", "EVALUATED_FUNCTIONS",
    "function_from_name", "function_to_name",
    "SymPyConverter", "ExpressionValidator"
]
