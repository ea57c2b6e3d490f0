import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import (
  TYPE_CHECKING, Callable, Collection, Dict, List, Mapping, NamedTuple, Optional, Tuple, Union
)
from .operators import (
  NodeType, FunctionId, check_supported, function_to_name,
  evaluate_function, evaluate_power, evaluate_sum, evaluate_product
)
from ...exceptions import UnboundVariableError

if TYPE_CHECKING:
  from ..visitor import ExpressionNodeVisitor

Bindings = Mapping[str, Union[float, np.ndarray]]

SYMPY_FUNCTIONS: Dict[FunctionId, Callable] = {
  FunctionId.SIN: sp.sin,
  FunctionId.COS: sp.cos,
  FunctionId.TAN: sp.tan,
  FunctionId.ASIN: sp.asin,
  FunctionId.ACOS: sp.acos,
  FunctionId.ATAN: sp.atan,
  FunctionId.SQRT: sp.sqrt,
  FunctionId.EXP: sp.exp,
  FunctionId.LN: sp.log,
}


def format_value(value: float) -> str:
  """Shortest text for a float; integral values drop the trailing .0"""
  if float(value).is_integer():
    return str(int(value))
  return repr(float(value))


def _check_node(expression) -> 'Node':
  if not isinstance(expression, Node):
    raise TypeError(f"Expected a Node, got {type(expression).__name__}")
  return expression


class Node(ABC):
  """Base class of every expression tree node.

  Children are owned exclusively by their parent, so a tree never shares
  subtrees and clone() always returns a fully independent copy.
  """

  __slots__ = ()

  @abstractmethod
  def get_type(self) -> NodeType:
    pass

  @abstractmethod
  def evaluate(self, data: Bindings) -> np.ndarray:
    """Vectorised evaluation; values in data broadcast against each other."""
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_latex(self) -> str:
    pass

  @abstractmethod
  def clone(self) -> 'Node':
    pass

  @abstractmethod
  def accept(self, visitor: 'ExpressionNodeVisitor'):
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def get_value(self, bindings: Optional[Bindings] = None) -> float:
    """Numeric value of the subtree.

    Names in bindings take precedence over values stored on variable leaves.
    Raises UnboundVariableError if a reachable variable has neither.
    """
    return float(self.evaluate(bindings or {}))

  def get_child_nodes(self) -> List['Node']:
    return []

  def set_variable(self, name: str, value: float):
    for child in self.get_child_nodes():
      child.set_variable(name, value)

  def get_depth(self) -> int:
    children = self.get_child_nodes()
    if not children:
      return 1
    return 1 + max(child.get_depth() for child in children)

  def count(self) -> int:
    return 1 + sum(child.count() for child in self.get_child_nodes())

  def evaluates_constant(self, variables: Collection[str]) -> bool:
    return all(child.evaluates_constant(variables) for child in self.get_child_nodes())

  def accept_recursive(self, visitor: 'ExpressionNodeVisitor'):
    """Pre-order traversal: this node first, then every child in order."""
    self.accept(visitor)
    for child in self.get_child_nodes():
      child.accept_recursive(visitor)

  def simplify(self, parent: Optional['Node'] = None) -> 'Node':
    return self

  def is_variable(self) -> bool:
    return False

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()!r})"


class ConstantNode(Node):
  __slots__ = ('value',)

  def __init__(self, value: float):
    self.value = float(value)

  def get_type(self) -> NodeType:
    return NodeType.CONSTANT

  def set_value(self, value: float):
    self.value = float(value)

  def evaluate(self, data: Bindings) -> np.ndarray:
    return np.asarray(self.value, dtype=np.float64)

  def evaluates_constant(self, variables: Collection[str]) -> bool:
    return True

  def to_string(self) -> str:
    return format_value(self.value)

  def to_latex(self) -> str:
    return "\\mathrm{" + format_value(self.value) + "}"

  def clone(self) -> 'ConstantNode':
    return ConstantNode(self.value)

  def accept(self, visitor):
    visitor.visit_constant(self)

  def to_sympy(self):
    if np.isfinite(self.value) and self.value.is_integer():
      return sp.Integer(int(self.value))
    return sp.Float(self.value)


class VariableNode(Node):
  __slots__ = ('name', 'value', 'value_set')

  def __init__(self, name: str, value: Optional[float] = None):
    self.name = name
    self.value: Optional[float] = None
    self.value_set = False
    if value is not None:
      self.set_value(value)

  def get_type(self) -> NodeType:
    return NodeType.VARIABLE

  def is_variable(self) -> bool:
    return True

  def set_value(self, value: float):
    self.value = float(value)
    self.value_set = True

  def set_variable(self, name: str, value: float):
    if self.name == name:
      self.set_value(value)

  def evaluate(self, data: Bindings) -> np.ndarray:
    if self.name in data:
      return np.asarray(data[self.name], dtype=np.float64)
    if self.value_set:
      return np.asarray(self.value, dtype=np.float64)
    raise UnboundVariableError(self.name)

  def evaluates_constant(self, variables: Collection[str]) -> bool:
    # A listed name is never constant, even when bound; any other name
    # counts as a known constant only once it has a value
    return self.name not in variables and self.value_set

  def to_string(self) -> str:
    return self.name

  def to_latex(self) -> str:
    return self.name

  def clone(self) -> 'VariableNode':
    return VariableNode(self.name, self.value if self.value_set else None)

  def accept(self, visitor):
    visitor.visit_variable(self)

  def to_sympy(self):
    return sp.Symbol(self.name)


class Term(NamedTuple):
  expression: Node
  positive: bool


class SequenceNode(Node):
  """Ordered list of signed terms shared by addition and multiplication.

  The sign of a term means add/subtract for AdditionNode and
  multiply/divide for MultiplicationNode. Order only affects rendering.
  """

  __slots__ = ('terms',)

  POSITIVE_SEPARATOR = '+'
  NEGATIVE_SEPARATOR = '-'

  def __init__(self, a: Optional[Node] = None, positive_a: bool = True,
               b: Optional[Node] = None, positive_b: bool = True):
    self.terms: List[Term] = []
    if a is not None:
      self.add(a, positive_a)
    if b is not None:
      self.add(b, positive_b)

  def add(self, expression: Node, positive: bool = True):
    self.terms.append(Term(_check_node(expression), bool(positive)))

  def get_terms(self) -> Tuple[Term, ...]:
    return tuple(self.terms)

  def __len__(self) -> int:
    return len(self.terms)

  def get_child_nodes(self) -> List[Node]:
    return [t.expression for t in self.terms]

  def make_string(self, positive_separator: str, negative_separator: str) -> str:
    parts = []
    for i, t in enumerate(self.terms):
      if i > 0 or not t.positive:
        parts.append(positive_separator if t.positive else negative_separator)
      parts.append('(' + t.expression.to_string() + ')')
    return ''.join(parts)

  def to_string(self) -> str:
    return self.make_string(self.POSITIVE_SEPARATOR, self.NEGATIVE_SEPARATOR)

  def _signed_values(self, data: Bindings):
    values = [t.expression.evaluate(data) for t in self.terms]
    signs = [t.positive for t in self.terms]
    return values, signs

  def clone(self) -> 'SequenceNode':
    copy = type(self)()
    for t in self.terms:
      copy.add(t.expression.clone(), t.positive)
    return copy


class AdditionNode(SequenceNode):
  __slots__ = ()

  def get_type(self) -> NodeType:
    return NodeType.ADDITION

  def evaluate(self, data: Bindings) -> np.ndarray:
    return evaluate_sum(*self._signed_values(data))

  @staticmethod
  def needs_brackets(child: Node, is_first: bool, positive: bool) -> bool:
    if child.get_type() == NodeType.ADDITION:
      return (not is_first) or (not positive)
    return False

  def to_latex(self) -> str:
    parts = []
    for i, t in enumerate(self.terms):
      first = i == 0
      if not first or not t.positive:
        parts.append('+' if t.positive else '-')
      latex = t.expression.to_latex()
      if self.needs_brackets(t.expression, first, t.positive):
        latex = '(' + latex + ')'
      parts.append(latex)
    return ''.join(parts)

  def accept(self, visitor):
    visitor.visit_addition(self)

  def to_sympy(self):
    return sp.Add(*[t.expression.to_sympy() if t.positive else -t.expression.to_sympy()
                    for t in self.terms])


class MultiplicationNode(SequenceNode):
  __slots__ = ()

  POSITIVE_SEPARATOR = '*'
  NEGATIVE_SEPARATOR = '/'

  def get_type(self) -> NodeType:
    return NodeType.MULTIPLICATION

  def evaluate(self, data: Bindings) -> np.ndarray:
    return evaluate_product(*self._signed_values(data))

  def to_latex(self) -> str:
    numerator = ''
    denominator = ''
    for t in self.terms:
      latex = t.expression.to_latex()
      if t.expression.get_type() == NodeType.ADDITION:
        latex = '(' + latex + ')'
      if t.positive:
        numerator += latex
      else:
        denominator += latex

    if numerator == '':
      numerator = '1'
    if denominator == '':
      return numerator
    return '{' + numerator + '}/{' + denominator + '}'

  def accept(self, visitor):
    visitor.visit_multiplication(self)

  def to_sympy(self):
    return sp.Mul(*[t.expression.to_sympy() if t.positive else sp.Pow(t.expression.to_sympy(), -1)
                    for t in self.terms])


class ExponentiationNode(Node):
  __slots__ = ('base', 'exponent')

  def __init__(self, base: Node, exponent: Node):
    self.base = _check_node(base)
    self.exponent = _check_node(exponent)

  def get_type(self) -> NodeType:
    return NodeType.EXPONENTIATION

  def get_child_nodes(self) -> List[Node]:
    return [self.base, self.exponent]

  def evaluate(self, data: Bindings) -> np.ndarray:
    return evaluate_power(self.base.evaluate(data), self.exponent.evaluate(data))

  def to_string(self) -> str:
    return f"({self.base.to_string()})^({self.exponent.to_string()})"

  def to_latex(self) -> str:
    base = self.base.to_latex()
    if self.base.get_type() not in (NodeType.CONSTANT, NodeType.VARIABLE):
      base = '\\left(' + base + '\\right)'
    return '{' + base + '}^{' + self.exponent.to_latex() + '}'

  def clone(self) -> 'ExponentiationNode':
    return ExponentiationNode(self.base.clone(), self.exponent.clone())

  def accept(self, visitor):
    visitor.visit_exponentiation(self)

  def to_sympy(self):
    return sp.Pow(self.base.to_sympy(), self.exponent.to_sympy())


class FunctionNode(Node):
  __slots__ = ('function', 'argument')

  def __init__(self, function: Union[FunctionId, int], argument: Node):
    # Ids without an evaluation rule are rejected at construction
    self.function = check_supported(function)
    self.argument = _check_node(argument)

  def get_type(self) -> NodeType:
    return NodeType.FUNCTION

  def get_name(self) -> str:
    return function_to_name(self.function)

  def get_child_nodes(self) -> List[Node]:
    return [self.argument]

  def evaluate(self, data: Bindings) -> np.ndarray:
    return evaluate_function(self.argument.evaluate(data), self.function)

  def to_string(self) -> str:
    return f"{self.get_name()}({self.argument.to_string()})"

  def to_latex(self) -> str:
    argument = self.argument.to_latex()
    if self.function == FunctionId.EXP:
      return 'e^{' + argument + '}'
    if self.function == FunctionId.SQRT:
      return '\\sqrt{' + argument + '}'
    return '\\mathrm{' + self.get_name() + '}\\left(' + argument + '\\right)'

  def clone(self) -> 'FunctionNode':
    return FunctionNode(self.function, self.argument.clone())

  def accept(self, visitor):
    visitor.visit_function(self)

  def to_sympy(self):
    return SYMPY_FUNCTIONS[self.function](self.argument.to_sympy())


class PlaceholderNode(Node):
  """Named structural hole. Always constant and evaluates to 0."""

  __slots__ = ('name',)

  def __init__(self, name: str):
    self.name = name

  def get_type(self) -> NodeType:
    return NodeType.PLACEHOLDER

  def evaluate(self, data: Bindings) -> np.ndarray:
    return np.asarray(0.0, dtype=np.float64)

  def evaluates_constant(self, variables: Collection[str]) -> bool:
    return True

  def to_string(self) -> str:
    return self.name

  def to_latex(self) -> str:
    return self.name

  def clone(self) -> 'PlaceholderNode':
    return PlaceholderNode(self.name)

  def accept(self, visitor):
    visitor.visit_placeholder(self)

  def to_sympy(self):
    return sp.Symbol(self.name)
