from formulary import (
  AdditionNode, ConstantNode, ExponentiationNode, ExpressionNodeVisitor, FunctionId,
  FunctionNode, MultiplicationNode, PlaceholderNode, VariableNode
)


class RecordingVisitor(ExpressionNodeVisitor):

  def __init__(self):
    self.visited = []

  def visit_constant(self, node):
    self.visited.append(("constant", node.to_string()))

  def visit_variable(self, node):
    self.visited.append(("variable", node.name))

  def visit_addition(self, node):
    self.visited.append(("addition", len(node)))

  def visit_multiplication(self, node):
    self.visited.append(("multiplication", len(node)))

  def visit_exponentiation(self, node):
    self.visited.append(("exponentiation", None))

  def visit_function(self, node):
    self.visited.append(("function", node.get_name()))

  def visit_placeholder(self, node):
    self.visited.append(("placeholder", node.name))


def build_tree():
  return AdditionNode(
    MultiplicationNode(ConstantNode(2), True, VariableNode("x"), True), True,
    FunctionNode(FunctionId.SIN, ExponentiationNode(VariableNode("y"), PlaceholderNode("k"))), False
  )


def test_accept_is_shallow():
  visitor = RecordingVisitor()
  build_tree().accept(visitor)
  assert visitor.visited == [("addition", 2)]


def test_accept_dispatches_each_kind():
  visitor = RecordingVisitor()
  for node in (ConstantNode(1), VariableNode("v"), PlaceholderNode("p"),
               FunctionNode(FunctionId.EXP, ConstantNode(0))):
    node.accept(visitor)
  assert [kind for kind, _ in visitor.visited] == ["constant", "variable", "placeholder", "function"]


def test_accept_recursive_is_pre_order():
  visitor = RecordingVisitor()
  build_tree().accept_recursive(visitor)
  assert visitor.visited == [
    ("addition", 2),
    ("multiplication", 2),
    ("constant", "2"),
    ("variable", "x"),
    ("function", "sin"),
    ("exponentiation", None),
    ("variable", "y"),
    ("placeholder", "k"),
  ]


def test_default_visitor_is_a_no_op():
  tree = build_tree()
  before = tree.to_string()
  tree.accept_recursive(ExpressionNodeVisitor())
  assert tree.to_string() == before


def test_partial_visitor_only_sees_its_kinds():
  class CountConstants(ExpressionNodeVisitor):
    def __init__(self):
      self.total = 0.0

    def visit_constant(self, node):
      self.total += node.value

  visitor = CountConstants()
  AdditionNode(ConstantNode(1.5), True,
               MultiplicationNode(ConstantNode(2), True, VariableNode("x"), False), True).accept_recursive(visitor)
  assert visitor.total == 3.5
