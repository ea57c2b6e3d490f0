import numpy as np
import pytest
import sympy as sp

from formulary import (
  AdditionNode, ConstantNode, ExponentiationNode, Expression, ExpressionValidator, FunctionId,
  FunctionNode, MultiplicationNode, PlaceholderNode, SymPyConverter, UnboundVariableError, VariableNode
)
from formulary.expression_tree.utils import (
  apply_to_all_nodes, calculate_tree_depth, clone_tree, collect_subtree_patterns,
  find_nodes_by_type, get_all_nodes, get_constants, get_variable_names,
  get_variable_usage_counts, get_variables
)


@pytest.fixture
def kinetic():
  # 0.5 * m * v^2
  return MultiplicationNode(ConstantNode(0.5), True,
                            MultiplicationNode(VariableNode("m"), True,
                                               ExponentiationNode(VariableNode("v"), ConstantNode(2)), True), True)


def test_expression_wrapper(kinetic):
  expr = Expression(kinetic)
  assert expr.to_string() == "(0.5)*((m)*((v)^(2)))"
  assert str(expr) == expr.to_string()
  assert expr.get_value({"m": 2, "v": 3}) == 9
  assert expr.count() == 7
  assert expr.depth() == 4
  assert expr.free_variables() == ["m", "v"]


def test_expression_vectorised_evaluate(kinetic):
  expr = Expression(kinetic)
  result = expr.evaluate({"m": np.array([1.0, 2.0, 4.0]), "v": np.array([2.0, 2.0, 1.0])})
  np.testing.assert_allclose(result, [2.0, 4.0, 2.0])

  constant = Expression(ConstantNode(3))
  np.testing.assert_allclose(constant.evaluate({"t": np.arange(4)}), [3.0, 3.0, 3.0, 3.0])
  assert constant.evaluate({}).shape == ()


def test_expression_function_evaluate():
  expr = Expression(FunctionNode(FunctionId.SIN, VariableNode("t")))
  t = np.linspace(0, np.pi, 5)
  np.testing.assert_allclose(expr.evaluate({"t": t}), np.sin(t), atol=1e-12)


def test_expression_lambdify(kinetic):
  f = Expression(kinetic).lambdify(["m", "v"])
  assert f(2, 3) == pytest.approx(9.0)
  g = Expression(kinetic).lambdify()
  np.testing.assert_allclose(g(np.array([1.0, 2.0]), np.array([2.0, 1.0])), [2.0, 1.0])


def test_expression_clone_and_binding(kinetic):
  expr = Expression(kinetic)
  copy = expr.clone()
  copy.set_variable("m", 1)
  copy.set_variable("v", 4)
  assert copy.get_value() == 8
  assert expr.to_latex() == copy.to_latex()
  with pytest.raises(UnboundVariableError):
    expr.get_value()


def test_expression_requires_node():
  with pytest.raises(TypeError):
    Expression("x + 1")


def test_to_sympy_structure(kinetic):
  m, v = sp.symbols("m v")
  assert sp.simplify(Expression(kinetic).to_sympy() - m * v ** 2 / 2) == 0
  node = AdditionNode(ConstantNode(1), True, FunctionNode(FunctionId.LN, VariableNode("x")), False)
  assert node.to_sympy() == 1 - sp.log(sp.Symbol("x"))


def test_sympy_converter():
  converter = SymPyConverter()
  node = MultiplicationNode(VariableNode("a"), True, VariableNode("a"), False)
  assert converter.is_equivalent(node, ConstantNode(1))
  assert not converter.is_equivalent(VariableNode("a"), ConstantNode(1))
  assert converter.latex(ExponentiationNode(VariableNode("x"), ConstantNode(2))) == "x^{2}"
  assert converter.free_symbol_names(AdditionNode(VariableNode("p"), True, VariableNode("q"), True)) == {"p", "q"}


def test_traversal_orders(kinetic):
  breadth = [n.to_string() for n in get_all_nodes(kinetic)]
  depth = [n.to_string() for n in get_all_nodes(kinetic, 'depth_first')]
  assert breadth[:3] == [kinetic.to_string(), "0.5", "(m)*((v)^(2))"]
  assert depth[-2:] == ["v", "2"]
  assert len(breadth) == len(depth) == kinetic.count()
  with pytest.raises(ValueError):
    get_all_nodes(kinetic, 'sideways')


def test_tree_queries(kinetic):
  assert calculate_tree_depth(kinetic) == kinetic.get_depth()
  assert [c.value for c in get_constants(kinetic)] == [0.5, 2.0]
  assert sorted(v.name for v in get_variables(kinetic)) == ["m", "v"]
  assert len(find_nodes_by_type(kinetic, MultiplicationNode)) == 2
  assert get_variable_names(kinetic) == {"m", "v"}
  assert collect_subtree_patterns(kinetic)[0] == kinetic.to_string()


def test_usage_counts_and_apply():
  node = AdditionNode(VariableNode("x"), True,
                      MultiplicationNode(VariableNode("x"), True, VariableNode("y"), True), True)
  assert get_variable_usage_counts(node) == {"x": 2, "y": 1}
  assert apply_to_all_nodes(node, lambda n: n.name, VariableNode) == ["x", "x", "y"]
  copy = clone_tree(node)
  assert copy is not node and copy.to_string() == node.to_string()


def test_validator_accepts_well_formed_trees(kinetic):
  assert ExpressionValidator.is_valid_expression(kinetic)
  assert ExpressionValidator.is_valid_expression(PlaceholderNode("p"))


def test_validator_reports_problems():
  node = AdditionNode(MultiplicationNode(), True, ConstantNode(float("inf")), True)
  errors = ExpressionValidator.validation_errors(node)
  assert len(errors) == 2
  assert errors[0] == "root.terms[0]: MultiplicationNode has no terms"
  assert "not finite" in errors[1]
  assert not ExpressionValidator.is_valid_expression(node)

  broken = FunctionNode(FunctionId.SIN, VariableNode("x"))
  broken.function = FunctionId.COTH
  broken.argument = "x"
  errors = ExpressionValidator.validation_errors(broken)
  assert any("no evaluation rule" in e for e in errors)
  assert any("expected a Node" in e for e in errors)
