import pytest
import sympy as sp

from formulary import (
  AdditionNode, ConstantNode, Equation, MultiplicationNode, UnboundVariableError, VariableNode
)


@pytest.fixture
def linear():
  # 2x - 4 = y
  lhs = AdditionNode(MultiplicationNode(ConstantNode(2), True, VariableNode("x"), True), True,
                     ConstantNode(4), False)
  return Equation(lhs, VariableNode("y"))


def test_text_forms(linear):
  assert str(linear) == "((2)*(x))-(4) = y"
  assert linear.to_latex() == "\\mathrm{2}x-\\mathrm{4} = y"
  assert repr(linear) == "Equation('((2)*(x))-(4) = y')"


def test_residual_and_satisfaction(linear):
  assert linear.residual({"x": 3, "y": 2}) == 0
  assert linear.is_satisfied({"x": 3, "y": 2})
  assert not linear.is_satisfied({"x": 3, "y": 2.5})
  with pytest.raises(UnboundVariableError):
    linear.residual({"x": 3})


def test_set_variable_reaches_both_sides(linear):
  linear.set_variable("x", 5)
  linear.set_variable("y", 6)
  assert linear.is_satisfied()


def test_clone_is_independent(linear):
  copy = linear.clone()
  copy.set_variable("x", 1)
  copy.set_variable("y", -2)
  assert copy.is_satisfied()
  with pytest.raises(UnboundVariableError):
    linear.residual()


def test_solution_checks_out(linear):
  linear.set_variable("y", 10)
  result = linear.solve("x")
  assert result.solved
  assert result.equation.rhs.get_value() == 7
  linear.set_variable("x", result.equation.rhs.get_value())
  assert linear.is_satisfied()


def test_to_sympy(linear):
  x, y = sp.symbols("x y")
  eq = linear.to_sympy()
  assert isinstance(eq, sp.Eq)
  assert sp.solve(eq, x) == [y / 2 + 2]


def test_rejects_non_nodes():
  with pytest.raises(TypeError):
    Equation(VariableNode("x"), 3)
