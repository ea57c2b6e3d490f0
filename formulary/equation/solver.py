"""
Variable isolation by repeated term moving.

Each step looks at the kind of the current left-hand side. For a sum or a
product exactly one term may depend on the target variable: every other
term moves to the right-hand side with its operation inverted, and the
dependent term becomes the new left-hand side. The loop ends when the
left-hand side is the target variable itself (solved) or no rule applies
(unsolvable).
"""

from enum import Enum
from typing import Collection, Optional, Union

from ..expression_tree.core.node import Node, SequenceNode
from ..expression_tree.visitor import ExpressionNodeVisitor
from ..logging_system import LogLevel, log_debug, log_info, log_warning


class SolverState(Enum):
    UNSOLVED = 'unsolved'
    SOLVING = 'solving'
    SOLVED = 'solved'
    UNSOLVABLE = 'unsolvable'


class EquationSolver(ExpressionNodeVisitor):
    """Rewrite state for one attempt at isolating a variable.

    lhs and rhs are replaced step by step; the nodes passed in are never
    mutated, each step builds a fresh sequence node for the right-hand side.
    Every successful step makes lhs a strict subtree of the previous lhs, so
    the loop always terminates. max_steps only caps it further.
    """

    def __init__(self, lhs: Node, rhs: Node, variables: Union[str, Collection[str]],
                 max_steps: Optional[int] = None):
        if isinstance(variables, str):
            variables = [variables]
        self.lhs = lhs
        self.rhs = rhs
        self.variables = frozenset(variables)
        self.max_steps = max_steps
        self.solvable = True
        self.solved = False
        self.steps = 0
        if self._lhs_is_target():
            self.solved = True

    @property
    def state(self) -> SolverState:
        if self.solved:
            return SolverState.SOLVED
        if not self.solvable:
            return SolverState.UNSOLVABLE
        return SolverState.SOLVING if self.steps > 0 else SolverState.UNSOLVED

    def is_finished(self) -> bool:
        return self.solved or not self.solvable

    def _lhs_is_target(self) -> bool:
        return self.lhs.is_variable() and self.lhs.name in self.variables

    def _mark_unsolvable(self, reason: str):
        self.solvable = False
        log_debug(f"Unsolvable at step {self.steps}: {reason}")

    def solve_step(self):
        """Apply one rewrite to the current left-hand side."""
        if self.is_finished():
            return
        self.lhs.accept(self)
        self.steps += 1
        log_debug(f"Step {self.steps}: {self.lhs.to_string()} = {self.rhs.to_string()}")

    def solve(self) -> bool:
        """Drive solve_step() until solved or unsolvable. Returns solved."""
        while not self.is_finished():
            if self.max_steps is not None and self.steps >= self.max_steps:
                log_warning(f"Giving up after {self.steps} steps")
                self.solvable = False
                break
            self.solve_step()

        if self.solved:
            log_info(f"Solved: {self.lhs.to_string()} = {self.rhs.to_string()}", LogLevel.DETAILED)
        else:
            log_info(f"No isolation possible for {sorted(self.variables)}", LogLevel.DETAILED)
        return self.solved

    def visit_variable(self, node):
        if node.name in self.variables:
            self.solved = True
        else:
            self._mark_unsolvable(f"left-hand side is the other variable '{node.name}'")

    def visit_constant(self, node):
        self._mark_unsolvable("left-hand side is a constant")

    def visit_addition(self, node):
        self._move_constant_terms(node)

    def visit_multiplication(self, node):
        self._move_constant_terms(node)

    # No inverse operations for these kinds
    def visit_exponentiation(self, node):
        self._mark_unsolvable("variable inside an exponentiation")

    def visit_function(self, node):
        self._mark_unsolvable(f"variable inside {node.get_name()}()")

    def visit_placeholder(self, node):
        self._mark_unsolvable("left-hand side is a placeholder")

    def _move_constant_terms(self, node: SequenceNode):
        variable_term = None
        constant_terms = []
        for t in node.terms:
            if t.expression.evaluates_constant(self.variables):
                constant_terms.append(t)
            elif variable_term is None:
                variable_term = t
            else:
                self._mark_unsolvable("more than one term depends on the variable")
                return

        if variable_term is None:
            self._mark_unsolvable("no term depends on the variable")
            return

        new_rhs = type(node)(self.rhs, variable_term.positive)
        for t in constant_terms:
            new_rhs.add(t.expression, (not t.positive) if variable_term.positive else t.positive)

        self.rhs = new_rhs
        self.lhs = variable_term.expression
