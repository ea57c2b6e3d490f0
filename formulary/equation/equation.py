from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import sympy as sp

from ..expression_tree.core.node import Node, Bindings
from ..logging_system import LogLevel, log_info
from .solver import EquationSolver


@dataclass
class SolveResult:
    equation: Optional[Equation]   # variable = expression, None unless solved
    variable: str
    solved: bool
    solvable: bool
    steps: int = 0

    def __bool__(self) -> bool:
        return self.solved


class Equation:
    """Ordered pair of expressions that are equal in value."""

    __slots__ = ('lhs', 'rhs')

    def __init__(self, lhs: Node, rhs: Node):
        if not isinstance(lhs, Node) or not isinstance(rhs, Node):
            raise TypeError("Both sides of an equation must be Node instances")
        self.lhs = lhs
        self.rhs = rhs

    def solve(self, variable_name: str, max_steps: Optional[int] = None) -> SolveResult:
        """
        Isolate variable_name on the left-hand side.

        Exactly one side may depend on the variable. The solver works on
        clones, so this equation is left untouched.

        Returns:
            SolveResult; result.equation is 'variable = expression' when solved
        """
        variables = {variable_name}
        lhs_constant = self.lhs.evaluates_constant(variables)
        rhs_constant = self.rhs.evaluates_constant(variables)

        if not lhs_constant and rhs_constant:
            variable_side, constant_side = self.lhs, self.rhs
        elif lhs_constant and not rhs_constant:
            variable_side, constant_side = self.rhs, self.lhs
        else:
            where = 'neither side' if lhs_constant else 'both sides'
            log_info(f"Cannot solve for '{variable_name}': it appears on {where}", LogLevel.DETAILED)
            return SolveResult(None, variable_name, solved=False, solvable=False)

        solver = EquationSolver(variable_side.clone(), constant_side.clone(), variables,
                                max_steps=max_steps)
        solver.solve()
        solution = Equation(solver.lhs, solver.rhs) if solver.solved else None
        return SolveResult(solution, variable_name, solved=solver.solved,
                           solvable=solver.solvable, steps=solver.steps)

    def set_variable(self, name: str, value: float):
        self.lhs.set_variable(name, value)
        self.rhs.set_variable(name, value)

    def residual(self, bindings: Optional[Bindings] = None) -> float:
        """lhs - rhs under the given bindings"""
        return self.lhs.get_value(bindings) - self.rhs.get_value(bindings)

    def is_satisfied(self, bindings: Optional[Bindings] = None,
                     rel_tol: float = 1e-9, abs_tol: float = 1e-12) -> bool:
        return bool(np.isclose(self.lhs.get_value(bindings), self.rhs.get_value(bindings),
                               rtol=rel_tol, atol=abs_tol))

    def clone(self) -> Equation:
        return Equation(self.lhs.clone(), self.rhs.clone())

    def to_string(self) -> str:
        return f"{self.lhs.to_string()} = {self.rhs.to_string()}"

    def to_latex(self) -> str:
        return f"{self.lhs.to_latex()} = {self.rhs.to_latex()}"

    def to_sympy(self) -> sp.Eq:
        return sp.Eq(self.lhs.to_sympy(), self.rhs.to_sympy(), evaluate=False)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Equation({self.to_string()!r})"
