"""Equations and the variable isolation solver."""

from .equation import Equation, SolveResult
from .solver import EquationSolver, SolverState

__all__ = ["Equation", "SolveResult", "EquationSolver", "SolverState"]
