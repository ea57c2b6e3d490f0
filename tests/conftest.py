import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from formulary import (
  AdditionNode, ConstantNode, ExponentiationNode, MultiplicationNode, VariableNode
)
from formulary.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
  configure_logging(LogLevel.SILENT)
  yield
  configure_logging(LogLevel.SILENT)


@pytest.fixture
def polynomial():
  """x + 2 * x^2 as nested sequences"""
  return AdditionNode(
    VariableNode("x"), True,
    MultiplicationNode(ConstantNode(2), True,
                       ExponentiationNode(VariableNode("x"), ConstantNode(2)), True), True
  )
