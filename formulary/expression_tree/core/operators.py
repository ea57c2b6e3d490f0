import numpy as np
import numba
from enum import IntEnum
from typing import Dict, FrozenSet, Union

from ...exceptions import UnsupportedFunctionError

class NodeType(IntEnum):
  VARIABLE = 1
  CONSTANT = 2
  ADDITION = 3
  MULTIPLICATION = 4
  EXPONENTIATION = 5
  FUNCTION = 6
  PLACEHOLDER = 7

class FunctionId(IntEnum):
  SIN = 1
  COS = 2
  TAN = 3
  ASIN = 4
  ACOS = 5
  ATAN = 6
  # Reciprocal trig
  SEC = 7
  COSEC = 8
  COT = 9
  # Hyperbolic
  SINH = 10
  COSH = 11
  TANH = 12
  ASINH = 13
  ACOSH = 14
  ATANH = 15
  SECH = 16
  CSCH = 17
  COTH = 18

  SQRT = 19
  EXP = 20
  LN = 21
  LOG = 22
  LOG2 = 23
  ERF = 24
  ERFC = 25

# Mapping dictionaries
FUNCTION_NAME_MAP: Dict[str, FunctionId] = {f.name.lower(): f for f in FunctionId}
FUNCTION_ID_MAP: Dict[FunctionId, str] = {f: name for name, f in FUNCTION_NAME_MAP.items()}

# Functions with an evaluation rule; the rest of the table is names only
EVALUATED_FUNCTIONS: FrozenSet[FunctionId] = frozenset({
  FunctionId.SIN, FunctionId.COS, FunctionId.TAN,
  FunctionId.ASIN, FunctionId.ACOS, FunctionId.ATAN,
  FunctionId.SQRT, FunctionId.EXP, FunctionId.LN,
})

# Plain ints for the numba kernel
_SIN = int(FunctionId.SIN)
_COS = int(FunctionId.COS)
_TAN = int(FunctionId.TAN)
_ASIN = int(FunctionId.ASIN)
_ACOS = int(FunctionId.ACOS)
_ATAN = int(FunctionId.ATAN)
_SQRT = int(FunctionId.SQRT)
_EXP = int(FunctionId.EXP)
_LN = int(FunctionId.LN)


def function_from_name(name: str) -> FunctionId:
  """Case-insensitive lookup of a function id by name."""
  try:
    return FUNCTION_NAME_MAP[name.lower()]
  except KeyError:
    raise UnsupportedFunctionError(name) from None


def function_to_name(function: Union[FunctionId, int]) -> str:
  try:
    return FUNCTION_ID_MAP[FunctionId(function)]
  except ValueError:
    raise UnsupportedFunctionError(function) from None


def check_supported(function: Union[FunctionId, int]) -> FunctionId:
  """Return the id as a FunctionId, raising if it cannot be evaluated."""
  try:
    function = FunctionId(function)
  except ValueError:
    raise UnsupportedFunctionError(function) from None
  if function not in EVALUATED_FUNCTIONS:
    raise UnsupportedFunctionError(FUNCTION_ID_MAP[function])
  return function

@numba.njit(cache=True)
def evaluate_function_fast(operand_val, function_id):
  if function_id == _SIN:
    return np.sin(operand_val)
  elif function_id == _COS:
    return np.cos(operand_val)
  elif function_id == _TAN:
    return np.tan(operand_val)
  elif function_id == _ASIN:
    return np.arcsin(operand_val)
  elif function_id == _ACOS:
    return np.arccos(operand_val)
  elif function_id == _ATAN:
    return np.arctan(operand_val)
  elif function_id == _SQRT:
    return np.sqrt(operand_val)
  elif function_id == _EXP:
    return np.exp(operand_val)
  elif function_id == _LN:
    return np.log(operand_val)
  # Callers reject unsupported ids before reaching the kernel
  return np.full_like(operand_val, np.nan)


def evaluate_function(operand_val: np.ndarray, function: Union[FunctionId, int]) -> np.ndarray:
  function = check_supported(function)
  operand_val = np.asarray(operand_val, dtype=np.float64)
  # The kernel is compiled for flat contiguous arrays only
  flat = np.ascontiguousarray(operand_val).reshape(-1)
  with np.errstate(all='ignore'):
    result = evaluate_function_fast(flat, int(function))
  return result.reshape(operand_val.shape)


def evaluate_power(base_val: np.ndarray, exponent_val: np.ndarray) -> np.ndarray:
  with np.errstate(all='ignore'):
    return np.power(np.asarray(base_val, dtype=np.float64), np.asarray(exponent_val, dtype=np.float64))


def evaluate_sum(values, signs) -> np.ndarray:
  """Fold signed terms with + and -, starting from 0.0."""
  total = np.float64(0.0)
  for value, positive in zip(values, signs):
    if positive:
      total = total + value
    else:
      total = total - value
  return np.asarray(total, dtype=np.float64)


def evaluate_product(values, signs) -> np.ndarray:
  """Fold signed terms with * and /, starting from 1.0. Division by zero is not guarded."""
  product = np.float64(1.0)
  with np.errstate(divide='ignore', invalid='ignore'):
    for value, positive in zip(values, signs):
      if positive:
        product = product * value
      else:
        product = product / value
  return np.asarray(product, dtype=np.float64)
