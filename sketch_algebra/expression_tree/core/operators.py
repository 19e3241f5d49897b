import math
import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  VARIABLE = 0
  CONSTANT = 1
  ADD = 2
  DIVIDE = 3
  PRINCIPAL_SQRT = 4
  SQRT = 5
  RESTRICT_TO = 6

# The undefined marker carried by ConstantNode
UNDEFINED = math.nan

BINARY_SYMBOLS = {NodeType.ADD: '+', NodeType.DIVIDE: '/'}

@numba.njit(cache=True, inline='always')
def is_undefined(value):
  return np.isnan(value)

@numba.njit(cache=True, inline='always')
def _finite_or_undefined(value):
  if np.isfinite(value):
    return value
  return np.nan

@numba.njit(cache=True)
def fold_add(left, right):
  if is_undefined(left) or is_undefined(right):
    return np.nan
  return _finite_or_undefined(left + right)

@numba.njit(cache=True)
def fold_divide(left, right):
  if is_undefined(left) or is_undefined(right):
    return np.nan
  if right == 0.0:
    return np.nan
  return _finite_or_undefined(left / right)

@numba.njit(cache=True)
def fold_multiply(left, right):
  # a / (1 / b) folds as a product so a zero factor stays defined
  if is_undefined(left) or is_undefined(right):
    return np.nan
  return _finite_or_undefined(left * right)

@numba.njit(cache=True)
def fold_principal_sqrt(operand):
  if is_undefined(operand) or operand < 0.0:
    return np.nan
  return _finite_or_undefined(math.sqrt(operand))
