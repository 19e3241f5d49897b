import sympy as sp
from sympy.printing.latex import LatexPrinter
from typing import Optional
from ..core.node import (
  Node, VariableNode, ConstantNode, AddNode, DivideNode,
  PrincipalSqrtNode, SqrtNode, RestrictToNode, multiply
)
from ...extent import Extent
from ...logging_system import log_debug


class PlusMinus(sp.Function):
  """Unevaluated marker for the two-valued root, printed as \\pm"""
  nargs = 1


class Restrict(sp.Function):
  """Unevaluated Restrict(value, low, high)"""
  nargs = 3


class SketchLatexPrinter(LatexPrinter):
  """LaTeX printer that understands the engine's non-sympy constructs"""

  def _print_PlusMinus(self, expr):
    return r"\pm " + self._print(expr.args[0])

  def _print_Restrict(self, expr):
    value, low, high = (self._print(arg) for arg in expr.args)
    return r"\left\{%s\le %s\le %s:%s\right\}" % (low, value, high, value)

  def _print(self, expr, **kwargs):
    # NaN carries its own _latex hook, which runs before any _print_NaN
    if expr is sp.nan:
      return r"\operatorname{undefined}"
    return super()._print(expr, **kwargs)


def to_latex(node: Node) -> str:
  """LaTeX rendering of an expression tree"""
  return SketchLatexPrinter().doprint(node.to_sympy())


def from_sympy(expr: sp.Expr) -> Node:
  """Convert a sympy expression into an engine tree.

  Supported: symbols, real numbers, sums, products, integer powers, square
  roots (``x**(1/2)``), ``PlusMinus(sqrt(..))`` and ``Restrict``. Anything
  else raises ValueError.
  """
  # 1/0 parses to complex infinity; both it and nan are the undefined value
  if expr is sp.nan or expr.is_infinite:
    return ConstantNode.undefined()

  if expr.is_Symbol:
    return VariableNode(expr.name)

  if expr.is_Number:
    if not expr.is_real:
      raise ValueError(f"Unsupported non-real number: {expr}")
    return ConstantNode(float(expr))

  if isinstance(expr, PlusMinus):
    inner = expr.args[0]
    if not (isinstance(inner, sp.Pow) and inner.exp == sp.Rational(1, 2)):
      raise ValueError(f"pm() only accepts a square root, got {inner}")
    return SqrtNode(from_sympy(inner.base))

  if isinstance(expr, Restrict):
    value, low, high = expr.args
    if not (low.is_Number and high.is_Number):
      raise ValueError(f"Restriction bounds must be numbers, got {low} and {high}")
    return RestrictToNode(from_sympy(value), Extent(float(low), float(high)))

  if isinstance(expr, sp.Add):
    result = from_sympy(expr.args[0])
    for arg in expr.args[1:]:
      result = AddNode(result, from_sympy(arg))
    return result

  if isinstance(expr, sp.Mul):
    numerator, denominator = expr.as_numer_denom()
    if denominator != 1:
      return DivideNode(from_sympy(numerator), from_sympy(denominator))
    result = from_sympy(expr.args[0])
    for arg in expr.args[1:]:
      result = multiply(result, from_sympy(arg))
    return result

  if isinstance(expr, sp.Pow):
    return _pow_to_node(expr)

  raise ValueError(f"Unsupported expression: {expr}")


def _pow_to_node(expr: sp.Pow) -> Node:
  base, exponent = expr.args
  if exponent == sp.Rational(1, 2):
    return PrincipalSqrtNode(from_sympy(base))
  if exponent == sp.Rational(-1, 2):
    return DivideNode(ConstantNode(1.0), PrincipalSqrtNode(from_sympy(base)))
  if not exponent.is_Integer or exponent == 0:
    raise ValueError(f"Unsupported exponent {exponent} in {expr}")

  power = abs(int(exponent))
  base_node = from_sympy(base)
  result: Optional[Node] = None
  for _ in range(power):
    result = base_node if result is None else multiply(result, base_node)
  if exponent < 0:
    return DivideNode(ConstantNode(1.0), result)
  return result


def parse_expression(text: str) -> Node:
  """Parse user typed text such as ``pm(sqrt(4 - x**2))`` into a tree"""
  local_names = {'pm': PlusMinus, 'restrict': Restrict, 'sqrt': sp.sqrt}
  try:
    expr = sp.sympify(text.replace('^', '**'), locals=local_names)
  except (sp.SympifyError, SyntaxError, TypeError) as error:
    raise ValueError(f"Could not parse expression {text!r}: {error}") from error
  node = from_sympy(expr)
  log_debug(f"Parsed {text!r} as {node.to_string()}")
  return node
