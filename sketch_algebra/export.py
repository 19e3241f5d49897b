"""
Export of shape equations as graphing-calculator statements.

Statements are LaTeX in the form ``y=...``. A restriction at the top of the
tree becomes a trailing ``\\left\\{lo\\le y\\le hi\\right\\}`` condition on the
dependent variable, the way graphing calculators write domain limits.
"""

from typing import Iterable, List, Union

from .expression_tree import Expression, Node, RestrictToNode, to_latex
from .expression_tree.core.node import format_number
from .logging_system import LogLevel, log_info
from .session import EditingSession
from .shapes import Line, Shape, other_axis


def _root(expression: Union[Expression, Node]) -> Node:
  return expression.root if isinstance(expression, Expression) else expression


def to_statement(expression: Union[Expression, Node], dependent: str = 'y') -> str:
  root = _root(expression)
  if isinstance(root, RestrictToNode):
    low = format_number(root.extent.min)
    high = format_number(root.extent.max)
    condition = r"\left\{%s\le %s\le %s\right\}" % (low, dependent, high)
    return f"{dependent}={to_latex(root.operand)}{condition}"
  return f"{dependent}={to_latex(root)}"


def describe(expression: Union[Expression, Node], dependent: str = 'y') -> str:
  """Plain text equation for display"""
  return f"{dependent} = {_root(expression).to_string()}"


def shape_statement(shape: Shape) -> str:
  if isinstance(shape, Line) and shape.is_vertical:
    # the tree keeps a 0*y term only so the plotter has a free variable
    return f"x={format_number(float(shape.start.x))}"
  return to_statement(shape.to_expression(), other_axis(shape.variable))


def export_session(session: EditingSession) -> List[str]:
  statements = [shape_statement(shape) for _, shape in session.items()]
  log_info(f"Exported {len(statements)} statement(s)", LogLevel.MODERATE)
  return statements


def to_clipboard_text(statements: Iterable[str]) -> str:
  return "\n".join(statements)
