import math
from ..core.node import (
  Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode, RestrictToNode
)
from ...errors import PlotConfigurationError


class ExpressionValidator:

  @staticmethod
  def require_single_variable(node: Node) -> str:
    """Return the only free variable of node, raising if there is not exactly one"""
    variables = node.variables()
    if len(variables) != 1:
      names = ', '.join(sorted(variables)) or 'none'
      raise PlotConfigurationError(
        f"A plottable expression needs exactly one free variable, "
        f"{node.to_string()} has {len(variables)} ({names})"
      )
    return next(iter(variables))

  @staticmethod
  def is_plottable(node: Node) -> bool:
    return (len(node.variables()) == 1
            and ExpressionValidator.is_valid_expression(node))

  @staticmethod
  def is_valid_expression(node: Node) -> bool:
    return ExpressionValidator._is_structurally_valid_recursive(node)

  @staticmethod
  def _is_structurally_valid_recursive(node: Node) -> bool:
    if isinstance(node, ConstantNode):
        return True

    elif isinstance(node, VariableNode):
        return bool(node.name)

    elif isinstance(node, BinaryOpNode):
        return (ExpressionValidator._is_structurally_valid_recursive(node.left) and
                ExpressionValidator._is_structurally_valid_recursive(node.right))

    elif isinstance(node, RestrictToNode):
        if math.isnan(node.extent.min) or math.isnan(node.extent.max):
            return False
        return ExpressionValidator._is_structurally_valid_recursive(node.operand)

    elif isinstance(node, UnaryOpNode):
        return ExpressionValidator._is_structurally_valid_recursive(node.operand)

    return False
