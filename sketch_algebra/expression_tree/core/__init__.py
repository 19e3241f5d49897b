"""Core expression tree components."""

from .node import (
    Node, VariableNode, ConstantNode, BinaryOpNode, UnaryOpNode,
    AddNode, DivideNode, PrincipalSqrtNode, SqrtNode, RestrictToNode,
    multiply, subtract, negate, square, is_reciprocal, format_number
)
from .operators import (
    NodeType, UNDEFINED, BINARY_SYMBOLS,
    is_undefined, fold_add, fold_divide, fold_multiply, fold_principal_sqrt
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'UnaryOpNode',
    'AddNode', 'DivideNode', 'PrincipalSqrtNode', 'SqrtNode', 'RestrictToNode',
    'multiply', 'subtract', 'negate', 'square', 'is_reciprocal', 'format_number',
    'NodeType', 'UNDEFINED', 'BINARY_SYMBOLS',
    'is_undefined', 'fold_add', 'fold_divide', 'fold_multiply', 'fold_principal_sqrt'
]
