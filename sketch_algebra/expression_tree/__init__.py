"""Expression Tree Module

Immutable algebraic expression trees with multi-valued simplification.
"""

from .expression import Expression
from .core.node import (
    Node,
    VariableNode,
    ConstantNode,
    BinaryOpNode,
    UnaryOpNode,
    AddNode,
    DivideNode,
    PrincipalSqrtNode,
    SqrtNode,
    RestrictToNode,
    multiply,
    subtract,
    negate,
    square
)
from .core.operators import (
    NodeType,
    UNDEFINED,
    fold_add,
    fold_divide,
    fold_multiply,
    fold_principal_sqrt
)
from .utils import ExpressionValidator, to_latex, from_sympy, parse_expression

__all__ = [
    "Expression",
    "Node", "VariableNode", "ConstantNode", "BinaryOpNode", "UnaryOpNode",
    "AddNode", "DivideNode", "PrincipalSqrtNode", "SqrtNode", "RestrictToNode",
    "multiply", "subtract", "negate", "square",
    "NodeType", "UNDEFINED",
    "fold_add", "fold_divide", "fold_multiply", "fold_principal_sqrt",
    "ExpressionValidator", "to_latex", "from_sympy", "parse_expression"
]
