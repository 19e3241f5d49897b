"""Utilities for expression trees."""

from .validator import ExpressionValidator
from .sympy_utils import (
    PlusMinus, Restrict, SketchLatexPrinter, to_latex, from_sympy, parse_expression
)
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type,
    get_constants, get_variables, count_sqrt_branches
)

__all__ = [
    'ExpressionValidator',
    'PlusMinus', 'Restrict', 'SketchLatexPrinter', 'to_latex', 'from_sympy', 'parse_expression',
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type',
    'get_constants', 'get_variables', 'count_sqrt_branches'
]
