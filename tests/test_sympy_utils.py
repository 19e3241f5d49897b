import math

import pytest
import sympy as sp

from sketch_algebra import (
    ConstantNode, DivideNode, Expression, Extent, PrincipalSqrtNode, RestrictToNode,
    SqrtNode, VariableNode, multiply, subtract
)
from sketch_algebra.expression_tree import from_sympy, parse_expression, to_latex


def test_to_sympy_matches_numeric_value():
    x = VariableNode("x")
    node = DivideNode(subtract(multiply(x, x), ConstantNode(1)), ConstantNode(2))
    value = node.to_sympy().subs(sp.Symbol("x"), 3)
    assert float(value) == 4.0


def test_principal_sqrt_latex():
    assert to_latex(PrincipalSqrtNode(VariableNode("x"))) == r"\sqrt{x}"


def test_restrict_latex_is_piecewise():
    latex = to_latex(RestrictToNode(VariableNode("x"), Extent(0, 1)))
    assert latex == r"\left\{0\le x\le 1:x\right\}"


def test_parse_two_valued_root():
    node = parse_expression("pm(sqrt(4 - x**2))")
    assert isinstance(node, SqrtNode)
    assert Expression(node).evaluate(x=0) == [2.0, -2.0]


def test_parse_caret_power_and_division():
    expression = Expression.from_string("x^2/2 + 1")
    assert expression.evaluate(x=2) == [3.0]


def test_parse_reciprocal_is_undefined_at_zero():
    expression = Expression.from_string("1/x")
    assert expression.evaluate(x=4) == [0.25]
    assert math.isnan(expression.evaluate(x=0)[0])


def test_parse_restriction():
    node = parse_expression("restrict(x, 1, -1)")
    assert node == RestrictToNode(VariableNode("x"), Extent(-1, 1))


def test_parse_principal_root():
    node = parse_expression("sqrt(x)")
    assert node == PrincipalSqrtNode(VariableNode("x"))


def test_from_sympy_rejects_unsupported_functions():
    with pytest.raises(ValueError):
        from_sympy(sp.sin(sp.Symbol("x")))
    with pytest.raises(ValueError):
        from_sympy(sp.Symbol("x") ** sp.Rational(1, 3))


def test_parse_rejects_bad_syntax():
    with pytest.raises(ValueError):
        parse_expression("x +")


def test_from_sympy_undefined():
    assert from_sympy(sp.nan) == ConstantNode.undefined()


def test_round_trip_through_sympy_keeps_values():
    x = VariableNode("x")
    node = SqrtNode(subtract(ConstantNode(9), multiply(x, x)))
    rebuilt = from_sympy(node.to_sympy())
    assert Expression(rebuilt).evaluate(x=0) == Expression(node).evaluate(x=0) == [3.0, -3.0]


def test_division_by_literal_zero_parses_as_undefined():
    assert from_sympy(sp.zoo) == ConstantNode.undefined()
    expression = Expression.from_string("1/0")
    assert expression.root == ConstantNode.undefined()
    assert math.isnan(expression.evaluate()[0])
