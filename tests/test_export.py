from sketch_algebra import (
    AddNode, ConstantNode, EditingSession, Ellipse, Expression, Line, Parabola, Point,
    SqrtNode, VariableNode, describe, export_session, multiply, shape_statement,
    to_clipboard_text, to_statement
)
from sketch_algebra.expression_tree import to_latex


def test_statement_for_plain_expression():
    expression = AddNode(multiply(ConstantNode(2), VariableNode("x")), ConstantNode(1))
    statement = to_statement(expression)
    assert statement.startswith("y=")
    assert "2" in statement and "x" in statement and "1" in statement


def test_top_level_restriction_becomes_a_condition():
    statement = shape_statement(Parabola(Point(0, 0), Point(2, 4)))
    assert statement.startswith("y=")
    assert statement.endswith(r"\left\{0\le y\le 4\right\}")


def test_sideways_parabola_is_written_for_x():
    statement = shape_statement(Parabola(Point(1, 1), Point(3, 2), axis="y"))
    assert statement.startswith("x=")
    assert statement.endswith(r"\left\{1\le x\le 3\right\}")


def test_two_valued_root_is_written_with_plus_minus():
    statement = to_statement(Expression(SqrtNode(VariableNode("x"))))
    assert statement == r"y=\pm \sqrt{x}"


def test_undefined_constant_latex():
    assert to_latex(ConstantNode.undefined()) == r"\operatorname{undefined}"


def test_describe():
    line = Line(Point(0, 1), Point(2, 5))
    assert describe(line.to_expression()) == "y = ((2 * x) + 1)"
    assert describe(VariableNode("y"), "x") == "x = y"


def test_export_session_and_clipboard_text():
    session = EditingSession()
    session.add(Line(Point(0, 1), Point(2, 5)))
    session.add(Ellipse(Point(0, 0), 2, 1))
    session.add(Line(Point(1, 0), Point(1, 3)))

    statements = export_session(session)
    assert len(statements) == 3
    assert statements[0].startswith("y=")
    assert r"\pm" in statements[1]
    assert statements[2] == "x=1"
    assert to_clipboard_text(statements) == "\n".join(statements)


def test_undefined_inside_an_expression_latex():
    latex = to_latex(AddNode(VariableNode("x"), ConstantNode.undefined()))
    assert r"\operatorname{undefined}" in latex
    assert "NaN" not in latex


def test_vertical_line_is_written_as_a_constant_x():
    assert shape_statement(Line(Point(1, 0), Point(1, 3))) == "x=1"
    assert shape_statement(Line(Point(-2.5, 0), Point(-2.5, 3))) == "x=-2.5"
