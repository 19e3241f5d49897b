# Python

"""Sketch Algebra

Symbolic expression engine and function plotter behind a 2D shape
sketching tool whose shapes export as graphing-calculator equations.
"""

from .expression_tree import (
  Expression, Node, VariableNode, ConstantNode, AddNode, DivideNode,
  PrincipalSqrtNode, SqrtNode, RestrictToNode,
  multiply, subtract, negate, square
)
from .extent import Extent, modulo
from .errors import SketchAlgebraError, PlotConfigurationError, SimplificationInvariantError
from .config import PlotSettings, DEFAULT_SETTINGS
from .plotter import FunctionPlotter, sample_polylines
from .shapes import Point, ControlPoint, Line, Ellipse, Parabola, move_control_point
from .session import EditingSession, Selection
from .export import to_statement, describe, shape_statement, export_session, to_clipboard_text
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "VariableNode", "ConstantNode", "AddNode", "DivideNode",
  "PrincipalSqrtNode", "SqrtNode", "RestrictToNode",
  "multiply", "subtract", "negate", "square",
  "Extent", "modulo",
  "SketchAlgebraError", "PlotConfigurationError", "SimplificationInvariantError",
  "PlotSettings", "DEFAULT_SETTINGS",
  "FunctionPlotter", "sample_polylines",
  "Point", "ControlPoint", "Line", "Ellipse", "Parabola", "move_control_point",
  "EditingSession", "Selection",
  "to_statement", "describe", "shape_statement", "export_session", "to_clipboard_text",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
