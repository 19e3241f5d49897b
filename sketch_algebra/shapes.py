"""
Shapes that derive their equations from a handful of control points.

A shape is not an expression itself; ``to_expression`` synthesises a fresh
tree every time, so an edited shape simply builds a new one. Coefficients
are folded with the engine, which keeps degenerate shapes (a parabola whose
point sits on the vertex's axis, a zero-width ellipse) as undefined curves
instead of raising.
"""

import math
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional, Union

from .config import DEFAULT_SETTINGS
from .extent import Extent
from .logging_system import log_warning
from .expression_tree import (
  Node, VariableNode, ConstantNode, AddNode, DivideNode, SqrtNode, RestrictToNode,
  multiply, subtract, square
)


class Point(NamedTuple):
  x: float
  y: float

  def coordinate(self, axis: str) -> float:
    return self.x if axis == 'x' else self.y


@dataclass(frozen=True)
class ControlPoint:
  """A draggable handle, optionally pinned so only one coordinate moves"""
  point: Point
  locked_on_axis: Optional[str] = None

  def moved_to(self, target: Point) -> 'ControlPoint':
    if self.locked_on_axis == 'x':
      target = Point(target.x, self.point.y)
    elif self.locked_on_axis == 'y':
      target = Point(self.point.x, target.y)
    return ControlPoint(Point(*target), self.locked_on_axis)


ControlPoints = Dict[str, ControlPoint]


def other_axis(axis: str) -> str:
  return 'y' if axis == 'x' else 'x'


def _fold(node: Node) -> float:
  """Value of a variable-free tree, NaN when undefined"""
  result, = node.simplify({})
  return result.value


@dataclass(frozen=True)
class Line:
  """Infinite line through two points"""
  start: Point
  end: Point
  vertical_threshold: float = DEFAULT_SETTINGS.vertical_line_threshold

  @property
  def is_vertical(self) -> bool:
    return abs(self.end.x - self.start.x) <= self.vertical_threshold

  @property
  def variable(self) -> str:
    return 'y' if self.is_vertical else 'x'

  def to_expression(self) -> Node:
    if self.is_vertical:
      # x = 0*y + x0 keeps y free so the plotter can sweep it
      return AddNode(multiply(ConstantNode(0.0), VariableNode('y')), ConstantNode(self.start.x))

    dx = ConstantNode(self.end.x - self.start.x)
    dy = ConstantNode(self.end.y - self.start.y)
    slope = _fold(DivideNode(dy, dx))
    intercept = _fold(subtract(ConstantNode(self.start.y),
                               multiply(ConstantNode(slope), ConstantNode(self.start.x))))
    return AddNode(multiply(ConstantNode(slope), VariableNode('x')), ConstantNode(intercept))

  def to_control_points(self) -> ControlPoints:
    return {'start': ControlPoint(self.start), 'end': ControlPoint(self.end)}

  @classmethod
  def from_control_points(cls, control_points: ControlPoints) -> 'Line':
    return cls(control_points['start'].point, control_points['end'].point)


@dataclass(frozen=True)
class Ellipse:
  """Axis-aligned ellipse, plotted as upper and lower halves over x"""
  center: Point
  horizontal_radius: float
  vertical_radius: float

  variable = 'x'

  def to_expression(self) -> Node:
    rx = ConstantNode(self.horizontal_radius)
    ry = ConstantNode(self.vertical_radius)
    ratio = ConstantNode(_fold(DivideNode(ry, rx)))
    if ratio.is_undefined:
      log_warning(f"Ellipse at {self.center} has zero horizontal radius and plots as nothing")
    radius_squared = ConstantNode(_fold(square(rx)))

    offset = subtract(VariableNode('x'), ConstantNode(self.center.x))
    half = SqrtNode(subtract(radius_squared, square(offset)))
    return AddNode(multiply(ratio, half), ConstantNode(self.center.y))

  def to_control_points(self) -> ControlPoints:
    center = self.center
    return {
      'center': ControlPoint(center),
      'horizontal': ControlPoint(Point(center.x + self.horizontal_radius, center.y), 'x'),
      'vertical': ControlPoint(Point(center.x, center.y + self.vertical_radius), 'y'),
    }

  @classmethod
  def from_control_points(cls, control_points: ControlPoints) -> 'Ellipse':
    center = control_points['center'].point
    horizontal = control_points['horizontal'].point
    vertical = control_points['vertical'].point
    return cls(center, abs(horizontal.x - center.x), abs(vertical.y - center.y))


@dataclass(frozen=True)
class Parabola:
  """Parabola opening along the dependent axis.

  ``axis`` names the independent variable. The curve passes through
  ``vertex`` and ``point`` and is cut off at the level of ``point``.
  """
  vertex: Point
  point: Point
  axis: str = 'x'

  def __post_init__(self):
    if self.axis not in ('x', 'y'):
      raise ValueError(f"Parabola axis must be 'x' or 'y', got {self.axis!r}")

  @property
  def variable(self) -> str:
    return self.axis

  @property
  def coefficient(self) -> float:
    other = other_axis(self.axis)
    rise = ConstantNode(self.point.coordinate(other) - self.vertex.coordinate(other))
    run = ConstantNode(self.point.coordinate(self.axis) - self.vertex.coordinate(self.axis))
    return _fold(DivideNode(rise, square(run)))

  def to_expression(self) -> Node:
    other = other_axis(self.axis)
    vertex_on_axis = ConstantNode(self.vertex.coordinate(self.axis))
    vertex_on_other_axis = ConstantNode(self.vertex.coordinate(other))
    bounds = Extent(self.vertex.coordinate(other), self.point.coordinate(other))
    coefficient = self.coefficient
    if math.isnan(coefficient):
      log_warning(f"Parabola with vertex {self.vertex} and point {self.point} is degenerate")

    curve = AddNode(
      multiply(ConstantNode(coefficient), square(subtract(VariableNode(self.axis), vertex_on_axis))),
      vertex_on_other_axis
    )
    return RestrictToNode(curve, bounds)

  def to_control_points(self) -> ControlPoints:
    return {'vertex': ControlPoint(self.vertex), 'point': ControlPoint(self.point)}

  @classmethod
  def from_control_points(cls, control_points: ControlPoints, axis: str = 'x') -> 'Parabola':
    return cls(control_points['vertex'].point, control_points['point'].point, axis)


Shape = Union[Line, Ellipse, Parabola]


def move_control_point(shape: Shape, name: str, target: Point) -> Shape:
  """Rebuild shape with one control point dragged to target"""
  control_points = shape.to_control_points()
  if name not in control_points:
    raise KeyError(f"{type(shape).__name__} has no control point {name!r}")
  control_points[name] = control_points[name].moved_to(target)

  if isinstance(shape, Parabola):
    return Parabola.from_control_points(control_points, shape.axis)
  if isinstance(shape, Line):
    return Line(control_points['start'].point, control_points['end'].point,
                shape.vertical_threshold)
  return type(shape).from_control_points(control_points)
