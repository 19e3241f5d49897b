"""
Drawing-surface collaborator built on matplotlib.

The renderer knows nothing about the algebra: it receives polylines of
(independent, dependent) pairs and strokes them, swapping the columns for
curves whose independent variable is y.
"""

from typing import Iterable, Optional, Tuple

import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from .config import DEFAULT_SETTINGS, PlotSettings
from .extent import Extent, modulo
from .logging_system import LogLevel
from .plotter import FunctionPlotter, Polyline
from .session import EditingSession


class Color:
    """8-bit RGB color with a 0..1 alpha"""

    _BIT_8_RANGE = Extent(0, 255)
    _PERCENTAGE_RANGE = Extent(0, 1)

    def __init__(self, red: int, green: int, blue: int, alpha: float = 1.0):
        if not all(self._BIT_8_RANGE.contains(c) for c in (red, green, blue)):
            raise ValueError(f"One of the color values ({red}, {green}, {blue}) isn't in an 8-bit range")
        if not self._PERCENTAGE_RANGE.contains(alpha):
            raise ValueError(f"Alpha value ({alpha}) isn't between zero and one")
        self.red = red
        self.green = green
        self.blue = blue
        self.alpha = alpha

    @classmethod
    def opaque(cls, red: int, green: int, blue: int) -> 'Color':
        return cls(red, green, blue, 1.0)

    @classmethod
    def monochrome(cls, value: int) -> 'Color':
        return cls.opaque(value, value, value)

    @classmethod
    def from_hex(cls, hex_string: str) -> 'Color':
        cleaned = hex_string.strip().lstrip('#')
        if len(cleaned) not in (6, 8):
            raise ValueError(f"Hex string {hex_string!r} isn't a valid length (6 or 8)")
        red, green, blue = (int(cleaned[i:i + 2], 16) for i in (0, 2, 4))
        alpha = int(cleaned[6:8], 16) / 255 if len(cleaned) == 8 else 1.0
        return cls(red, green, blue, alpha)

    def to_rgba(self) -> Tuple[float, float, float, float]:
        return (self.red / 255, self.green / 255, self.blue / 255, self.alpha)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_rgba() == other.to_rgba()

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue}, {self.alpha})"


class Viewport:
    """Maps screen pixels to plane coordinates.

    The plane origin sits at ``origin`` (screen pixels, default the centre)
    and one plane unit spans ``unit_size`` pixels. With ``flip_y`` the plane's
    y axis points up while screen y points down.
    """

    def __init__(self, width: int, height: int, unit_size: float = DEFAULT_SETTINGS.unit_size,
                 origin: Optional[Tuple[float, float]] = None, flip_y: bool = True):
        if unit_size <= 0:
            raise ValueError(f"unit_size must be positive, got {unit_size}")
        self.width = width
        self.height = height
        self.unit_size = unit_size
        if origin is None:
            origin = (width / 2, height / 2)
        y_scale = -unit_size if flip_y else unit_size
        # plane -> screen
        self.matrix = np.array([
            [unit_size, 0.0, origin[0]],
            [0.0, y_scale, origin[1]],
            [0.0, 0.0, 1.0],
        ])
        self.inverse = np.linalg.inv(self.matrix)

    def to_screen(self, x: float, y: float) -> Tuple[float, float]:
        sx, sy, _ = self.matrix @ np.array([x, y, 1.0])
        return float(sx), float(sy)

    def to_plane(self, px: float, py: float) -> Tuple[float, float]:
        x, y, _ = self.inverse @ np.array([px, py, 1.0])
        return float(x), float(y)

    def extent(self, axis: str) -> Extent:
        """Visible range of the plane along axis"""
        left, top = self.to_plane(0, 0)
        right, bottom = self.to_plane(self.width, self.height)
        if axis == 'x':
            return Extent(left, right)
        if axis == 'y':
            return Extent(top, bottom)
        raise ValueError(f"Unknown axis {axis!r}")


def draw_number_plane(ax: Axes, viewport: Viewport,
                      color: Color = Color.monochrome(200)):
    """Unit grid lines with heavier axes through the origin"""
    rgba = color.to_rgba()
    x_range = viewport.extent('x')
    y_range = viewport.extent('y')

    x = x_range.min + modulo(-x_range.min, 1.0)
    while x <= x_range.max:
        ax.axvline(x, color=rgba, linewidth=0.5, zorder=0)
        x += 1.0
    y = y_range.min + modulo(-y_range.min, 1.0)
    while y <= y_range.max:
        ax.axhline(y, color=rgba, linewidth=0.5, zorder=0)
        y += 1.0

    ax.axvline(0.0, color=rgba, linewidth=1.0, zorder=0)
    ax.axhline(0.0, color=rgba, linewidth=1.0, zorder=0)


def draw_polylines(ax: Axes, polylines: Iterable[Polyline], variable: str = 'x',
                   color: Color = Color.opaque(0, 0, 0), weight: float = DEFAULT_SETTINGS.stroke_weight):
    """Stroke each polyline as connected segments"""
    lines = []
    for polyline in polylines:
        points = polyline if variable == 'x' else polyline[:, ::-1]
        lines.extend(ax.plot(points[:, 0], points[:, 1], color=color.to_rgba(), linewidth=weight))
    return lines


def render_session(session: EditingSession, viewport: Viewport,
                   settings: PlotSettings = DEFAULT_SETTINGS) -> Figure:
    """One redraw: number plane, every shape, and the selected shape's handles"""
    dpi = 100
    figure = Figure(figsize=(viewport.width / dpi, viewport.height / dpi), dpi=dpi)
    ax = figure.add_axes((0, 0, 1, 1))
    x_range = viewport.extent('x')
    y_range = viewport.extent('y')
    ax.set_xlim(x_range.min, x_range.max)
    ax.set_ylim(y_range.min, y_range.max)
    ax.set_axis_off()

    draw_number_plane(ax, viewport, Color(*settings.grid_color))

    plotter = FunctionPlotter(settings.step, session.logger)
    shape_color = Color(*settings.shape_color)
    total = 0
    for shape_id, shape in session.items():
        variable = shape.variable
        polylines = plotter.plot(shape.to_expression(), viewport.extent(variable))
        draw_polylines(ax, polylines, variable, shape_color, settings.stroke_weight)
        total += len(polylines)

        selection = session.selection
        if selection is not None and selection.shape_id == shape_id:
            handle_color = Color(*settings.control_point_color).to_rgba()
            for control_point in shape.to_control_points().values():
                point = control_point.point
                ax.add_patch(Circle((point.x, point.y), settings.control_point_radius,
                                    color=handle_color, zorder=3))

    session.logger.info(f"Rendered {len(session.shapes)} shape(s) as {total} polyline(s)", LogLevel.DETAILED)
    return figure
