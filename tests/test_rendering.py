import io

import numpy as np
import pytest
from matplotlib.figure import Figure

from sketch_algebra import EditingSession, Ellipse, Line, Parabola, Point
from sketch_algebra.rendering import (
    Color, Viewport, draw_number_plane, draw_polylines, render_session
)


def test_color_validation():
    assert Color.opaque(35, 116, 255).to_rgba() == (35 / 255, 116 / 255, 1.0, 1.0)
    with pytest.raises(ValueError):
        Color(300, 0, 0)
    with pytest.raises(ValueError):
        Color(0, 0, 0, 1.5)


def test_color_from_hex():
    assert Color.from_hex("#2374ff") == Color.opaque(35, 116, 255)
    assert Color.from_hex("000000ff") == Color(0, 0, 0, 1.0)
    with pytest.raises(ValueError):
        Color.from_hex("#fff")


def test_viewport_maps_plane_to_screen():
    viewport = Viewport(600, 400, unit_size=30)
    assert viewport.to_screen(0, 0) == (300.0, 200.0)
    assert viewport.to_screen(1, 1) == (330.0, 170.0)
    assert viewport.to_plane(330, 170) == pytest.approx((1.0, 1.0))


def test_viewport_visible_extents():
    viewport = Viewport(600, 400, unit_size=30)
    x_range = viewport.extent("x")
    y_range = viewport.extent("y")
    assert (x_range.min, x_range.max) == pytest.approx((-10.0, 10.0))
    assert (y_range.min, y_range.max) == pytest.approx((-20 / 3, 20 / 3))
    with pytest.raises(ValueError):
        viewport.extent("z")


def test_draw_polylines_swaps_axes_for_y_curves():
    figure = Figure()
    ax = figure.add_subplot()
    polyline = np.array([[0.0, 1.0], [1.0, 2.0]])

    horizontal, = draw_polylines(ax, [polyline], "x")
    vertical, = draw_polylines(ax, [polyline], "y")

    np.testing.assert_allclose(horizontal.get_xdata(), [0.0, 1.0])
    np.testing.assert_allclose(vertical.get_xdata(), [1.0, 2.0])
    np.testing.assert_allclose(vertical.get_ydata(), [0.0, 1.0])


def test_number_plane_draws_unit_grid():
    figure = Figure()
    ax = figure.add_subplot()
    draw_number_plane(ax, Viewport(120, 60, unit_size=30))
    # x in [-2, 2] and y in [-1, 1]: 5 + 3 grid lines plus both axes
    assert len(ax.lines) == 10


def test_render_session_draws_every_shape():
    session = EditingSession()
    session.add(Line(Point(2, 2), Point(-5, 5)))
    session.add(Ellipse(Point(0, 0), 2, 1))
    session.add(Parabola(Point(0, 0), Point(2, 4)))
    session.add(Line(Point(1, -1), Point(1, 1)))
    session.select_at(Point(2, 4))

    figure = render_session(session, Viewport(300, 300, unit_size=30))
    ax = figure.axes[0]
    assert len(ax.lines) > 0
    assert len(ax.patches) == 2

    buffer = io.BytesIO()
    figure.savefig(buffer, format="png")
    assert buffer.getvalue().startswith(b"\x89PNG")
