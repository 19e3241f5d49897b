"""Tunable settings shared by the plotter, the session and the renderer."""

from dataclasses import dataclass
from typing import Tuple

RGBA = Tuple[int, int, int, float]


@dataclass(frozen=True)
class PlotSettings:
    step: float = 0.1                      # domain units per sample
    unit_size: float = 30.0                # pixels per domain unit
    vertical_line_threshold: float = 0.001 # |dx| below which a line is vertical
    stroke_weight: float = 2.0
    control_point_radius: float = 0.2      # domain units, also the hit radius
    shape_color: RGBA = (0, 0, 0, 1.0)
    grid_color: RGBA = (200, 200, 200, 1.0)
    control_point_color: RGBA = (35, 116, 255, 1.0)


DEFAULT_SETTINGS = PlotSettings()
