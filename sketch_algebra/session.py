"""
Editing session: the shapes on the surface and the current selection.

The selected control point is state owned by the session and handed
explicitly to ``move_control_point``; nothing in the engine reads it.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from .config import DEFAULT_SETTINGS, PlotSettings
from .expression_tree import Node
from .logging_system import LogLevel, SketchLogger, get_logger
from .shapes import Point, Shape, move_control_point


@dataclass(frozen=True)
class Selection:
    shape_id: int
    control_point: str


class EditingSession:
    """Shapes keyed by id plus the control point being dragged, if any"""

    def __init__(self, settings: PlotSettings = DEFAULT_SETTINGS,
                 logger: Optional[SketchLogger] = None):
        self.settings = settings
        self.logger = logger or get_logger()
        self.shapes: Dict[int, Shape] = {}
        self.selection: Optional[Selection] = None
        self._next_id = 0

    def add(self, shape: Shape) -> int:
        shape_id = self._next_id
        self._next_id += 1
        self.shapes[shape_id] = shape
        self.logger.info(f"Added {type(shape).__name__} #{shape_id}", LogLevel.MODERATE)
        return shape_id

    def remove(self, shape_id: int) -> Shape:
        shape = self.shapes.pop(shape_id)
        if self.selection is not None and self.selection.shape_id == shape_id:
            self.selection = None
        return shape

    def items(self) -> Iterator[Tuple[int, Shape]]:
        return iter(list(self.shapes.items()))

    def select_at(self, point: Point, radius: Optional[float] = None) -> Optional[Selection]:
        """Select the nearest control point within radius of point"""
        if radius is None:
            radius = self.settings.control_point_radius

        best: Optional[Selection] = None
        best_distance = math.inf
        for shape_id, shape in self.shapes.items():
            for name, control_point in shape.to_control_points().items():
                distance = math.hypot(control_point.point.x - point.x,
                                      control_point.point.y - point.y)
                if distance <= radius and distance < best_distance:
                    best, best_distance = Selection(shape_id, name), distance

        self.selection = best
        if best is not None:
            self.logger.debug(f"Selected {best.control_point} of shape #{best.shape_id}")
        return best

    def drag_to(self, point: Point) -> Optional[Shape]:
        """Move the selected control point, rebuilding its shape"""
        selection = self.selection
        if selection is None:
            return None
        shape = move_control_point(self.shapes[selection.shape_id], selection.control_point, point)
        self.shapes[selection.shape_id] = shape
        return shape

    def release(self):
        self.selection = None

    def expressions(self) -> Dict[int, Node]:
        """Fresh expression tree for every shape"""
        return {shape_id: shape.to_expression() for shape_id, shape in self.shapes.items()}
