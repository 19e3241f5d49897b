"""
Function sampler

Turns a single-variable expression into drawable polylines. The expression
is simplified once without substitution to expand two-valued roots into
separate baseline candidates; each candidate is then walked across the
visible range, binding the variable to one sample at a time. Undefined
samples break the curve.
"""

from typing import List, Optional, Union

import numpy as np

from .config import DEFAULT_SETTINGS
from .errors import SimplificationInvariantError
from .extent import Extent
from .expression_tree import Expression, Node, ConstantNode, ExpressionValidator
from .logging_system import LogLevel, SketchLogger, get_logger

Polyline = np.ndarray  # shape (n, 2): independent value, dependent value


def _root(expression: Union[Expression, Node]) -> Node:
    return expression.root if isinstance(expression, Expression) else expression


class FunctionPlotter:
    """Samples expressions over a range at a fixed step"""

    def __init__(self, step: float = DEFAULT_SETTINGS.step,
                 logger: Optional[SketchLogger] = None):
        self.step = step
        self.logger = logger or get_logger()

    def plot(self, expression: Union[Expression, Node], extent: Extent) -> List[Polyline]:
        root = _root(expression)
        variable = ExpressionValidator.require_single_variable(root)
        samples = extent.samples(self.step)

        polylines: List[Polyline] = []
        baselines = root.simplify({})
        for baseline in baselines:
            polylines.extend(self._trace(baseline, variable, samples))

        self.logger.info(
            f"Plotted {root.to_string()} over [{extent.min:g}, {extent.max:g}]: "
            f"{len(baselines)} branch(es), {len(polylines)} polyline(s)",
            LogLevel.DETAILED
        )
        return polylines

    def _trace(self, baseline: Node, variable: str, samples: np.ndarray) -> List[Polyline]:
        polylines: List[Polyline] = []
        current: List[List[float]] = []

        for sample in samples:
            value = self._evaluate(baseline, variable, float(sample))
            if value is None:
                if current:
                    polylines.append(np.asarray(current, dtype=np.float64))
                    current = []
            else:
                current.append([float(sample), value])

        if current:
            polylines.append(np.asarray(current, dtype=np.float64))

        for polyline in polylines:
            self.logger.debug(
                f"{baseline.to_string()}: polyline of {len(polyline)} points "
                f"from {variable}={polyline[0, 0]:g} to {variable}={polyline[-1, 0]:g}"
            )
        return polylines

    def _evaluate(self, baseline: Node, variable: str, sample: float) -> Optional[float]:
        """Value of baseline at sample, None when undefined"""
        results = baseline.simplify({variable: ConstantNode(sample)})
        if len(results) != 1:
            self._fail(f"{baseline.to_string()} gave {len(results)} results at {variable}={sample}, expected 1")
        result = results[0]
        if not isinstance(result, ConstantNode):
            self._fail(f"{baseline.to_string()} did not reduce to a constant at {variable}={sample}: "
                       f"{result.to_string()}")
        if result.is_undefined:
            return None
        return result.value

    def _fail(self, message: str):
        self.logger.critical(message)
        raise SimplificationInvariantError(message)


def sample_polylines(expression: Union[Expression, Node], extent: Extent,
                     step: float = DEFAULT_SETTINGS.step) -> List[Polyline]:
    """Convenience wrapper around FunctionPlotter.plot"""
    return FunctionPlotter(step).plot(expression, extent)
