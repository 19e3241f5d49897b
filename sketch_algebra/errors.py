"""Exception types raised by the engine and its collaborators.

Undefined results (division by zero, negative radicands, out of range values)
are never errors: they are modelled as an undefined ``ConstantNode``. The
exceptions here signal a malformed expression or calling protocol.
"""


class SketchAlgebraError(Exception):
  """Base class for all package errors"""


class PlotConfigurationError(SketchAlgebraError, ValueError):
  """The plotter was handed an expression or range it cannot sample"""


class SimplificationInvariantError(SketchAlgebraError, RuntimeError):
  """A fully bound expression did not collapse to exactly one constant"""
