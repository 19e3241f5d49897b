"""Numeric ranges used for domain restriction and sampling."""

import math
from typing import Iterator

import numpy as np

from .errors import PlotConfigurationError


class Extent:
  """Inclusive numeric range whose bounds are ordered at construction.

  Membership uses the raw comparison operators with no tolerance, so a value
  that misses a bound by a rounding error is outside the range.
  """

  __slots__ = ('min', 'max')

  def __init__(self, a: float, b: float):
    a = float(a)
    b = float(b)
    if a > b:
      a, b = b, a
    object.__setattr__(self, 'min', a)
    object.__setattr__(self, 'max', b)

  def __setattr__(self, name, value):
    raise AttributeError("Extent is immutable")

  @property
  def span(self) -> float:
    return self.max - self.min

  def contains(self, value: float) -> bool:
    return self.min <= value <= self.max

  def __contains__(self, value: float) -> bool:
    return self.contains(value)

  def percentage(self, value: float) -> float:
    """Location of value within the range, 0 at min and 1 at max.

    A zero-width range gives nan at its bound and a signed infinity elsewhere.
    """
    offset = value - self.min
    if self.span == 0:
      return math.nan if offset == 0 else math.copysign(math.inf, offset)
    return offset / self.span

  def samples(self, step: float) -> np.ndarray:
    """Sample values min + i * step from min up to and including max.

    Each value is computed from its index rather than by accumulation, so a
    grid that should land on a round value such as 0 does land on it.
    """
    if not step > 0 or not math.isfinite(step):
      raise PlotConfigurationError(f"Sampling step must be a positive number, got {step!r}")
    if not (math.isfinite(self.min) and math.isfinite(self.max)):
      raise PlotConfigurationError(f"Cannot sample an unbounded range {self!r}")

    count = int(math.floor(self.span / step + 1e-9))
    values = self.min + np.arange(count + 1, dtype=np.float64) * step
    # the last index may overshoot max by a rounding error
    return np.minimum(values, self.max)

  def __iter__(self) -> Iterator[float]:
    yield self.min
    yield self.max

  def __eq__(self, other) -> bool:
    if not isinstance(other, Extent):
      return NotImplemented
    return (self.min, self.max) == (other.min, other.max)

  def __hash__(self) -> int:
    return hash((self.min, self.max))

  def __repr__(self) -> str:
    return f"Extent({self.min!r}, {self.max!r})"


def modulo(dividend: float, divisor: float) -> float:
  """Remainder in [0, divisor) for a positive divisor, even when dividend is negative"""
  return dividend % divisor
