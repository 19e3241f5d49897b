import math

import numpy as np
import pytest

from sketch_algebra import Extent, PlotConfigurationError, modulo


def test_bounds_are_ordered():
    extent = Extent(5, -1)
    assert (extent.min, extent.max) == (-1.0, 5.0)
    assert extent.span == 6.0
    assert tuple(extent) == (-1.0, 5.0)


def test_contains_is_inclusive_without_tolerance():
    extent = Extent(0, 1)
    assert extent.contains(0)
    assert extent.contains(1)
    assert 0.5 in extent
    assert not extent.contains(1 + 1e-15)
    assert not extent.contains(math.nan)


def test_percentage():
    extent = Extent(10, 20)
    assert extent.percentage(15) == 0.5
    assert extent.percentage(10) == 0.0


def test_extent_is_immutable():
    with pytest.raises(AttributeError):
        Extent(0, 1).min = 3


def test_samples_land_on_grid_values():
    samples = Extent(-1, 1).samples(0.25)
    assert len(samples) == 9
    assert samples[0] == -1.0
    assert samples[4] == 0.0
    assert samples[-1] == 1.0


def test_samples_never_pass_the_upper_bound():
    samples = Extent(0, 1).samples(0.3)
    np.testing.assert_allclose(samples, [0.0, 0.3, 0.6, 0.9])
    assert samples.max() <= 1.0


def test_degenerate_extent_has_one_sample():
    assert list(Extent(2, 2).samples(0.1)) == [2.0]


@pytest.mark.parametrize("step", [0, -0.1, math.nan, math.inf])
def test_invalid_steps_are_rejected(step):
    with pytest.raises(PlotConfigurationError):
        Extent(0, 1).samples(step)


def test_unbounded_extent_cannot_be_sampled():
    with pytest.raises(PlotConfigurationError):
        Extent(0, math.inf).samples(0.1)


def test_modulo_is_never_negative_for_positive_divisor():
    assert modulo(-1, 3) == 2
    assert modulo(7, 3) == 1
    assert modulo(-0.5, 1.0) == 0.5


def test_samples_include_the_upper_bound_despite_rounding():
    samples = Extent(0, 0.3).samples(0.1)
    assert len(samples) == 4
    assert samples[-1] == 0.3


def test_percentage_of_zero_width_extent():
    extent = Extent(2, 2)
    assert math.isnan(extent.percentage(2))
    assert extent.percentage(3) == math.inf
    assert extent.percentage(1) == -math.inf
