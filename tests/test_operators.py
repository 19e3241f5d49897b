import math

from sketch_algebra.expression_tree.core.operators import (
    fold_add, fold_divide, fold_multiply, fold_principal_sqrt, is_undefined
)


def test_fold_add():
    assert fold_add(1.5, 2.5) == 4.0
    assert math.isnan(fold_add(math.nan, 1.0))
    assert math.isnan(fold_add(1e308, 1e308))


def test_fold_divide():
    assert fold_divide(1.0, 4.0) == 0.25
    assert math.isnan(fold_divide(1.0, 0.0))
    assert math.isnan(fold_divide(0.0, 0.0))
    assert math.isnan(fold_divide(1.0, math.nan))


def test_fold_multiply():
    assert fold_multiply(3.0, -2.0) == -6.0
    assert fold_multiply(5.0, 0.0) == 0.0
    assert math.isnan(fold_multiply(math.nan, 0.0))


def test_fold_principal_sqrt():
    assert fold_principal_sqrt(9.0) == 3.0
    assert fold_principal_sqrt(0.0) == 0.0
    assert math.isnan(fold_principal_sqrt(-1e-12))
    assert math.isnan(fold_principal_sqrt(math.nan))


def test_is_undefined():
    assert is_undefined(math.nan)
    assert not is_undefined(0.0)
