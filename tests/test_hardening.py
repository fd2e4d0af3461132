import math

import pytest

from golemthm.hardening import (
    ConstantHardening,
    CubicHardening,
    ExponentialHardening,
    HardeningModel,
    PlasticSaturationHardening,
)


def _finite_difference(model, x, h=1e-6):
    return (model.value(x + h) - model.value(x - h)) / (2.0 * h)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        HardeningModel()


def test_constant_default_value():
    model = ConstantHardening()
    assert model.value(0.0) == 1.0
    assert model.value(5.0) == model.value(0.0)
    assert model.dvalue(3.0) == 0.0


def test_constant_converts_degrees_to_radians():
    model = ConstantHardening(180.0, convert_to_radians=True)
    assert model.value(0.2) == pytest.approx(math.pi)


def test_cubic_rejects_inverted_limits():
    with pytest.raises(ValueError):
        CubicHardening(2.0, 1.0, internal_0=1.0, internal_limit=1.0)
    with pytest.raises(ValueError):
        CubicHardening(2.0, 1.0, internal_0=2.0, internal_limit=1.0)


def test_cubic_plateaus_outside_range():
    model = CubicHardening(10.0, 4.0, internal_0=0.5, internal_limit=2.5)
    assert model.value(0.0) == 10.0
    assert model.value(0.5) == 10.0
    assert model.value(3.0) == 4.0
    assert model.dvalue(0.1) == 0.0
    assert model.dvalue(5.0) == 0.0


def test_cubic_is_continuous_and_midpoint_is_mean():
    model = CubicHardening(10.0, 4.0, internal_0=0.5, internal_limit=2.5)
    assert model.value(0.5 + 1e-9) == pytest.approx(10.0, abs=1e-6)
    assert model.value(2.5 - 1e-9) == pytest.approx(4.0, abs=1e-6)
    assert model.value(1.5) == pytest.approx(0.5 * (10.0 + 4.0))


@pytest.mark.parametrize("x", [0.7, 1.2, 1.5, 2.3])
def test_cubic_derivative_matches_finite_difference(x):
    model = CubicHardening(10.0, 4.0, internal_0=0.5, internal_limit=2.5)
    assert model.dvalue(x) == pytest.approx(_finite_difference(model, x), rel=1e-6)


def test_cubic_radians():
    model = CubicHardening(90.0, 30.0, convert_to_radians=True)
    assert model.value(-1.0) == pytest.approx(math.pi / 2.0)
    assert model.value(2.0) == pytest.approx(math.pi / 6.0)


def test_exponential_limits():
    model = ExponentialHardening(8.0, 2.0, rate=3.0)
    assert model.value(0.0) == pytest.approx(8.0)
    assert model.value(100.0) == pytest.approx(2.0)


def test_exponential_zero_rate_is_constant():
    model = ExponentialHardening(8.0, 2.0)
    assert model.value(7.0) == pytest.approx(8.0)
    assert model.dvalue(7.0) == 0.0


@pytest.mark.parametrize("x", [0.0, 0.3, 1.1])
def test_exponential_derivative_matches_finite_difference(x):
    model = ExponentialHardening(8.0, 2.0, rate=3.0)
    assert model.dvalue(x) == pytest.approx(_finite_difference(model, x), rel=1e-6)


def test_plastic_saturation_errors():
    with pytest.raises(ValueError):
        PlasticSaturationHardening(-1.0, 2.0)
    with pytest.raises(ValueError):
        PlasticSaturationHardening(1.0, 2.0, internal_limit=0.0)


def test_plastic_saturation_end_values():
    model = PlasticSaturationHardening(1.0, 5.0, internal_limit=2.0)
    assert model.value(0.0) == pytest.approx(1.0)
    assert model.value(2.0) == pytest.approx(5.0)
    assert model.value(9.0) == 5.0
    assert model.dvalue(2.0) == pytest.approx(0.0)
    assert model.dvalue(9.0) == 0.0


@pytest.mark.parametrize("x", [0.2, 0.9, 1.6])
def test_plastic_saturation_derivative_matches_finite_difference(x):
    model = PlasticSaturationHardening(1.0, 5.0, internal_limit=2.0)
    assert model.dvalue(x) == pytest.approx(_finite_difference(model, x), rel=1e-6)


def test_plastic_saturation_monotone_towards_residual():
    model = PlasticSaturationHardening(1.0, 5.0, internal_limit=2.0)
    values = [model.value(0.1 * n) for n in range(21)]
    assert values == sorted(values)