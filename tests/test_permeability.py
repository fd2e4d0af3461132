import pytest

from golemthm.permeability import (
    ConstantPermeability,
    CubicLawPermeability,
    KozenyCarmanPermeability,
    Permeability,
)

K0 = [1.0e-15, 2.0e-15, 3.0e-15]


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Permeability()


def test_constant_returns_reference_values():
    model = ConstantPermeability()
    assert model.permeability(K0, 0.1, 0.3, 0.01) == K0


def test_constant_returns_a_copy():
    model = ConstantPermeability()
    k0 = list(K0)
    result = model.permeability(k0, 0.1, 0.2, 0.0)
    result[0] = 42.0
    assert k0 == K0


@pytest.mark.parametrize("method", ["dpermeability_dev", "dpermeability_dpf", "dpermeability_dt"])
@pytest.mark.parametrize("model", [ConstantPermeability(), CubicLawPermeability()])
def test_zero_derivatives(model, method):
    assert getattr(model, method)(K0, 0.1, 0.2, 5.0) == [0.0, 0.0, 0.0]


def test_cubic_law_value():
    model = CubicLawPermeability()
    assert model.permeability(K0, 0.1, 0.2, 2.0) == [0.5, 0.5, 0.5]


def test_cubic_law_keeps_component_count():
    model = CubicLawPermeability()
    assert len(model.permeability([1.0] * 9, 0.1, 0.2, 1.0)) == 9


def test_cubic_law_ignores_reference():
    model = CubicLawPermeability()
    a = model.permeability([1.0, 2.0], 0.1, 0.2, 0.3)
    b = model.permeability([7.0, 9.0], 0.4, 0.5, 0.3)
    assert a == b


def test_kc_at_reference_porosity_returns_reference():
    model = KozenyCarmanPermeability()
    result = model.permeability(K0, 0.2, 0.2, 0.0)
    assert result == pytest.approx(K0)


def test_kc_unit_reference_porosity_returns_reference():
    model = KozenyCarmanPermeability()
    assert model.permeability(K0, 1.0, 0.3, 0.0) == K0


def test_kc_increases_with_porosity():
    model = KozenyCarmanPermeability()
    low = model.permeability(K0, 0.2, 0.15, 0.0)
    high = model.permeability(K0, 0.2, 0.25, 0.0)
    assert all(h > l for h, l in zip(high, low))


@pytest.mark.parametrize("method", ["dpermeability_dev", "dpermeability_dpf", "dpermeability_dt"])
def test_kc_derivative_matches_finite_difference(method):
    model = KozenyCarmanPermeability()
    phi0, phi, h = 0.2, 0.25, 1.0e-6
    up = model.permeability(K0, phi0, phi + h, 0.0)
    down = model.permeability(K0, phi0, phi - h, 0.0)
    numeric = [(u - d) / (2.0 * h) for u, d in zip(up, down)]
    analytic = getattr(model, method)(K0, phi0, phi, 1.0)
    assert analytic == pytest.approx(numeric, rel=1e-6)


def test_kc_derivative_linear_in_porosity_derivative():
    model = KozenyCarmanPermeability()
    one = model.dpermeability_dev(K0, 0.2, 0.3, 1.0)
    three = model.dpermeability_dev(K0, 0.2, 0.3, 3.0)
    assert three == pytest.approx([3.0 * v for v in one])


def test_kc_derivatives_agree_for_same_input():
    model = KozenyCarmanPermeability()
    args = (K0, 0.2, 0.3, 0.7)
    assert model.dpermeability_dev(*args) == model.dpermeability_dpf(*args)
    assert model.dpermeability_dpf(*args) == model.dpermeability_dt(*args)