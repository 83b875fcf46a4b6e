# File: tests/test_response.py
"""
Test creep and relaxation curves against closed-form solutions.

Maxwell (E, eta in series) under constant stress sigma0:
    ε(t) = sigma0/E + sigma0·t/eta

Kelvin-Voigt (E || eta) under constant stress:
    ε(t) = (sigma0/E)·(1 - exp(-E·t/eta))

Kelvin-Voigt under constant strain eps0:
    σ(t) = E·eps0   (for t > 0)
"""

import math
from decimal import Decimal

import numpy as np
import pytest

from rheonet.kernel.response import (
    CREEP_ZERO_SENTINEL,
    GLASSY_PROBE_S,
    INSTANT_PROBE_S,
    compute_creep,
    compute_relaxation,
    compute_responses,
    creep_at_time,
    instant_elastic_strain,
    instant_elastic_stress,
    relax_at_time,
)
from rheonet.kernel.stehfest import inverse_laplace
from rheonet.model import Dashpot, Parallel, ResponseParams, Series, Spring

E, ETA = 100.0, 50.0


@pytest.fixture
def maxwell():
    return Series("root", (Spring("s1", E), Dashpot("d1", ETA)))


@pytest.fixture
def voigt():
    return Parallel("root", (Spring("s1", E), Dashpot("d1", ETA)))


def test_maxwell_creep_matches_closed_form(maxwell):
    """Every sampled point agrees with sigma0/E + sigma0·t/eta within 0.1%."""
    points = compute_creep(maxwell, t_max=10.0, n_points=200, sigma0=1.0)

    assert len(points) == 201
    for p in points:
        expected = 1.0 / E + p.t / ETA
        assert p.value == pytest.approx(expected, rel=1e-3), f"t={p.t}"
        assert p.load == 1.0

    print(f"✓ Maxwell creep: ε(0)={points[0].value}, ε(10)={points[-1].value}")


def test_maxwell_creep_concrete_values(maxwell):
    """Instantaneous strain 0.01 at t=0, 0.21 at t=10."""
    points = compute_creep(maxwell, 10.0, 200, 1.0)
    assert points[0].t == 0.0
    assert points[0].value == 0.01
    assert points[200].t == 10.0
    assert points[200].value == pytest.approx(0.21, rel=1e-3)


def test_creep_scales_linearly_with_stress(maxwell):
    weak = compute_creep(maxwell, 10.0, 20, 1.0)
    strong = compute_creep(maxwell, 10.0, 20, 3.0)
    for a, b in zip(weak, strong):
        assert b.value == pytest.approx(3.0 * a.value, rel=1e-5, abs=3e-6)
        assert b.load == 3.0


def test_voigt_creep_matches_closed_form(voigt):
    points = compute_creep(voigt, t_max=5.0, n_points=50, sigma0=1.0)

    # No instantaneous strain for a Voigt solid
    assert points[0].value == pytest.approx(0.0, abs=1e-6)
    for p in points[1:]:
        expected = (1.0 / E) * (1.0 - math.exp(-E * p.t / ETA))
        assert p.value == pytest.approx(expected, abs=5e-4), f"t={p.t}"


def test_voigt_relaxation_is_constant(voigt):
    """After the step the dashpot carries no stress: σ = E·eps0."""
    points = compute_relaxation(voigt, t_max=10.0, n_points=100, eps0=1.0)
    for p in points[1:]:
        assert p.value == pytest.approx(E * 1.0, rel=1e-3), f"t={p.t}"


def test_maxwell_relaxation_decays(maxwell):
    """σ(t) = E·eps0·exp(-E·t/eta), checked where the stress is still large."""
    points = compute_relaxation(maxwell, t_max=2.0, n_points=20, eps0=1.0)

    assert points[0].value == pytest.approx(E, rel=1e-6)
    for p in points[1:]:
        expected = E * math.exp(-E * p.t / ETA)
        assert p.value == pytest.approx(expected, abs=1.0), f"t={p.t}"

    values = np.array([p.value for p in points])
    assert values[-1] < 0.1 * values[0]


def test_time_grid_is_uniform(maxwell):
    points = compute_creep(maxwell, t_max=3.0, n_points=7, sigma0=1.0)
    expected = [round((i / 7) * 3.0, 6) for i in range(8)]
    assert [p.t for p in points] == expected


def test_values_rounded_to_six_decimals(maxwell):
    points = compute_creep(maxwell, 7.0, 33, 1.3) + compute_relaxation(maxwell, 7.0, 33, 0.7)
    for p in points:
        for x in (p.t, p.value):
            assert x == round(x, 6)
            assert Decimal(repr(x)).as_tuple().exponent >= -6


def test_no_removal_equals_base_series(maxwell):
    """Without a removal time every point is just the base response."""
    n, t_max = 40, 8.0
    points = compute_creep(maxwell, t_max, n, 2.0, t_removal=None)

    assert len(points) == n + 1
    for i, p in enumerate(points):
        t = (i / n) * t_max
        assert p.t == round(t, 6)
        assert p.value == round(creep_at_time(maxwell, t, 2.0), 6)
        assert p.load == 2.0


def test_results_are_deterministic(maxwell):
    first = compute_creep(maxwell, 10.0, 50, 1.0, t_removal=3.3)
    second = compute_creep(maxwell, 10.0, 50, 1.0, t_removal=3.3)
    assert first == second


def test_negative_time_uses_instantaneous_response(maxwell):
    assert creep_at_time(maxwell, -1.0, 1.0) == pytest.approx(0.01, rel=1e-9)
    assert relax_at_time(maxwell, 0.0, 1.0) == pytest.approx(E, rel=1e-9)


def test_pure_dashpot_has_no_instantaneous_strain():
    """A lone dashpot is a short circuit at s=0 but stiff at s→∞."""
    model = Series("root", (Dashpot("d1", ETA),))
    assert creep_at_time(model, 0.0, 1.0) == pytest.approx(0.0, abs=1e-9)
    assert creep_at_time(model, 2.0, 1.0) == pytest.approx(2.0 / ETA, rel=1e-3)


def test_instant_elastic_parts(maxwell, voigt):
    """Glassy modulus of Maxwell is E; Voigt has effectively none."""
    assert instant_elastic_strain(maxwell, 1.0) == pytest.approx(1.0 / E, rel=1e-9)
    assert instant_elastic_stress(maxwell, 2.0) == pytest.approx(2.0 * E, rel=1e-9)
    assert instant_elastic_strain(voigt, 1.0) == pytest.approx(0.0, abs=1e-12)


def test_compute_responses_bundles_both_curves(maxwell):
    params = ResponseParams(sigma0=1.0, eps0=1.0, t_max=10.0, n_points=50, t_removal=None)
    result = compute_responses(maxwell, params)
    assert result.creep == compute_creep(maxwell, 10.0, 50, 1.0)
    assert result.relax == compute_relaxation(maxwell, 10.0, 50, 1.0)


def test_creep_sentinel_where_impedance_vanishes():
    """
    A series containing an empty parallel group has Z(s) = 0 for every
    s > 0. The creep transform then returns the sentinel itself, and the
    inverted value is the sentinel pushed through the Stehfest sum.
    """
    model = Series("root", (Spring("s1", E), Parallel("empty", ())))
    for t in (0.5, 1.0, 4.0):
        expected = inverse_laplace(lambda s: CREEP_ZERO_SENTINEL, t)
        assert creep_at_time(model, t, 1.0) == expected

    assert CREEP_ZERO_SENTINEL == 1e30


def test_instant_and_glassy_probes_are_distinct(voigt):
    """
    Voigt: Z(s) = E + eta·s, so the t=0 value and the unload drop pin
    down the two probe frequencies separately.

        ε(0)        = 1 / (E + eta·1e12)
        instant_drop = 1 / (E + eta·1e15)
    """
    assert INSTANT_PROBE_S == 1e12
    assert GLASSY_PROBE_S == 1e15

    at_zero = creep_at_time(voigt, 0.0, 1.0)
    drop = instant_elastic_strain(voigt, 1.0)
    assert at_zero == pytest.approx(1.0 / (E + ETA * 1e12), rel=1e-12)
    assert drop == pytest.approx(1.0 / (E + ETA * 1e15), rel=1e-12)
    assert at_zero / drop == pytest.approx(1000.0, rel=1e-9)

    assert relax_at_time(voigt, 0.0, 1.0) == pytest.approx(E + ETA * 1e12, rel=1e-12)
    assert instant_elastic_stress(voigt, 1.0) == pytest.approx(E + ETA * 1e15, rel=1e-12)
