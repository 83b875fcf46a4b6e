# File: tests/test_impedance.py
"""
Test the impedance algebra against hand-derived formulas.

Spring Z = E, dashpot Z = eta·s, series compliances add,
parallel impedances add.
"""

import math

import numpy as np
import pytest

from rheonet.kernel.impedance import compute_impedance
from rheonet.model import Dashpot, Parallel, Series, Spring


@pytest.mark.parametrize("s", [0.0, 1.0, 1e6])
def test_spring_impedance_is_constant(s):
    """A spring has no rate dependence: Z(s) = E at every frequency."""
    assert compute_impedance(Spring("s1", 100.0), s) == 100.0


@pytest.mark.parametrize("s", [0.5, 1.0, 1e6])
def test_dashpot_impedance_is_linear_in_s(s):
    assert compute_impedance(Dashpot("d1", 50.0), s) == 50.0 * s


@pytest.mark.parametrize("s", [0.0, 0.1, 1.0, 1e3])
def test_series_springs_compliances_add(s):
    """
    Two springs in series: 1/Z = 1/E1 + 1/E2.

    E1 = 100, E2 = 300 → Z = 75
    """
    model = Series("root", (Spring("a", 100.0), Spring("b", 300.0)))
    Z = compute_impedance(model, s)
    assert np.isclose(1.0 / Z, 1.0 / 100.0 + 1.0 / 300.0, rtol=1e-12)
    assert np.isclose(Z, 75.0, rtol=1e-12)


@pytest.mark.parametrize("s", [0.1, 1.0, 42.0])
def test_parallel_dashpots_impedances_add(s):
    model = Parallel("root", (Dashpot("a", 20.0), Dashpot("b", 30.0)))
    assert np.isclose(compute_impedance(model, s), (20.0 + 30.0) * s, rtol=1e-12)


def test_maxwell_impedance():
    """Z_maxwell(s) = E·eta·s / (E + eta·s)."""
    E, eta, s = 100.0, 50.0, 3.0
    model = Series("root", (Spring("s1", E), Dashpot("d1", eta)))
    expected = E * eta * s / (E + eta * s)
    assert np.isclose(compute_impedance(model, s), expected, rtol=1e-12)


def test_nested_zener_impedance():
    """SLS: E1 || (E2 in series with eta)  →  Z = E1 + E2·eta·s/(E2 + eta·s)."""
    E1, E2, eta, s = 60.0, 100.0, 50.0, 0.7
    model = Parallel("root", (
        Spring("s1", E1),
        Series("arm", (Spring("s2", E2), Dashpot("d1", eta))),
    ))
    expected = E1 + E2 * eta * s / (E2 + eta * s)
    assert np.isclose(compute_impedance(model, s), expected, rtol=1e-12)


def test_series_with_zero_member_shorts_whole_chain():
    """
    A dashpot at s=0 has Z=0 (infinite compliance); the whole series
    chain must report 0, regardless of the other members.
    """
    model = Series("root", (Dashpot("d1", 50.0), Spring("s1", 100.0)))
    assert compute_impedance(model, 0.0) == 0.0

    model = Series("root", (Spring("s1", 100.0), Parallel("empty", ())))
    assert compute_impedance(model, 1.0) == 0.0


def test_series_with_zero_compliance_is_rigid():
    """No compliance at all (empty series) means a rigid node: +inf."""
    assert compute_impedance(Series("empty", ()), 1.0) == math.inf

    # A rigid member adds no compliance to its parent series
    model = Series("root", (Spring("s1", 100.0), Series("rigid", ())))
    assert np.isclose(compute_impedance(model, 1.0), 100.0)


def test_unknown_node_has_zero_impedance():
    assert compute_impedance(object(), 1.0) == 0.0

    model = Parallel("root", (Spring("s1", 10.0), "not-a-node"))
    assert compute_impedance(model, 1.0) == 10.0


def test_series_short_circuit_skips_remaining_children():
    """
    Once a member is a short circuit the rest of the chain is not
    evaluated: a dashpot with no viscosity after it would raise a
    TypeError if it were.
    """
    model = Series("root", (Dashpot("d1", 50.0), Dashpot("broken", None)))
    assert compute_impedance(model, 0.0) == 0.0
