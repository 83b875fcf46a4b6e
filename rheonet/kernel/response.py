# rheonet/kernel/response.py
"""
RESPONSE SAMPLER: CREEP AND RELAXATION CURVES
==============================================

Two symmetric tests share one sampling engine:

    CREEP       constant stress sigma0 applied at t=0 → strain ε(t)
                ε(s) = sigma0 / (s · Z(s))
    RELAXATION  constant strain eps0 applied at t=0  → stress σ(t)
                σ(s) = eps0 · Z(s) / s

Both are inverted numerically with the Stehfest transform.

LOAD REMOVAL (BOLTZMANN SUPERPOSITION):
---------------------------------------
Removing the load at t1 is the same as adding an equal and opposite step at
t1. For a linear network the responses superpose:

    R_unload(t) = R(t)               for t <= t1
    R_unload(t) = R(t) - R(t - t1)   for t >  t1

At t1 itself the curve is discontinuous: the instantaneous (glassy) elastic
part snaps back immediately while the viscous part does not. Two points are
injected at exactly t1 so that plots show the vertical drop:

    (t1, R(t1),                 load on)
    (t1, R(t1) - instant_drop,  load off)
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..model import ResponseParams, SampledPoint
from .impedance import compute_impedance
from .stehfest import inverse_laplace

logger = logging.getLogger(__name__)

# Frequency probe for the t <= 0 value of the base curves.
INSTANT_PROBE_S = 1e12
# Stiffer probe for the glassy modulus used by the unload snap-back.
GLASSY_PROBE_S = 1e15
# Creep transform value used where Z(s) == 0 (unbounded compliance).
CREEP_ZERO_SENTINEL = 1e30

ROUND_DIGITS = 6


def creep_at_time(model, t: float, sigma0: float) -> float:
    """Strain at time t under a constant stress sigma0 applied at t=0."""
    if t <= 0:
        z0 = compute_impedance(model, INSTANT_PROBE_S)
        return 0.0 if z0 == 0 else sigma0 / z0

    def strain_transform(s: float) -> float:
        z = compute_impedance(model, s)
        if z == 0:
            return CREEP_ZERO_SENTINEL
        return sigma0 / (s * z)

    return inverse_laplace(strain_transform, t)


def relax_at_time(model, t: float, eps0: float) -> float:
    """Stress at time t under a constant strain eps0 applied at t=0."""
    if t <= 0:
        return eps0 * compute_impedance(model, INSTANT_PROBE_S)

    def stress_transform(s: float) -> float:
        return eps0 * compute_impedance(model, s) / s

    return inverse_laplace(stress_transform, t)


def instant_elastic_strain(model, sigma0: float) -> float:
    """Strain recovered instantly on unloading: sigma0 / Z(s→∞)."""
    z_inf = compute_impedance(model, GLASSY_PROBE_S)
    return 0.0 if z_inf == 0 else sigma0 / z_inf


def instant_elastic_stress(model, eps0: float) -> float:
    """Stress released instantly on unloading: eps0 · Z(s→∞)."""
    return eps0 * compute_impedance(model, GLASSY_PROBE_S)


def _point(t: float, value: float, load: float) -> SampledPoint:
    return SampledPoint(
        t=round(float(t), ROUND_DIGITS),
        value=round(float(value), ROUND_DIGITS),
        load=load,
    )


def sample_response(
    model,
    t_max: float,
    n_points: int,
    magnitude: float,
    t_removal: Optional[float],
    response_at: Callable[[object, float, float], float],
    instant_drop: float,
) -> List[SampledPoint]:
    """
    Sample R(t) = response_at(model, t, magnitude) on a uniform grid.

    The grid is t_i = (i / n_points) · t_max for i = 0..n_points. With
    t_removal set, the grid step that crosses it (t_{i-1} < t1 <= t_i) gets
    the pre/post removal pair at t1 first. If t_i is within half a step of
    t1 the regular point for that step is dropped, so the output never holds
    near-duplicate times.
    """
    data: List[SampledPoint] = []
    half_step = (t_max / n_points) * 0.5

    for i in range(n_points + 1):
        t = (i / n_points) * t_max

        if t_removal is not None and i > 0:
            t_prev = ((i - 1) / n_points) * t_max
            if t_prev < t_removal <= t:
                value_before = response_at(model, t_removal, magnitude)
                data.append(_point(t_removal, value_before, magnitude))
                data.append(_point(t_removal, value_before - instant_drop, 0.0))
                if abs(t - t_removal) < half_step:
                    continue

        if t_removal is not None and t > t_removal:
            value = response_at(model, t, magnitude) - response_at(model, t - t_removal, magnitude)
            load = 0.0
        else:
            value = response_at(model, t, magnitude)
            load = magnitude
        data.append(_point(t, value, load))

    return data


def compute_creep(
    model,
    t_max: float,
    n_points: int,
    sigma0: float,
    t_removal: Optional[float] = None,
) -> List[SampledPoint]:
    """
    Creep curve ε(t) for a constant stress sigma0, optionally removed at t_removal.

    Parameters are not validated here (see ResponseParams.validate).
    """
    logger.debug("Creep: t_max=%s n_points=%s sigma0=%s t_removal=%s",
                 t_max, n_points, sigma0, t_removal)
    instant_drop = instant_elastic_strain(model, sigma0)
    return sample_response(model, t_max, n_points, sigma0, t_removal,
                           creep_at_time, instant_drop)


def compute_relaxation(
    model,
    t_max: float,
    n_points: int,
    eps0: float,
    t_removal: Optional[float] = None,
) -> List[SampledPoint]:
    """
    Relaxation curve σ(t) for a constant strain eps0, optionally removed at t_removal.

    Parameters are not validated here (see ResponseParams.validate).
    """
    logger.debug("Relaxation: t_max=%s n_points=%s eps0=%s t_removal=%s",
                 t_max, n_points, eps0, t_removal)
    instant_drop = instant_elastic_stress(model, eps0)
    return sample_response(model, t_max, n_points, eps0, t_removal,
                           relax_at_time, instant_drop)


@dataclass(frozen=True)
class ResponseSet:
    """Creep and relaxation curves computed for the same tree and parameters."""
    creep: List[SampledPoint]
    relax: List[SampledPoint]


def compute_responses(model, params: ResponseParams) -> ResponseSet:
    """Both curves for one parameter set, the way the UI and API consume them."""
    return ResponseSet(
        creep=compute_creep(model, params.t_max, int(params.n_points), params.sigma0, params.t_removal),
        relax=compute_relaxation(model, params.t_max, int(params.n_points), params.eps0, params.t_removal),
    )
