# rheonet/kernel - Laplace-domain solver core
"""
KERNEL: IMPEDANCE ALGEBRA + NUMERICAL INVERSION
================================================

Everything with numerical content lives here:

    impedance.py   Z(s) of any spring/dashpot tree (real s > 0)
    stehfest.py    Stehfest weights and the inverse Laplace transform
    response.py    creep / relaxation sampling with Boltzmann unloading

The kernel is pure: no I/O, no shared state, no validation. Give it a
tree and parameters, get back a list of SampledPoint.
"""

from .impedance import compute_impedance
from .stehfest import STEHFEST_N, stehfest_coefficients, inverse_laplace
from .response import (
    compute_creep,
    compute_relaxation,
    compute_responses,
    creep_at_time,
    relax_at_time,
    instant_elastic_strain,
    instant_elastic_stress,
    ResponseSet,
)

__all__ = [
    'compute_impedance',
    'STEHFEST_N',
    'stehfest_coefficients',
    'inverse_laplace',
    'compute_creep',
    'compute_relaxation',
    'compute_responses',
    'creep_at_time',
    'relax_at_time',
    'instant_elastic_strain',
    'instant_elastic_stress',
    'ResponseSet',
]
