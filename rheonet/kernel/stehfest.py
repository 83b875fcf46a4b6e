# rheonet/kernel/stehfest.py
"""
STEHFEST NUMERICAL INVERSE LAPLACE TRANSFORM
=============================================

Given only F(s) on the positive real axis, approximate f(t):

    f(t) ≈ (ln2 / t) · Σ_{i=1..N} V_i · F(i · ln2 / t)

The weights V_i depend only on N, so they are computed once at import.
N must be even. Double precision limits N to roughly 16-20 before the
factorials and the alternating sum lose all accuracy; N = 12 is a good
compromise for smooth, non-oscillating responses like creep/relaxation.
"""

import math
from typing import Callable, Optional

import numpy as np

STEHFEST_N = 12


def _factorial(n: int) -> float:
    if n < 0:
        return math.inf
    r = 1.0
    for i in range(2, n + 1):
        r *= i
    return r


def stehfest_coefficients(N: int = STEHFEST_N) -> np.ndarray:
    """
    Stehfest weights V_1..V_N for an even N.

    V_i = (-1)^(i+N/2) Σ_k k^(N/2)(2k)! / [(N/2-k)! k! (k-1)! (i-k)! (2k-i)!]
    with k running from floor((i+1)/2) to min(i, N/2).
    """
    half = N // 2
    V = np.zeros(N, dtype=float)
    for i in range(1, N + 1):
        total = 0.0
        k_min = (i + 1) // 2
        k_max = min(i, half)
        for k in range(k_min, k_max + 1):
            num = float(k) ** half * _factorial(2 * k)
            den = (
                _factorial(half - k)
                * _factorial(k)
                * _factorial(k - 1)
                * _factorial(i - k)
                * _factorial(2 * k - i)
            )
            total += num / den
        V[i - 1] = (-1.0) ** (i + half) * total
    return V


COEFFICIENTS = stehfest_coefficients(STEHFEST_N)


def inverse_laplace(
    F: Callable[[float], float],
    t: float,
    coefficients: Optional[np.ndarray] = None,
) -> float:
    """
    Time-domain value f(t) of a Laplace-domain function F(s).

    Returns 0 for t <= 0 (causal: nothing happens before the load starts).
    """
    if t <= 0:
        return 0.0
    V = COEFFICIENTS if coefficients is None else coefficients
    ln2_over_t = math.log(2.0) / t
    total = 0.0
    for i in range(len(V)):
        s = (i + 1) * ln2_over_t
        total += float(V[i]) * F(s)
    return total * ln2_over_t
