# rheonet/kernel/impedance.py
"""Laplace-domain impedance of a rheological tree on the positive real axis."""

import logging
import math

from ..model import Spring, Dashpot, Series, Parallel

logger = logging.getLogger(__name__)

# A child impedance below this magnitude shorts the whole series chain.
SHORT_CIRCUIT_TOL = 1e-30


def compute_impedance(node, s: float) -> float:
    """
    Mechanical impedance Z(s) of a node at real frequency s > 0.

    Spring:   Z = E
    Dashpot:  Z = eta·s
    Series:   1/Z = Σ 1/Z_i   (compliances add)
    Parallel: Z = Σ Z_i       (impedances add)

    Degenerate cases are absorbed numerically, never raised:
    - a series member with |Z| < 1e-30 makes the whole series 0
    - a series whose compliance sum is exactly 0 is rigid (+inf)
    - an unrecognized node contributes 0
    """
    if isinstance(node, Spring):
        return node.E
    if isinstance(node, Dashpot):
        return node.eta * s
    if isinstance(node, Series):
        total_compliance = 0.0
        for child in node.children:
            z = compute_impedance(child, s)
            if abs(z) < SHORT_CIRCUIT_TOL:
                return 0.0
            total_compliance += 1.0 / z
        if total_compliance == 0:
            return math.inf
        return 1.0 / total_compliance
    if isinstance(node, Parallel):
        total = 0.0
        for child in node.children:
            total += compute_impedance(child, s)
        return total

    logger.debug("Unrecognized node %r treated as zero impedance", node)
    return 0.0
