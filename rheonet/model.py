# Spring, Dashpot, Series, Parallel, SampledPoint, ResponseParams (dataclasses)
"""
MODEL: RHEOLOGICAL NETWORK DEFINITIONS
=======================================

A rheological model is a TREE:
- Leaves are elements: Spring (elastic, modulus E) and Dashpot (viscous, eta).
- Groups combine children: Series (compliances add) and Parallel
  (impedances add).

Every node is a frozen dataclass. A tree is an immutable value: editing
builds a new tree (see tree.py), the solver never mutates one.

    Maxwell        = Series(Spring, Dashpot)
    Kelvin-Voigt   = Parallel(Spring, Dashpot)
    Zener (SLS)    = Parallel(Spring, Series(Spring, Dashpot))
"""

import math
import numbers
from dataclasses import dataclass
from typing import Optional, Tuple, Union


class ModelValidationError(ValueError):
    """Raised when a model tree or a parameter set is not solvable."""
    pass


@dataclass(frozen=True)
class Spring:
    """Linear elastic element: Z(s) = E."""
    id: str
    E: float


@dataclass(frozen=True)
class Dashpot:
    """Linear viscous element: Z(s) = eta·s."""
    id: str
    eta: float


@dataclass(frozen=True)
class Series:
    """Children share the same stress; strains (compliances) add."""
    id: str
    children: Tuple["Node", ...]


@dataclass(frozen=True)
class Parallel:
    """Children share the same strain; stresses (impedances) add."""
    id: str
    children: Tuple["Node", ...]


Node = Union[Spring, Dashpot, Series, Parallel]
ELEMENT_TYPES = (Spring, Dashpot)
GROUP_TYPES = (Series, Parallel)


@dataclass(frozen=True)
class SampledPoint:
    """
    One sample of a response curve.

    t : time (rounded to 6 decimals)
    value : strain for creep, stress for relaxation (rounded to 6 decimals)
    load : currently applied magnitude (sigma0 / eps0), 0 after removal
    """
    t: float
    value: float
    load: float


@dataclass(frozen=True)
class ResponseParams:
    """
    Loading and sampling parameters for one creep + relaxation run.

    The kernel never checks these; call validate() before handing
    them to compute_creep / compute_relaxation.
    """
    sigma0: float = 1.0
    eps0: float = 1.0
    t_max: float = 10.0
    n_points: int = 200
    t_removal: Optional[float] = None

    def validate(self) -> "ResponseParams":
        if not self.sigma0 > 0:
            raise ModelValidationError(f"sigma0 must be > 0 (got {self.sigma0}).")
        if not self.eps0 > 0:
            raise ModelValidationError(f"eps0 must be > 0 (got {self.eps0}).")
        if not (self.t_max > 0 and math.isfinite(self.t_max)):
            raise ModelValidationError(f"t_max must be finite and > 0 (got {self.t_max}).")
        n = self.n_points
        if (isinstance(n, bool) or not isinstance(n, numbers.Real) or not math.isfinite(n)
                or int(n) != n or n < 1):
            raise ModelValidationError(f"n_points must be an integer >= 1 (got {self.n_points}).")
        if self.t_removal is not None and not (0 < self.t_removal < self.t_max):
            raise ModelValidationError(
                f"t_removal must lie in (0, t_max={self.t_max}) (got {self.t_removal})."
            )
        return self
