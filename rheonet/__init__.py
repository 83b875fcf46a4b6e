# rheonet - Spring/dashpot network creep and relaxation solver
"""
RHEONET: Linear Viscoelastic Network Solver
============================================

This package provides:
- Arbitrary spring/dashpot trees (series and parallel groups)
- Laplace-domain impedance algebra + Stehfest inversion
- Creep and relaxation curves with Boltzmann load removal
- Preset classic models (Maxwell, Kelvin-Voigt, SLS, Burgers, Prony)

ARCHITECTURE:
-------------
    kernel/         Numerical core (impedance, Stehfest, response sampling)
    model.py        Node dataclasses, SampledPoint, ResponseParams
    ids.py          Explicit node id generator
    tree.py         Immutable tree edits, validation, model identification
    catalog.py      Preset models
    serialize.py    Tree <-> dict (JSON) conversion
    post.py         DataFrames, summary metrics, animation frames
    viz.py          Matplotlib charts
    scheduling.py   Last-writer-wins background recompute
"""

from .model import (
    Spring,
    Dashpot,
    Series,
    Parallel,
    SampledPoint,
    ResponseParams,
    ModelValidationError,
)
from .kernel import (
    compute_impedance,
    compute_creep,
    compute_relaxation,
    compute_responses,
    inverse_laplace,
    stehfest_coefficients,
)

__version__ = "0.1.0"
