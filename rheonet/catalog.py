"""
CATALOG: PRESET RHEOLOGICAL MODELS
===================================

PURPOSE:
--------
The classic linear viscoelastic models, ready to load into the editor or
solve directly. Instead of rebuilding a Burgers model by hand every time,
pick it by key:

    load_preset("burgers", ids)

ENGINEERING CONTEXT:
--------------------
- **Maxwell** (spring + dashpot in series): a fluid. Creeps without bound,
  relaxes completely to zero stress.
- **Kelvin-Voigt** (spring || dashpot): a solid with delayed elasticity.
  Creep approaches σ0/E, no instantaneous strain.
- **Standard Linear Solid** (Zener): the simplest model with both an
  instantaneous response and a finite long-term modulus.
- **Burgers** (Maxwell + Kelvin-Voigt in series): instant, delayed and
  permanent (viscous) strain; the usual model for asphalt and polymers.
- **Generalized Maxwell** (Prony series): equilibrium spring plus parallel
  Maxwell arms; one relaxation time per arm.

Parameter units are whatever the user chooses (consistent E and η, e.g.
MPa and MPa·s); the catalog values are the editor's demo values.
"""

from dataclasses import dataclass
from typing import Dict

from .ids import IdGenerator
from .model import Dashpot, Node, Parallel, Series, Spring
from .tree import clone_model


@dataclass(frozen=True)
class Preset:
    """
    A named model template.

    key : str
        Stable lookup key used by the API and the app ("maxwell", ...)
    name : str
        Human-readable name shown in pickers
    model : Node
        Template tree. Its ids are only unique within the template;
        use load_preset() to get a copy with fresh ids.
    """
    key: str
    name: str
    model: Node


PRESETS: Dict[str, Preset] = {
    "maxwell": Preset(
        key="maxwell",
        name="Maxwell",
        model=Series("root", (
            Spring("s1", 100.0),
            Dashpot("d1", 50.0),
        )),
    ),
    "voigt": Preset(
        key="voigt",
        name="Voigt (Kelvin)",
        model=Parallel("root", (
            Spring("s1", 100.0),
            Dashpot("d1", 50.0),
        )),
    ),
    "std-3-maxwell": Preset(
        key="std-3-maxwell",
        name="Standard Linear Solid (3-elem Maxwell)",
        model=Parallel("root", (
            Spring("s1", 60.0),
            Series("arm", (
                Spring("s2", 100.0),
                Dashpot("d1", 50.0),
            )),
        )),
    ),
    "std-3-voigt": Preset(
        key="std-3-voigt",
        name="Standard Linear Solid (3-elem Voigt)",
        model=Series("root", (
            Spring("s1", 100.0),
            Parallel("arm", (
                Spring("s2", 60.0),
                Dashpot("d1", 50.0),
            )),
        )),
    ),
    "burgers": Preset(
        key="burgers",
        name="Burgers (4-element)",
        model=Series("root", (
            Spring("s1", 100.0),
            Dashpot("d1", 200.0),
            Parallel("kv", (
                Spring("s2", 80.0),
                Dashpot("d2", 40.0),
            )),
        )),
    ),
    "gen-maxwell": Preset(
        key="gen-maxwell",
        name="Generalized Maxwell (Prony)",
        model=Parallel("root", (
            Spring("s_eq", 30.0),
            Series("arm1", (
                Spring("s1", 80.0),
                Dashpot("d1", 40.0),
            )),
            Series("arm2", (
                Spring("s2", 50.0),
                Dashpot("d2", 120.0),
            )),
        )),
    ),
}

DEFAULT_PRESET = "std-3-maxwell"


def load_preset(key: str, ids: IdGenerator) -> Node:
    """
    Fresh copy of a preset tree with ids drawn from `ids`.

    Raises:
        KeyError: unknown preset key
    """
    if key not in PRESETS:
        raise KeyError(f"Unknown preset '{key}'. Available: {', '.join(PRESETS)}")
    return clone_model(PRESETS[key].model, ids)
