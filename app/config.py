# app/config.py
"""
Application configuration and defaults.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class AppConfig:
    """Global application configuration."""

    # App metadata
    app_name: str = "RheoCraft"
    app_subtitle: str = "Viscoelastic Network Explorer"
    version: str = "0.1.0"

    # Default loading
    default_sigma0: float = 1.0
    default_eps0: float = 1.0
    default_t_max: float = 10.0
    default_n_points: int = 200
    default_t_removal: float = 5.0
    default_enable_removal: bool = True

    # Default model
    default_preset: str = "std-3-maxwell"

    # New element parameters
    default_E: float = 100.0
    default_eta: float = 50.0

    # Parameter ranges for sidebar inputs
    t_max_range: Tuple[float, float] = (0.5, 200.0)
    n_points_range: Tuple[int, int] = (20, 1000)
    magnitude_range: Tuple[float, float] = (0.01, 1000.0)


# Global config instance
CONFIG = AppConfig()
