"""
VISUALIZATION: CREEP AND RELAXATION CHARTS
===========================================

PURPOSE:
--------
Static matplotlib charts of sampled responses, for reports and demo
scripts. The interactive app draws the same curves with plotly.

WHAT TO LOOK FOR:
-----------------
- **Creep**: a vertical jump at t=0 means the network has an instantaneous
  (glassy) compliance; a straight ramp means unbounded viscous flow
  (Maxwell, Burgers); an exponential approach to a plateau means delayed
  elasticity (Kelvin-Voigt, SLS).
- **Relaxation**: decay to zero means a fluid; decay to a plateau means a
  solid with a long-term modulus.
- **Unloading**: the vertical drop at t_removal is the instant elastic
  recovery; whatever is left at the end is permanent set.
"""

import logging
import os
from typing import Optional, Sequence

import matplotlib.pyplot as plt

from .model import SampledPoint

logger = logging.getLogger(__name__)

COLORS = {
    'creep': '#E67E22',        # Orange (strain)
    'relax': '#3498DB',        # Sky blue (stress)
    'load': '#9B59B6',         # Purple (applied load)
    'removal': '#7F8C8D',      # Gray (removal marker)
    'background': '#FAFAFA',
    'text': '#2C3E50',
}

FONT_TITLE = {'family': 'sans-serif', 'weight': 'bold', 'size': 14}
FONT_LABEL = {'family': 'sans-serif', 'weight': 'normal', 'size': 11}

AXIS_LABELS = {
    'creep': ('Strain ε(t)', 'Stress σ₀'),
    'relax': ('Stress σ(t)', 'Strain ε₀'),
}


def _draw_response(ax, points: Sequence[SampledPoint], mode: str, t_removal: Optional[float]) -> None:
    t = [p.t for p in points]
    v = [p.value for p in points]
    load = [p.load for p in points]
    value_label, load_label = AXIS_LABELS[mode]

    ax.set_facecolor(COLORS['background'])
    ax.plot(t, v, color=COLORS[mode], linewidth=2, label=value_label)
    ax.set_xlabel('Time t', fontdict=FONT_LABEL)
    ax.set_ylabel(value_label, fontdict=FONT_LABEL, color=COLORS[mode])
    ax.grid(True, alpha=0.3, linestyle='--')

    # Applied load on a twin axis, as a step
    ax_load = ax.twinx()
    ax_load.step(t, load, where='post', color=COLORS['load'], linewidth=1,
                 alpha=0.6, linestyle=':', label=load_label)
    ax_load.set_ylabel(load_label, fontdict=FONT_LABEL, color=COLORS['load'])
    top = max(load) if load else 1.0
    ax_load.set_ylim(-0.05 * top, 1.5 * top if top > 0 else 1.0)

    if t_removal is not None:
        ax.axvline(t_removal, color=COLORS['removal'], linestyle='--', linewidth=1,
                   label=f'Load removed (t={t_removal:g})')

    lines, labels = ax.get_legend_handles_labels()
    lines2, labels2 = ax_load.get_legend_handles_labels()
    ax.legend(lines + lines2, labels + labels2, loc='best', fontsize=9, framealpha=0.9)


def _save(fig, outpath: str) -> None:
    os.makedirs(os.path.dirname(outpath) if os.path.dirname(outpath) else '.', exist_ok=True)
    fig.tight_layout()
    fig.savefig(outpath, dpi=150, bbox_inches='tight')
    plt.close(fig)
    logger.info("Plot saved to: %s", outpath)


def plot_response(
    points: Sequence[SampledPoint],
    outpath: str,
    mode: str = 'creep',
    t_removal: Optional[float] = None,
    title: Optional[str] = None,
) -> None:
    """
    One response curve with its load history.

    Parameters:
    -----------
    points : Sequence[SampledPoint]
        Output of compute_creep or compute_relaxation
    outpath : str
        File to write (.png, .pdf, .svg); parent directory is created
    mode : str
        'creep' or 'relax' (axis labels and color)
    t_removal : float, optional
        Draws a marker at the removal time
    title : str, optional
        Defaults to "Creep" / "Relaxation"
    """
    if mode not in AXIS_LABELS:
        raise ValueError(f"mode must be 'creep' or 'relax' (got {mode!r})")
    fig, ax = plt.subplots(figsize=(9, 5))
    _draw_response(ax, points, mode, t_removal)
    ax.set_title(title or ('Creep' if mode == 'creep' else 'Relaxation'), fontdict=FONT_TITLE)
    _save(fig, outpath)


def plot_creep_relaxation(
    creep: Sequence[SampledPoint],
    relax: Sequence[SampledPoint],
    outpath: str,
    t_removal: Optional[float] = None,
    model_name: Optional[str] = None,
) -> None:
    """Creep and relaxation side by side, as shown in the app."""
    fig, (ax_c, ax_r) = plt.subplots(1, 2, figsize=(14, 5))
    _draw_response(ax_c, creep, 'creep', t_removal)
    ax_c.set_title('Creep (constant stress)', fontdict=FONT_TITLE)
    _draw_response(ax_r, relax, 'relax', t_removal)
    ax_r.set_title('Relaxation (constant strain)', fontdict=FONT_TITLE)
    if model_name:
        fig.suptitle(model_name, fontsize=16, fontweight='bold', color=COLORS['text'])
    _save(fig, outpath)
