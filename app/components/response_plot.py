# app/components/response_plot.py
"""
Interactive creep / relaxation charts.
"""

import plotly.graph_objects as go
from plotly.subplots import make_subplots
from typing import Optional, Sequence

from rheonet.model import SampledPoint

MODE_STYLE = {
    'creep': {'color': '#E67E22', 'value': 'Strain ε(t)', 'load': 'σ₀', 'title': 'Creep (constant stress)'},
    'relax': {'color': '#3498DB', 'value': 'Stress σ(t)', 'load': 'ε₀', 'title': 'Relaxation (constant strain)'},
}


def render_response_plot(
    points: Sequence[SampledPoint],
    mode: str = 'creep',
    t_removal: Optional[float] = None,
    height: int = 380,
) -> go.Figure:
    """
    Response curve with the applied load on a secondary axis.

    Parameters:
    -----------
    points : Sequence[SampledPoint]
        Sampled curve
    mode : str
        'creep' or 'relax'
    t_removal : float, optional
        Adds a dashed marker at the removal time
    height : int
        Figure height in pixels

    Returns:
    --------
    go.Figure
    """
    style = MODE_STYLE[mode]
    fig = make_subplots(specs=[[{"secondary_y": True}]])

    if len(points) == 0:
        fig.add_annotation(
            text="No data",
            xref="paper", yref="paper",
            x=0.5, y=0.5,
            showarrow=False,
            font=dict(size=16, color="gray")
        )
        fig.update_layout(height=height)
        return fig

    t = [p.t for p in points]
    fig.add_trace(go.Scatter(
        x=t,
        y=[p.value for p in points],
        mode='lines',
        line=dict(color=style['color'], width=2.5),
        name=style['value'],
        hovertemplate="t=%{x:.4g}<br>value=%{y:.6g}<extra></extra>",
    ), secondary_y=False)

    fig.add_trace(go.Scatter(
        x=t,
        y=[p.load for p in points],
        mode='lines',
        line=dict(color='rgba(155, 89, 182, 0.6)', width=1, dash='dot', shape='hv'),
        name=f"Load {style['load']}",
        hoverinfo='skip',
    ), secondary_y=True)

    if t_removal is not None:
        fig.add_vline(x=t_removal, line_dash="dash", line_color="gray",
                      annotation_text="removed", annotation_position="top")

    fig.update_layout(
        title=style['title'],
        height=height,
        margin=dict(l=40, r=40, t=60, b=40),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        plot_bgcolor='#FAFAFA',
    )
    fig.update_xaxes(title_text="Time t", gridcolor='#E0E0E0')
    fig.update_yaxes(title_text=style['value'], secondary_y=False, gridcolor='#E0E0E0')
    fig.update_yaxes(title_text=f"Load {style['load']}", secondary_y=True, showgrid=False, rangemode='tozero')
    return fig
