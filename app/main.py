# app/main.py
"""
RheoCraft - Real-Time Viscoelastic Network Explorer

Build a spring/dashpot network in the sidebar; creep and relaxation
curves update on every edit.

Run with:
    streamlit run app/main.py
"""

import streamlit as st
import sys
import math
from pathlib import Path
from dataclasses import asdict

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from rheonet.logging_config import setup_logging
from rheonet.post import with_preload_frames
from rheonet.tree import count_elements, identify_model

from config import CONFIG
from services import ResponseService, ExportService
from state import get_model, get_results, get_settings, set_results, update_settings
from components import render_model_import, render_preset_picker, render_response_plot, render_tree_editor

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title=CONFIG.app_name,
    page_icon="🧪",
    layout="wide",
    initial_sidebar_state="expanded",
)

if 'logging_ready' not in st.session_state:
    setup_logging()
    st.session_state.logging_ready = True

st.markdown("""
<style>
    .block-container {
        padding-top: 1rem;
        padding-bottom: 1rem;
    }
    [data-testid="stMetricValue"] {
        font-size: 1.1rem;
    }
    .sidebar-header {
        font-size: 0.9rem;
        font-weight: 600;
        color: #666;
        text-transform: uppercase;
        letter-spacing: 0.05em;
        margin-top: 1rem;
        margin-bottom: 0.5rem;
    }
</style>
""", unsafe_allow_html=True)


# =============================================================================
# SIDEBAR - Model and Loading
# =============================================================================

with st.sidebar:
    st.title("🧪 RheoCraft")
    st.caption(CONFIG.app_subtitle)

    st.divider()

    # -------------------------------------------------------------------------
    # MODEL
    # -------------------------------------------------------------------------
    st.markdown('<p class="sidebar-header">🧩 Model</p>', unsafe_allow_html=True)
    render_preset_picker()
    with st.expander("📂 Import", expanded=False):
        render_model_import()
    render_tree_editor()

    st.divider()

    # -------------------------------------------------------------------------
    # LOADING
    # -------------------------------------------------------------------------
    st.markdown('<p class="sidebar-header">⚙️ Loading</p>', unsafe_allow_html=True)
    settings = get_settings()

    col1, col2 = st.columns(2)
    with col1:
        sigma0 = st.number_input("σ₀ (creep)", *CONFIG.magnitude_range, value=settings.sigma0, key="sigma0")
    with col2:
        eps0 = st.number_input("ε₀ (relax)", *CONFIG.magnitude_range, value=settings.eps0, key="eps0")

    t_max = st.number_input("t max", *CONFIG.t_max_range, value=settings.t_max, key="t_max")
    n_points = st.slider("Points", *CONFIG.n_points_range, value=settings.n_points, step=10, key="n_points")

    enable_removal = st.checkbox("Remove load", value=settings.enable_removal, key="enable_removal")
    t_removal = settings.t_removal
    if enable_removal:
        t_removal = st.slider(
            "Removal time", 0.0, float(t_max),
            value=min(float(settings.t_removal), float(t_max) * 0.99),
            step=float(t_max) / 100, key="t_removal",
        )
        if not 0 < t_removal < t_max:
            st.warning("Removal time must lie strictly between 0 and t max.", icon="⚠️")

    settings = update_settings(
        sigma0=sigma0, eps0=eps0, t_max=t_max, n_points=int(n_points),
        enable_removal=enable_removal, t_removal=t_removal,
    )

    st.divider()

    with st.expander("ℹ️ How it works", expanded=False):
        st.markdown("""
        Each element is a mechanical impedance in the Laplace domain:
        a spring has **Z(s) = E**, a dashpot **Z(s) = η·s**.

        - *Series*: compliances add (1/Z = Σ 1/Zᵢ)
        - *Parallel*: impedances add (Z = Σ Zᵢ)

        The time response is recovered with the Stehfest numerical
        inverse Laplace transform. Load removal uses Boltzmann
        superposition: the instantaneous elastic part recovers at once,
        viscous flow stays as permanent set.
        """)


# =============================================================================
# MAIN AREA - Curves + Metrics
# =============================================================================

tree = get_model()
model_name = identify_model(tree)

col_title, col_status = st.columns([3, 1])
with col_title:
    st.title(model_name or "Custom Model")
    st.caption(f"{count_elements(tree)} elements")

results = get_results()
if results is None:
    with st.spinner("Computing responses..."):
        success, results, error = ResponseService.compute_from_settings(tree, settings)
    if success:
        set_results(results)
    else:
        results = None

with col_status:
    if results is not None:
        st.success("✓ Solved", icon="✅")
    else:
        st.error("✗ Invalid", icon="❌")

if results is None:
    st.error(error)
    st.info("Every group needs at least one element and every E / η must be positive.")
    st.stop()

# Unloaded lead-in before t=0 makes the load step visible
col_creep, col_relax = st.columns(2)
with col_creep:
    st.plotly_chart(
        render_response_plot(with_preload_frames(results['creep']), 'creep', results['t_removal']),
        use_container_width=True, key="creep_plot",
    )
with col_relax:
    st.plotly_chart(
        render_response_plot(with_preload_frames(results['relax']), 'relax', results['t_removal']),
        use_container_width=True, key="relax_plot",
    )

# -----------------------------------------------------------------------------
# METRICS
# -----------------------------------------------------------------------------
col1, col2 = st.columns(2)
for col, key, label in ((col1, 'creep_summary', 'Strain'), (col2, 'relax_summary', 'Stress')):
    summary = results[key]
    with col:
        c1, c2, c3 = st.columns(3)
        c1.metric(f"Initial {label}", f"{summary['initial']:.4g}")
        c2.metric(f"Peak {label}", f"{summary['peak']:.4g}")
        c3.metric(f"Final {label}", f"{summary['final']:.4g}")
        if results['t_removal'] is not None and not math.isnan(summary['recovered_fraction']):
            st.metric("Recovered after removal", f"{summary['recovered_fraction'] * 100:.1f} %")

# -----------------------------------------------------------------------------
# EXPORT
# -----------------------------------------------------------------------------
st.divider()
col1, col2 = st.columns(2)
with col1:
    st.download_button(
        "⬇️ Curves (CSV)",
        data=ExportService.generate_response_csv(results['creep'], results['relax']),
        file_name="rheo_response.csv",
        mime="text/csv",
        use_container_width=True,
    )
with col2:
    st.download_button(
        "⬇️ Model (JSON)",
        data=ExportService.generate_model_json(
            tree,
            asdict(ResponseService.create_params(settings)),
            results['creep'],
            results['relax'],
            model_name,
        ),
        file_name="rheo_model.json",
        mime="application/json",
        use_container_width=True,
    )
