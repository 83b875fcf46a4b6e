# app/state/session.py
"""
Session state management for Streamlit.

Provides typed accessors for session state to avoid
scattered st.session_state['key'] calls throughout the app.
"""

import streamlit as st
from typing import Optional
from dataclasses import dataclass

from rheonet.catalog import load_preset
from rheonet.ids import IdGenerator
from rheonet.model import Node

from config import CONFIG


@dataclass
class LoadSettings:
    """User-chosen loading and sampling parameters."""
    sigma0: float = CONFIG.default_sigma0
    eps0: float = CONFIG.default_eps0
    t_max: float = CONFIG.default_t_max
    n_points: int = CONFIG.default_n_points
    t_removal: float = CONFIG.default_t_removal
    enable_removal: bool = CONFIG.default_enable_removal

    @property
    def effective_removal(self) -> Optional[float]:
        return self.t_removal if self.enable_removal else None


# ============================================================================
# Id generator (one per browser session)
# ============================================================================

def get_ids() -> IdGenerator:
    if 'ids' not in st.session_state:
        st.session_state.ids = IdGenerator()
    return st.session_state.ids


# ============================================================================
# Model tree
# ============================================================================

def get_model() -> Node:
    """Current tree; starts from the default preset."""
    if 'model' not in st.session_state:
        st.session_state.model = load_preset(CONFIG.default_preset, get_ids())
    return st.session_state.model


def set_model(tree: Node) -> None:
    """Replace the tree. Any edit invalidates computed curves."""
    st.session_state.model = tree
    clear_results()


# ============================================================================
# Selection
# ============================================================================

def get_selected_id() -> Optional[str]:
    return st.session_state.get('selected_id', None)


def set_selected_id(node_id: Optional[str]) -> None:
    st.session_state.selected_id = node_id


# ============================================================================
# Load settings
# ============================================================================

def get_settings() -> LoadSettings:
    if 'settings' not in st.session_state:
        st.session_state.settings = LoadSettings()
    return st.session_state.settings


def update_settings(**kwargs) -> LoadSettings:
    """Update specific fields; clears results if anything changed."""
    settings = get_settings()
    changed = False
    for key, value in kwargs.items():
        if hasattr(settings, key) and getattr(settings, key) != value:
            setattr(settings, key, value)
            changed = True
    st.session_state.settings = settings
    if changed:
        clear_results()
    return settings


# ============================================================================
# Results
# ============================================================================

def get_results():
    return st.session_state.get('results', None)


def set_results(results) -> None:
    st.session_state.results = results


def clear_results() -> None:
    if 'results' in st.session_state:
        del st.session_state.results


def clear_all() -> None:
    """Clear all session state."""
    for key in list(st.session_state.keys()):
        del st.session_state[key]
