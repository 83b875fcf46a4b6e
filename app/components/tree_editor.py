# app/components/tree_editor.py
"""
Tree editor: shows the model as an indented outline with add/remove/edit controls.
"""

import streamlit as st
from typing import List, Tuple

from rheonet.catalog import PRESETS, load_preset
from rheonet.model import Dashpot, ModelValidationError, Node, Spring, GROUP_TYPES
from rheonet.serialize import tree_from_json
from rheonet.tree import (
    add_child,
    describe_node,
    find_node,
    new_dashpot,
    new_parallel,
    new_series,
    new_spring,
    remove_node,
    set_parameter,
    validate_tree,
)

from config import CONFIG
from state import get_ids, get_model, get_selected_id, set_model, set_selected_id


def outline(tree: Node, depth: int = 0) -> List[Tuple[int, Node]]:
    """(depth, node) pairs in display order."""
    rows = [(depth, tree)]
    if isinstance(tree, GROUP_TYPES):
        for child in tree.children:
            rows.extend(outline(child, depth + 1))
    return rows


def render_preset_picker() -> None:
    keys = list(PRESETS)
    key = st.selectbox(
        "Preset",
        options=keys,
        index=keys.index(CONFIG.default_preset),
        format_func=lambda k: PRESETS[k].name,
        key="preset_key",
    )
    if st.button("Load preset", use_container_width=True):
        set_model(load_preset(key, get_ids()))
        set_selected_id(None)
        st.rerun()


def render_model_import() -> None:
    """Load a tree from a JSON file (a model export or a bare tree)."""
    uploaded = st.file_uploader("Import model (JSON)", type=["json"], key="model_upload")
    if uploaded is None:
        return
    if st.button("Load file", use_container_width=True):
        try:
            tree = validate_tree(tree_from_json(uploaded.getvalue().decode("utf-8"), get_ids()))
        except (ModelValidationError, UnicodeDecodeError) as e:
            st.error(f"Could not import model: {e}")
            return
        set_model(tree)
        set_selected_id(None)
        st.rerun()


def render_tree_editor() -> None:
    """Outline of the tree plus controls for the selected node."""
    tree = get_model()
    ids = get_ids()

    rows = outline(tree)
    labels = {node.id: (" " * depth) + describe_node(node) for depth, node in rows}
    options = [node.id for _, node in rows]
    selected = get_selected_id()
    if selected not in labels:
        selected = tree.id

    selected = st.radio(
        "Model tree",
        options=options,
        index=options.index(selected),
        format_func=lambda node_id: labels[node_id],
        key="tree_selection",
    )
    set_selected_id(selected)
    node = find_node(tree, selected)

    if isinstance(node, Spring):
        E = st.number_input("E (modulus)", min_value=1e-9, value=float(node.E), key=f"E_{node.id}")
        if E != node.E:
            set_model(set_parameter(tree, node.id, "E", E))
            st.rerun()
    elif isinstance(node, Dashpot):
        eta = st.number_input("η (viscosity)", min_value=1e-9, value=float(node.eta), key=f"eta_{node.id}")
        if eta != node.eta:
            set_model(set_parameter(tree, node.id, "eta", eta))
            st.rerun()
    elif isinstance(node, GROUP_TYPES):
        col1, col2 = st.columns(2)
        with col1:
            if st.button("+ Spring", use_container_width=True):
                set_model(add_child(tree, node.id, new_spring(ids, CONFIG.default_E)))
                st.rerun()
            if st.button("+ Series", use_container_width=True):
                set_model(add_child(tree, node.id, new_series(ids)))
                st.rerun()
        with col2:
            if st.button("+ Dashpot", use_container_width=True):
                set_model(add_child(tree, node.id, new_dashpot(ids, CONFIG.default_eta)))
                st.rerun()
            if st.button("+ Parallel", use_container_width=True):
                set_model(add_child(tree, node.id, new_parallel(ids)))
                st.rerun()

    if node.id != tree.id:
        if st.button("🗑️ Remove", use_container_width=True):
            new_tree = remove_node(tree, node.id)
            if new_tree is not None:
                set_model(new_tree)
                set_selected_id(None)
                st.rerun()
