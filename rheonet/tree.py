# Immutable tree edits, lookup, validation and model identification
"""
TREE: EDITING RHEOLOGICAL MODELS
=================================

Every function here returns a NEW tree and leaves its input untouched, so a
tree can be handed to the solver (or a background worker) while the user
keeps editing. Any edit invalidates previously computed curves; callers
recompute from scratch.

Node ids must be unique within a tree. New nodes get their ids from an
IdGenerator passed in by the caller.
"""

import logging
from dataclasses import replace
from typing import Callable, Iterator, Optional

from .ids import IdGenerator
from .model import (
    Dashpot,
    ModelValidationError,
    Node,
    Parallel,
    Series,
    Spring,
    GROUP_TYPES,
)

logger = logging.getLogger(__name__)

DEFAULT_SPRING_E = 100.0
DEFAULT_DASHPOT_ETA = 50.0


# =============================================================================
# Factories
# =============================================================================

def new_spring(ids: IdGenerator, E: float = DEFAULT_SPRING_E) -> Spring:
    return Spring(id=ids(), E=E)


def new_dashpot(ids: IdGenerator, eta: float = DEFAULT_DASHPOT_ETA) -> Dashpot:
    return Dashpot(id=ids(), eta=eta)


def new_series(ids: IdGenerator) -> Series:
    """A new series group starts as a Maxwell arm (spring + dashpot)."""
    group_id = ids()
    return Series(id=group_id, children=(new_spring(ids), new_dashpot(ids)))


def new_parallel(ids: IdGenerator) -> Parallel:
    """A new parallel group starts as a Kelvin-Voigt arm (spring + dashpot)."""
    group_id = ids()
    return Parallel(id=group_id, children=(new_spring(ids), new_dashpot(ids)))


def clone_model(node: Node, ids: IdGenerator) -> Node:
    """Deep copy of a tree with every id replaced by a fresh one."""
    new_id = ids()
    if isinstance(node, GROUP_TYPES):
        return replace(node, id=new_id, children=tuple(clone_model(c, ids) for c in node.children))
    return replace(node, id=new_id)


# =============================================================================
# Lookup
# =============================================================================

def iter_nodes(tree: Node) -> Iterator[Node]:
    """Depth-first, pre-order walk over every node."""
    yield tree
    if isinstance(tree, GROUP_TYPES):
        for child in tree.children:
            yield from iter_nodes(child)


def find_node(tree: Node, node_id: str) -> Optional[Node]:
    for node in iter_nodes(tree):
        if node.id == node_id:
            return node
    return None


def find_parent(tree: Node, node_id: str) -> Optional[Node]:
    if isinstance(tree, GROUP_TYPES):
        for child in tree.children:
            if child.id == node_id:
                return tree
            found = find_parent(child, node_id)
            if found is not None:
                return found
    return None


def count_elements(tree: Node) -> int:
    """Number of springs and dashpots (groups are not counted)."""
    if isinstance(tree, (Spring, Dashpot)):
        return 1
    if isinstance(tree, GROUP_TYPES):
        return sum(count_elements(c) for c in tree.children)
    return 0


def describe_node(node: Node) -> str:
    if isinstance(node, Spring):
        return f"Spring (E={node.E:g})"
    if isinstance(node, Dashpot):
        return f"Dashpot (η={node.eta:g})"
    if isinstance(node, Series):
        return "Series group"
    if isinstance(node, Parallel):
        return "Parallel group"
    return ""


# =============================================================================
# Edits
# =============================================================================

def update_node(tree: Node, node_id: str, updater: Callable[[Node], Node]) -> Node:
    """Replace the node with id node_id by updater(node)."""
    if tree.id == node_id:
        return updater(tree)
    if isinstance(tree, GROUP_TYPES):
        return replace(tree, children=tuple(update_node(c, node_id, updater) for c in tree.children))
    return tree


def set_parameter(tree: Node, node_id: str, key: str, value: float) -> Node:
    """
    Set E (spring) or eta (dashpot) on one element.

    Non-positive values are ignored and the tree is returned unchanged,
    like the editor refusing the input.
    """
    if not value > 0:
        logger.info("Ignoring non-positive %s=%s for node %s", key, value, node_id)
        return tree

    def _apply(node: Node) -> Node:
        if not hasattr(node, key) or key in ("id", "children"):
            raise ModelValidationError(f"Node {node_id} has no parameter '{key}'.")
        return replace(node, **{key: float(value)})

    return update_node(tree, node_id, _apply)


def remove_node(tree: Node, node_id: str) -> Optional[Node]:
    """
    Remove a node (and its subtree).

    Returns None when node_id is the root itself; callers keep the old tree
    in that case. Removing a group's last child leaves an empty group,
    which validate_tree rejects.
    """
    if tree.id == node_id:
        return None
    if isinstance(tree, GROUP_TYPES):
        children = (remove_node(c, node_id) for c in tree.children)
        return replace(tree, children=tuple(c for c in children if c is not None))
    return tree


def add_child(tree: Node, parent_id: str, child: Node) -> Node:
    """Append child to the group with id parent_id (leaves cannot take children)."""
    if tree.id == parent_id and isinstance(tree, GROUP_TYPES):
        return replace(tree, children=tree.children + (child,))
    if isinstance(tree, GROUP_TYPES):
        return replace(tree, children=tuple(add_child(c, parent_id, child) for c in tree.children))
    return tree


# =============================================================================
# Validation
# =============================================================================

def validate_tree(tree: Node) -> Node:
    """
    Check that a tree is solvable before handing it to the kernel.

    The kernel silently absorbs bad trees (unknown nodes count as zero
    impedance), so callers that accept trees from users run this first.

    Raises:
        ModelValidationError: unknown node type, empty group, duplicate id,
            non-positive E or eta
    """
    seen = set()
    for node in iter_nodes(tree):
        if not isinstance(node, (Spring, Dashpot, Series, Parallel)):
            raise ModelValidationError(f"Unknown node type: {type(node).__name__}")
        if node.id in seen:
            raise ModelValidationError(f"Duplicate node id '{node.id}'.")
        seen.add(node.id)
        if isinstance(node, Spring) and not node.E > 0:
            raise ModelValidationError(f"Spring '{node.id}' needs E > 0 (got {node.E}).")
        if isinstance(node, Dashpot) and not node.eta > 0:
            raise ModelValidationError(f"Dashpot '{node.id}' needs eta > 0 (got {node.eta}).")
        if isinstance(node, GROUP_TYPES) and len(node.children) == 0:
            raise ModelValidationError(f"Group '{node.id}' has no children.")
    return tree


# =============================================================================
# Model identification
# =============================================================================

KNOWN_MODELS = {
    "ser(D,S)": "Maxwell Model",
    "par(D,S)": "Kelvin–Voigt Model",
    "par(S,ser(D,S))": "Standard Linear Solid (Zener / 3-elem Maxwell)",
    "ser(S,par(D,S))": "Standard Linear Solid (3-elem Voigt)",
    "ser(D,S,par(D,S))": "Burgers Model",
}


def model_signature(node: Node) -> str:
    """Order-insensitive structural signature, e.g. 'ser(D,S)' for Maxwell."""
    if isinstance(node, Spring):
        return "S"
    if isinstance(node, Dashpot):
        return "D"
    if isinstance(node, Series):
        return "ser(" + ",".join(sorted(model_signature(c) for c in node.children)) + ")"
    if isinstance(node, Parallel):
        return "par(" + ",".join(sorted(model_signature(c) for c in node.children)) + ")"
    return "?"


def identify_model(tree: Node) -> Optional[str]:
    """Textbook name of the tree if it matches a classic model, else None."""
    return KNOWN_MODELS.get(model_signature(tree))
