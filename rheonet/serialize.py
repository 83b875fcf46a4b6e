# Tree <-> plain dict conversion (JSON-compatible), and point records

import json
from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Optional

from .ids import IdGenerator
from .model import Dashpot, ModelValidationError, Node, Parallel, SampledPoint, Series, Spring
from .tree import iter_nodes


def tree_to_dict(node: Node) -> Dict[str, Any]:
    """
    Nested dict form of a tree:

        {"type": "series", "id": "root", "children": [
            {"type": "spring", "id": "s1", "E": 100.0},
            {"type": "dashpot", "id": "d1", "eta": 50.0}]}
    """
    if isinstance(node, Spring):
        return {"type": "spring", "id": node.id, "E": node.E}
    if isinstance(node, Dashpot):
        return {"type": "dashpot", "id": node.id, "eta": node.eta}
    if isinstance(node, Series):
        return {"type": "series", "id": node.id, "children": [tree_to_dict(c) for c in node.children]}
    if isinstance(node, Parallel):
        return {"type": "parallel", "id": node.id, "children": [tree_to_dict(c) for c in node.children]}
    raise ModelValidationError(f"Cannot serialize node of type {type(node).__name__}")


def tree_from_dict(data: Dict[str, Any]) -> Node:
    """
    Inverse of tree_to_dict.

    Raises:
        ModelValidationError: missing fields or unknown "type"
    """
    try:
        kind = data["type"]
        node_id = str(data["id"])
        if kind == "spring":
            return Spring(id=node_id, E=float(data["E"]))
        if kind == "dashpot":
            return Dashpot(id=node_id, eta=float(data["eta"]))
        if kind in ("series", "parallel"):
            children = tuple(tree_from_dict(c) for c in data.get("children", []))
            cls = Series if kind == "series" else Parallel
            return cls(id=node_id, children=children)
    except (KeyError, TypeError, ValueError) as e:
        if isinstance(e, ModelValidationError):
            raise
        raise ModelValidationError(f"Malformed node {data!r}: {e}") from e
    raise ModelValidationError(f"Unknown node type '{kind}'.")


def points_to_records(points: Iterable[SampledPoint]) -> List[Dict[str, float]]:
    """[{'t': .., 'value': .., 'load': ..}, ...] for JSON / DataFrame export."""
    return [asdict(p) for p in points]


def tree_from_json(text: str, ids: Optional[IdGenerator] = None) -> Node:
    """
    Load a saved model: either a bare tree dict or a full export
    ({"model": {...}, "parameters": ..., "creep": ...}).

    When `ids` is given its counter is advanced past every id in the
    loaded tree, so nodes added afterwards cannot collide with them.

    Raises:
        ModelValidationError: not JSON, or not a tree
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ModelValidationError(f"Not a JSON document: {e}") from e
    if isinstance(data, dict) and "type" not in data and isinstance(data.get("model"), dict):
        data = data["model"]
    if not isinstance(data, dict):
        raise ModelValidationError("Expected a JSON object describing a tree.")

    tree = tree_from_dict(data)
    if ids is not None:
        ids.reserve(node.id for node in iter_nodes(tree))
    return tree
