# app/services/export_service.py
"""
Export service: handles file exports (CSV, JSON).
"""

import json
from typing import Any, Dict, Sequence

from rheonet.model import Node, SampledPoint
from rheonet.post import responses_to_dataframe
from rheonet.serialize import points_to_records, tree_to_dict


class ExportService:
    """Service for exporting curves and models."""

    @staticmethod
    def generate_response_csv(creep: Sequence[SampledPoint], relax: Sequence[SampledPoint]) -> str:
        """Both curves in one CSV (columns mode, t, value, load)."""
        return responses_to_dataframe(creep, relax).to_csv(index=False)

    @staticmethod
    def generate_model_json(
        tree: Node,
        params: Dict[str, Any],
        creep: Sequence[SampledPoint],
        relax: Sequence[SampledPoint],
        model_name: str = None,
    ) -> str:
        payload = {
            "version": "1.0",
            "model_name": model_name,
            "model": tree_to_dict(tree),
            "parameters": params,
            "creep": points_to_records(creep),
            "relax": points_to_records(relax),
        }
        return json.dumps(payload, indent=2)
