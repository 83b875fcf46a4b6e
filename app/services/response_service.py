# app/services/response_service.py
"""
Response service: validates the current tree and computes both curves.
"""

import logging
from typing import Any, Dict, Tuple

from rheonet.kernel.response import compute_responses
from rheonet.model import ModelValidationError, Node, ResponseParams
from rheonet.post import response_summary
from rheonet.tree import count_elements, identify_model, validate_tree

logger = logging.getLogger(__name__)


class ResponseService:
    """Service for computing creep/relaxation curves of the edited tree."""

    @staticmethod
    def create_params(settings) -> ResponseParams:
        """Convert LoadSettings to ResponseParams."""
        return ResponseParams(
            sigma0=settings.sigma0,
            eps0=settings.eps0,
            t_max=settings.t_max,
            n_points=settings.n_points,
            t_removal=settings.effective_removal,
        )

    @staticmethod
    def compute(tree: Node, params: ResponseParams) -> Tuple[bool, Dict[str, Any], str]:
        """
        Validate and solve.

        Returns:
            success: bool
            result: dict with creep, relax, summaries, model_name, n_elements
            error: str (empty if success)
        """
        try:
            validate_tree(tree)
            params.validate()
            responses = compute_responses(tree, params)
        except ModelValidationError as e:
            return False, {}, f"Invalid model: {e}"

        result = {
            'creep': responses.creep,
            'relax': responses.relax,
            'creep_summary': response_summary(responses.creep, params.t_removal),
            'relax_summary': response_summary(responses.relax, params.t_removal),
            'model_name': identify_model(tree),
            'n_elements': count_elements(tree),
            't_removal': params.t_removal,
        }
        logger.debug("Computed %d creep / %d relax points",
                     len(responses.creep), len(responses.relax))
        return True, result, ""

    @staticmethod
    def compute_from_settings(tree: Node, settings) -> Tuple[bool, Dict[str, Any], str]:
        return ResponseService.compute(tree, ResponseService.create_params(settings))
