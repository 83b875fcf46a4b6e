# File: tests/test_params.py
"""
Test ResponseParams.validate(): every bad value surfaces as
ModelValidationError, which is what the app and API catch.
"""

import math

import pytest

from app.services.response_service import ResponseService
from rheonet.catalog import PRESETS
from rheonet.kernel.response import compute_responses
from rheonet.model import ModelValidationError, ResponseParams


def test_defaults_are_valid():
    params = ResponseParams()
    assert params.validate() is params


@pytest.mark.parametrize("n_points", [0, -3, 2.5, math.nan, math.inf, "200", True, None])
def test_bad_n_points(n_points):
    with pytest.raises(ModelValidationError):
        ResponseParams(n_points=n_points).validate()


@pytest.mark.parametrize("kwargs", [
    {"sigma0": 0.0},
    {"eps0": -1.0},
    {"sigma0": math.nan},
    {"t_max": 0.0},
    {"t_max": math.inf},
    {"t_max": math.nan},
    {"t_removal": 0.0},
    {"t_removal": 10.0},
    {"t_removal": 12.0},
])
def test_bad_loading(kwargs):
    with pytest.raises(ModelValidationError):
        ResponseParams(**kwargs).validate()


def test_integral_float_n_points_is_accepted():
    """A whole-number float (e.g. from a UI widget) samples like the int."""
    params = ResponseParams(n_points=20.0, t_removal=5.0).validate()
    result = compute_responses(PRESETS["maxwell"].model, params)
    assert len(result.creep) == 22
    assert result.creep == compute_responses(PRESETS["maxwell"].model,
                                             ResponseParams(n_points=20, t_removal=5.0)).creep


@pytest.mark.parametrize("n_points", [math.nan, math.inf])
def test_service_reports_non_finite_n_points(n_points):
    """The service turns the bad value into an error message, not an exception."""
    params = ResponseParams(n_points=n_points)
    success, result, error = ResponseService.compute(PRESETS["maxwell"].model, params)
    assert success is False
    assert result == {}
    assert "n_points" in error
