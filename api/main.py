# api/main.py
"""
FastAPI backend for RheoCraft - exposes the rheonet solver as a REST API.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field, model_validator
from typing import Dict, List, Optional, Any
import io
import csv
import json
import logging
import math

from rheonet.catalog import PRESETS
from rheonet.kernel.response import compute_responses
from rheonet.model import ModelValidationError, ResponseParams
from rheonet.post import response_summary
from rheonet.serialize import tree_from_dict, tree_to_dict, points_to_records
from rheonet.tree import count_elements, identify_model, validate_tree

logger = logging.getLogger(__name__)


app = FastAPI(
    title="RheoCraft API",
    description="Spring/dashpot network creep and relaxation solver",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class LoadParams(BaseModel):
    """Loading and sampling parameters."""
    sigma0: float = Field(1.0, gt=0, description="Creep stress σ₀")
    eps0: float = Field(1.0, gt=0, description="Relaxation strain ε₀")
    t_max: float = Field(10.0, gt=0, description="End time")
    n_points: int = Field(200, ge=1, le=5000, description="Grid intervals")
    t_removal: Optional[float] = Field(None, gt=0, description="Load removal time (None = never)")

    @model_validator(mode="after")
    def removal_inside_window(self):
        if self.t_removal is not None and self.t_removal >= self.t_max:
            raise ValueError("t_removal must be smaller than t_max")
        return self


class ComputeRequest(BaseModel):
    """Tree in dict form plus parameters."""
    model: Dict[str, Any]
    params: LoadParams = Field(default_factory=LoadParams)


class PointData(BaseModel):
    t: float
    value: float
    load: float


class SummaryData(BaseModel):
    initial: float
    peak: float
    final: float
    at_removal: Optional[float] = None
    recovered_fraction: Optional[float] = None


class ComputeResult(BaseModel):
    """Both curves for one tree."""
    success: bool
    error: Optional[str] = None
    model_name: Optional[str] = None
    n_elements: int = 0
    creep: Optional[List[PointData]] = None
    relax: Optional[List[PointData]] = None
    creep_summary: Optional[SummaryData] = None
    relax_summary: Optional[SummaryData] = None
    params: Optional[Dict[str, Any]] = None


class PresetData(BaseModel):
    key: str
    name: str
    model: Dict[str, Any]


# =============================================================================
# Solve
# =============================================================================

def _summary(points, t_removal) -> SummaryData:
    summary = response_summary(points, t_removal)
    # NaN is not valid JSON
    return SummaryData(**{k: (None if math.isnan(v) else v) for k, v in summary.items()})


def compute_request(request: ComputeRequest) -> ComputeResult:
    """
    Parse and validate the tree, then compute creep and relaxation.

    Raises:
        ModelValidationError: malformed or unsolvable tree
    """
    tree = validate_tree(tree_from_dict(request.model))
    p = request.params
    params = ResponseParams(
        sigma0=p.sigma0, eps0=p.eps0, t_max=p.t_max,
        n_points=p.n_points, t_removal=p.t_removal,
    ).validate()

    logger.info("Computing %s (%d elements)", identify_model(tree) or "custom model", count_elements(tree))
    responses = compute_responses(tree, params)

    return ComputeResult(
        success=True,
        model_name=identify_model(tree),
        n_elements=count_elements(tree),
        creep=[PointData(**r) for r in points_to_records(responses.creep)],
        relax=[PointData(**r) for r in points_to_records(responses.relax)],
        creep_summary=_summary(responses.creep, params.t_removal),
        relax_summary=_summary(responses.relax, params.t_removal),
        params=p.model_dump(),
    )


def _solve_or_400(request: ComputeRequest) -> ComputeResult:
    try:
        return compute_request(request)
    except ModelValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "RheoCraft API"}


@app.get("/api/presets", response_model=List[PresetData])
async def list_presets():
    """Preset models in dict form."""
    return [
        PresetData(key=p.key, name=p.name, model=tree_to_dict(p.model))
        for p in PRESETS.values()
    ]


@app.post("/api/compute", response_model=ComputeResult)
async def compute(request: ComputeRequest):
    """Compute creep and relaxation curves for a tree."""
    return _solve_or_400(request)


@app.post("/api/export/csv")
async def export_csv(request: ComputeRequest):
    """Export both curves as CSV."""
    result = _solve_or_400(request)

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(['mode', 't', 'value', 'load'])
    for mode, points in (('creep', result.creep), ('relax', result.relax)):
        for pt in points:
            writer.writerow([mode, pt.t, pt.value, pt.load])

    output.seek(0)
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=rheo_response.csv"}
    )


@app.post("/api/export/json")
async def export_json(request: ComputeRequest):
    """Export model, parameters and curves as JSON."""
    result = _solve_or_400(request)

    payload = {
        "version": "1.0",
        "model_name": result.model_name,
        "model": request.model,
        "parameters": result.params,
        "creep": [pt.model_dump() for pt in result.creep],
        "relax": [pt.model_dump() for pt in result.relax],
    }

    return StreamingResponse(
        iter([json.dumps(payload, indent=2)]),
        media_type="application/json",
        headers={"Content-Disposition": "attachment; filename=rheo_model.json"}
    )


if __name__ == "__main__":
    import uvicorn
    from rheonet.logging_config import setup_logging
    setup_logging()
    uvicorn.run(app, host="0.0.0.0", port=8000)
