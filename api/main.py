# api/main.py
"""
FastAPI backend for mini_beam - exposes the beam engine as a REST API.
"""

import io
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from mini_beam import (
    InvalidSpanError,
    SingularSystemError,
    analyze_beam,
    parse_beam_input,
    section_response,
)
from mini_beam.post import diagram_summary, format_reactions


app = FastAPI(
    title="mini_beam API",
    description="Shear, moment and deflection of straight beams",
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

class BeamParams(BaseModel):
    """
    Input rows as a form would send them.

    Rows are kept loose on purpose: a malformed row is dropped by the
    engine's parser instead of rejecting the whole request.
    """
    span: Any = Field(10.0, description="Beam length (m)")
    left_support: str = Field("pinned", description="pinned, roller, fixed or free")
    right_support: str = Field("roller", description="pinned, roller, fixed or free")
    point_loads: List[Any] = Field(default_factory=list, description="(magnitude, position) rows")
    distributed_loads: List[Any] = Field(default_factory=list, description="(start, end, intensity) rows")
    point_moments: List[Any] = Field(default_factory=list, description="(magnitude, position) rows")
    interior_supports: List[Any] = Field(default_factory=list, description="(position, kind) rows")
    E: Optional[Any] = Field(None, description="Elastic modulus, defaults to 1")
    I: Optional[Any] = Field(None, description="Moment of inertia, defaults to 1")
    h: Optional[Any] = Field(None, description="Section depth, defaults to 1")


class ReactionData(BaseModel):
    position: float
    kind: str
    value: float


class AnalysisResult(BaseModel):
    """Complete analysis result."""
    success: bool
    error: Optional[str] = None
    path: Optional[str] = None
    x: Optional[List[float]] = None
    V: Optional[List[float]] = None
    M: Optional[List[float]] = None
    v: Optional[List[float]] = None
    deflection: Optional[List[float]] = None
    stress: Optional[List[float]] = None
    reactions: Optional[List[ReactionData]] = None
    reaction_report: Optional[List[str]] = None
    summary: Optional[Dict[str, Any]] = None


# =============================================================================
# Analysis
# =============================================================================

def parse_or_422(params: BeamParams):
    try:
        return parse_beam_input(params.model_dump())
    except InvalidSpanError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid input: {e}")


def run_analysis(params: BeamParams) -> AnalysisResult:
    """Parse, solve and package. A singular system is reported, not raised."""
    beam = parse_or_422(params)

    try:
        result = analyze_beam(beam)
    except SingularSystemError as e:
        return AnalysisResult(
            success=False,
            error=f"Failed to compute the beam, check supports: {e}",
        )

    scaled = section_response(result, beam.section)

    return AnalysisResult(
        success=True,
        path=result.path,
        x=result.x.tolist(),
        V=result.V.tolist(),
        M=result.M.tolist(),
        v=result.v.tolist(),
        deflection=scaled.deflection.tolist(),
        stress=scaled.stress.tolist(),
        reactions=[
            ReactionData(position=r.position, kind=r.kind.value, value=r.value)
            for r in result.reactions
        ],
        reaction_report=format_reactions(result.reactions),
        summary=diagram_summary(result),
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "mini_beam API"}


@app.post("/api/analyze", response_model=AnalysisResult)
async def analyze(params: BeamParams):
    """Analyze a beam and return all diagrams."""
    return run_analysis(params)


@app.post("/api/export/csv")
async def export_csv(params: BeamParams):
    """Export the sampled diagrams as CSV."""
    beam = parse_or_422(params)
    try:
        result = analyze_beam(beam)
    except SingularSystemError as e:
        raise HTTPException(status_code=400, detail=str(e))

    scaled = section_response(result, beam.section)
    frame = result.to_dataframe()
    frame["deflection"] = scaled.deflection
    frame["stress"] = scaled.stress

    output = io.StringIO()
    frame.to_csv(output, index=False)
    output.seek(0)
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=beam_diagrams.csv"}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
