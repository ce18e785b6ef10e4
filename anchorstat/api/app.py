"""FastAPI application for anchorstat.

This module provides the REST API endpoints for correlation analysis,
synthetic response generation, and chart data.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, Literal

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from anchorstat import __version__
from anchorstat.config import get_settings
from anchorstat.core.correlation import Observation, fit
from anchorstat.core.validation import validate_observations
from anchorstat.data.generator import GenerationMode, generate
from anchorstat.visualization import create_anchor_line_plot, create_scatter_plot

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    logging.getLogger("anchorstat").setLevel(settings.log_level)

    logger.info(f"Starting anchorstat API ({settings.environment})")

    yield

    logger.info("Shutting down anchorstat API")


# Create FastAPI app
app = FastAPI(
    title="anchorstat API",
    description="Correlation analysis for anchoring-effect surveys",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class ObservationModel(BaseModel):
    """A single survey response."""

    q1: int | float = Field(..., description="Anchor answer")
    q2: int | float = Field(..., description="Estimate")


class CorrelationRequest(BaseModel):
    """Request body for correlation analysis."""

    model_config = ConfigDict(populate_by_name=True)

    observations: list[ObservationModel] = Field(
        ..., description="Survey responses in submission order"
    )
    validate_input: bool = Field(
        default=True,
        alias="validate",
        description="Reject answers outside the survey's valid ranges",
    )
    reference_value: float | None = Field(
        default=None, description="True answer (defaults to the configured value)"
    )


class GenerateRequest(BaseModel):
    """Request body for synthetic data generation."""

    count: int | None = Field(default=None, description="Number of responses")
    mode: GenerationMode = Field(
        default=GenerationMode.CORRELATED, description="Correlated or random estimates"
    )
    anchor_strength: float | None = Field(
        default=None, ge=0, le=1, description="Weight of the anchor in estimates"
    )
    seed: int | None = Field(default=None, description="Random seed")
    include_analysis: bool = Field(
        default=False, description="Also return the correlation analysis"
    )


class GenerateResponse(BaseModel):
    """Response with generated observations."""

    generated: int
    observations: list[ObservationModel]
    analysis: dict[str, Any] | None = None


class PlotRequest(BaseModel):
    """Request for plot generation."""

    plot_type: Literal["scatter", "anchor_line"] = Field(
        ..., description="Type of plot to create"
    )
    observations: list[ObservationModel] = Field(..., description="Survey responses")


class PlotResponse(BaseModel):
    """Response with plot data."""

    success: bool
    plot_json: str | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


def _to_observations(models: list[ObservationModel]) -> list[Observation]:
    return [Observation(q1=m.q1, q2=m.q2) for m in models]


# Endpoints
@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check API health."""
    return HealthResponse(status="healthy", version=__version__)


@app.post("/analysis/correlation")
async def run_correlation_analysis(request: CorrelationRequest) -> dict[str, Any]:
    """Run correlation analysis on survey responses."""
    settings = get_settings()
    observations = _to_observations(request.observations)

    warnings: list[dict[str, Any]] = []
    if request.validate_input:
        validation = validate_observations(observations)
        if not validation.is_valid:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=validation.to_dict(),
            )
        warnings = [w.to_dict() for w in validation.warnings]

    reference_value = request.reference_value
    if reference_value is None:
        reference_value = settings.reference_answer

    try:
        result = fit(
            observations,
            reference_value=reference_value,
            significance_level=settings.significance_level,
        )
    except Exception as e:
        logger.exception("Correlation analysis failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    response = result.to_dict()
    response["warnings"] = warnings
    return response


@app.post("/generate", response_model=GenerateResponse)
async def generate_test_data(request: GenerateRequest) -> GenerateResponse:
    """Generate synthetic responses with a controllable anchoring bias."""
    settings = get_settings()

    count = request.count if request.count is not None else settings.default_generate_count
    count = min(max(count, 1), settings.max_generate_count)

    anchor_strength = request.anchor_strength
    if anchor_strength is None:
        anchor_strength = settings.default_anchor_strength

    try:
        observations = generate(
            count,
            mode=request.mode,
            anchor_strength=anchor_strength,
            seed=request.seed,
            reference_answer=settings.reference_answer,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    analysis = None
    if request.include_analysis:
        analysis = fit(
            observations,
            reference_value=settings.reference_answer,
            significance_level=settings.significance_level,
        ).to_dict()

    logger.info(f"Generated {len(observations)} {request.mode.value} responses")

    return GenerateResponse(
        generated=len(observations),
        observations=[ObservationModel(**o.to_dict()) for o in observations],
        analysis=analysis,
    )


@app.post("/plot", response_model=PlotResponse)
async def generate_plot(request: PlotRequest) -> PlotResponse:
    """Generate chart data for survey responses."""
    settings = get_settings()
    observations = _to_observations(request.observations)

    try:
        if request.plot_type == "scatter":
            result = create_scatter_plot(
                observations,
                reference_value=settings.reference_answer,
            )
        else:
            result = create_anchor_line_plot(observations)

        return PlotResponse(success=True, plot_json=result.to_json())

    except ValueError as e:
        return PlotResponse(success=False, error=str(e))
    except Exception as e:
        logger.exception("Plot generation failed")
        return PlotResponse(success=False, error=str(e))
