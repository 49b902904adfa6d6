"""
Katapayadi — FastAPI Server
===========================

RESTful API for the Katapayadi numeral engine.

Endpoints:
    POST /transliterate     Latin phrase → Devanagari symbols
    POST /calculate         Devanagari symbols → numeral + rashi
    POST /analyze           Both phases in one call
    GET  /health            Health check / readiness probe

Configuration:
    KATAPAYADI_OVERRIDES_PATH   Alternate override dictionary (JSON)

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from katapayadi import __version__
from katapayadi.models import AnalysisReport, NumeralResult, Transliteration
from katapayadi.pipeline import KatapayadiPipeline

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Application Lifespan (pre-load override dictionary) ────────────

_pipeline: KatapayadiPipeline | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the pipeline (and load the override dictionary) on startup."""
    global _pipeline  # noqa: PLW0603
    _pipeline = KatapayadiPipeline(os.environ.get("KATAPAYADI_OVERRIDES_PATH"))
    yield
    _pipeline = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Katapayadi API",
    description=(
        "Converts phrases into Katapayadi numerals. Latin text is "
        "transliterated to Devanagari, each consonant is decoded to a digit, "
        "and the reversed digits are reduced to a rashi (1-12)."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class PhraseRequest(BaseModel):
    """Request body for /transliterate and /analyze."""

    text: str = Field(
        ...,
        max_length=1000,
        description="Latin-letter phrase to transliterate.",
        json_schema_extra={"example": "kamal"},
    )


class CalculateRequest(BaseModel):
    """Request body for /calculate."""

    symbolic: str = Field(
        ...,
        max_length=1000,
        description="Devanagari text to decode.",
        json_schema_extra={"example": "कमल्"},
    )


class HealthResponse(BaseModel):
    status: str
    version: str
    overrides_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_pipeline() -> KatapayadiPipeline:
    if _pipeline is None:
        raise HTTPException(status_code=503, detail="Pipeline not initialised")
    return _pipeline


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/transliterate",
    summary="Transliterate a Latin-letter phrase",
    tags=["Engine"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def transliterate_phrase(request: PhraseRequest) -> Transliteration:
    """Returns the Devanagari rendering and whether the override dictionary
    (`dictionary`) or the phonetic tokenizer (`heuristic`) produced it."""
    return _get_pipeline().transliterate(request.text)


@app.post(
    "/calculate",
    summary="Decode Devanagari text into a numeral",
    tags=["Engine"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def calculate_numeral(request: CalculateRequest) -> NumeralResult:
    """Returns the per-symbol digit log, the reversed digits, the number
    and its rashi."""
    return _get_pipeline().calculate(request.symbolic)


@app.post(
    "/analyze",
    summary="Transliterate and decode in one call",
    tags=["Engine"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def analyze_phrase(request: PhraseRequest) -> AnalysisReport:
    """Runs the full phrase → symbols → numeral pipeline."""
    return _get_pipeline().run(request.text)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Pipeline not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    pipeline = _get_pipeline()
    return HealthResponse(
        status="healthy",
        version=__version__,
        overrides_loaded=len(pipeline.overrides),
    )
