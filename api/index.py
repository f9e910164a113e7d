"""
FastAPI wrapper for the Keyword Density Optimizer - Serverless Function.

This module exposes keyword optimization as a REST API.
"""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from keyword_density_optimizer import __version__
from keyword_density_optimizer.config import DEFAULT_LIMITS
from keyword_density_optimizer.optimizer import (
    OptimizationError,
    optimize_content,
)
from keyword_density_optimizer.schema import OptimizationRequest, OptimizationResponse

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Keyword Density Optimizer API",
    description="Inserts primary and secondary keywords into content at a target density",
    version=__version__,
)

# Enable CORS for all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


@app.get("/", response_class=HTMLResponse)
async def root():
    """Landing page pointing at the API docs."""
    return HTMLResponse(
        content="<h1>Keyword Density Optimizer API</h1>"
        "<p>Visit <a href='/docs'>/docs</a> for API documentation.</p>"
    )


@app.get("/api/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@app.post("/api/optimize", response_model=OptimizationResponse)
def optimize_endpoint(request: OptimizationRequest):
    """
    Optimize content with primary and secondary keywords.

    Primary keywords are inserted first; secondary keywords are then
    inserted into the result. The word limit applies to the submitted
    content, while the reported word counts describe the optimized content.
    """
    try:
        result = optimize_content(request)
        return OptimizationResponse.from_result(result)
    except OptimizationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("Keyword optimization failed")
        raise HTTPException(status_code=500, detail="An unexpected error occurred")


@app.get("/api/info")
async def api_info():
    """Get API information and usage instructions."""
    return {
        "name": "Keyword Density Optimizer API",
        "version": __version__,
        "description": "Keyword insertion at a target density",
        "limits": {
            "max_words": DEFAULT_LIMITS.max_words,
            "primary_frequency": [
                DEFAULT_LIMITS.primary_frequency_min,
                DEFAULT_LIMITS.primary_frequency_max,
            ],
            "secondary_frequency": [
                DEFAULT_LIMITS.secondary_frequency_min,
                DEFAULT_LIMITS.secondary_frequency_max,
            ],
        },
        "endpoints": {
            "GET /": "Landing page",
            "GET /api/health": "Health check",
            "POST /api/optimize": "Optimize content with primary and secondary keywords",
            "GET /api/info": "This endpoint",
        },
        "documentation": "/docs",
        "openapi": "/openapi.json",
    }
