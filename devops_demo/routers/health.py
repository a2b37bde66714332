"""Health and version endpoints.

Exposes:
- GET /health : liveness probe for orchestrators and load balancers
- GET /version: running version string for deployment verification
"""

from fastapi import APIRouter, Request

from ..core.models_io import HealthResponse, VersionResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health():
    """Container/ELB-friendly health probe endpoint."""
    return HealthResponse()


@router.get("/version", response_model=VersionResponse)
def version(request: Request):
    """Report the version this process was started with."""
    return VersionResponse(version=request.app.state.settings.version)
