"""Canned error endpoint.

Exposes:
- GET /error: always 500, so alerting and log scraping can be exercised
  without a real fault
"""

from fastapi import APIRouter
from starlette.responses import JSONResponse

from ..core.models_io import ErrorResponse, INTENTIONAL_ERROR_MESSAGE

router = APIRouter()


@router.get("/error", response_model=ErrorResponse, status_code=500)
def intentional_error():
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(message=INTENTIONAL_ERROR_MESSAGE).model_dump(),
    )
