"""Pydantic response schemas used by the API.

Field order is the key order on the wire; monitoring tooling compares
these bodies byte for byte.
"""

from pydantic import BaseModel

from .config import SERVICE_NAME


class HealthResponse(BaseModel):
    """Liveness probe body."""
    status: str = "OK"
    service: str = SERVICE_NAME


class VersionResponse(BaseModel):
    """Deployed version report."""
    service: str = SERVICE_NAME
    version: str


class ErrorResponse(BaseModel):
    message: str


INTENTIONAL_ERROR_MESSAGE = "Intentional error for testing"
