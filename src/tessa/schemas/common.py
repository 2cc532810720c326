"""
Common/shared Pydantic schemas.

This module contains the response envelopes used by every endpoint:
- Success envelope wrapping the returned data
- Error envelope produced by the exception handlers
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, Generic, Optional, TypeVar


T = TypeVar('T')


class SuccessResponse(BaseModel, Generic[T]):
    """Success envelope: {"status": "success", "data": ...}."""
    status: str = "success"
    data: T


class ErrorResponse(BaseModel):
    """Error envelope; ``stack`` is only filled outside production."""
    status: str = "error"
    code: int
    message: str
    stack: Optional[str] = None


class WelcomeResponse(BaseModel):
    """Root endpoint payload."""
    message: str
    data: Dict[str, Any] = Field(default_factory=dict)


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str
    database: Dict[str, Any]
