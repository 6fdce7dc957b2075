"""
Core schemas - shared Pydantic models for API responses.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response format."""

    detail: str = Field(..., description="Human-readable error message")

    model_config = {"json_schema_extra": {"example": {"detail": "Pillar not found"}}}


class ValidationErrorResponse(BaseModel):
    """Request validation failure with the individual issues."""

    detail: list[dict[str, Any]] = Field(..., description="Validation issues, one per field")
