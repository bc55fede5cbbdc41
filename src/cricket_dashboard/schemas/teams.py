"""Pydantic schemas for team data validation."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel, FieldErrors, ResponseModel, UpdateModel

TEAM_ERRORS = {
    "name": FieldErrors("MISSING_NAME", "INVALID_NAME", "Name must be a non-empty string"),
    "country": FieldErrors("MISSING_COUNTRY", "INVALID_COUNTRY", "Country must be a non-empty string"),
}


class TeamCreate(CamelModel):
    """Schema for creating a new team."""

    error_codes = TEAM_ERRORS

    name: str = Field(..., min_length=1, max_length=100, description="Team name")
    country: str = Field(..., min_length=1, max_length=100, description="Team country")


class TeamUpdate(UpdateModel):
    """Schema for updating team information."""

    error_codes = TEAM_ERRORS

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    country: Optional[str] = Field(None, min_length=1, max_length=100)


class TeamResponse(ResponseModel):
    """Schema for team response data."""

    id: int
    name: str
    country: str
    created_at: datetime
