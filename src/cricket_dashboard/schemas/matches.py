"""Pydantic schemas for match data validation."""

import re
from datetime import date, datetime
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from ..models.matches import MatchType
from .base import CamelModel, FieldErrors, ResponseModel, UpdateModel

VALID_MATCH_TYPES = ", ".join(t.value for t in MatchType)

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

MATCH_ERRORS = {
    "venue": FieldErrors("MISSING_VENUE", "EMPTY_VENUE", "Venue cannot be empty"),
    "matchDate": FieldErrors("MISSING_MATCH_DATE", "INVALID_DATE_FORMAT", "Match date must be in YYYY-MM-DD format"),
    "matchType": FieldErrors(
        "MISSING_MATCH_TYPE", "INVALID_MATCH_TYPE", f"Invalid match type. Must be one of: {VALID_MATCH_TYPES}"
    ),
}


def parse_match_date(value: Any) -> Any:
    """Accept only real calendar dates written as YYYY-MM-DD."""
    if value is None or isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_PATTERN.match(value.strip()):
        raise PydanticCustomError("INVALID_DATE_FORMAT", "Match date must be in YYYY-MM-DD format")
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise PydanticCustomError("INVALID_DATE_FORMAT", "Match date must be in YYYY-MM-DD format")


class MatchCreate(CamelModel):
    """Schema for creating a new match."""

    error_codes = MATCH_ERRORS

    venue: str = Field(..., min_length=1, max_length=200, description="Venue name")
    match_date: date = Field(..., description="Match date")
    match_type: MatchType = Field(..., description="Type of match")

    check_date = field_validator("match_date", mode="before")(parse_match_date)


class MatchUpdate(UpdateModel):
    """Schema for updating match information."""

    error_codes = MATCH_ERRORS

    venue: Optional[str] = Field(None, min_length=1, max_length=200)
    match_date: Optional[date] = None
    match_type: Optional[MatchType] = None

    check_date = field_validator("match_date", mode="before")(parse_match_date)


class MatchResponse(ResponseModel):
    """Schema for match response data."""

    id: int
    venue: str
    match_date: date
    match_type: MatchType
    created_at: datetime
