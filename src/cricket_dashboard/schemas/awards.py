"""Pydantic schemas for awards and player awards."""

from datetime import date
from typing import Optional

from pydantic import Field, field_validator
from pydantic_core import PydanticCustomError

from ..models.awards import AwardCategory
from .base import MAX_DB_INT, CamelModel, FieldErrors, ResponseModel, UpdateModel

VALID_CATEGORIES = ", ".join(c.value for c in AwardCategory)
MIN_AWARD_YEAR = 1900

AWARD_ERRORS = {
    "awardName": FieldErrors(
        "MISSING_AWARD_NAME", "INVALID_AWARD_NAME", "Award name must be a non-empty string"
    ),
    "awardCategory": FieldErrors(
        "MISSING_AWARD_CATEGORY", "INVALID_CATEGORY", f"Invalid award category. Must be one of: {VALID_CATEGORIES}"
    ),
}

PLAYER_AWARD_ERRORS = {
    "playerId": FieldErrors("MISSING_PLAYER_ID", "INVALID_PLAYER_ID", "playerId must be a valid integer"),
    "awardId": FieldErrors("MISSING_AWARD_ID", "INVALID_AWARD_ID", "awardId must be a valid integer"),
    "year": FieldErrors("MISSING_YEAR", "INVALID_YEAR", "year must be a valid integer"),
}


def check_award_year(value: Optional[int]) -> Optional[int]:
    """Award years run from 1900 to next year inclusive."""
    if value is None:
        return value
    latest = date.today().year + 1
    if value < MIN_AWARD_YEAR or value > latest:
        raise PydanticCustomError(
            "INVALID_YEAR_RANGE", "year must be between {low} and {high}", {"low": MIN_AWARD_YEAR, "high": latest}
        )
    return value


class AwardCreate(CamelModel):
    """Schema for creating an award."""

    error_codes = AWARD_ERRORS

    award_name: str = Field(..., min_length=1, max_length=200)
    award_category: AwardCategory


class AwardUpdate(UpdateModel):
    error_codes = AWARD_ERRORS

    award_name: Optional[str] = Field(None, min_length=1, max_length=200)
    award_category: Optional[AwardCategory] = None


class AwardResponse(ResponseModel):
    id: int
    award_name: str
    award_category: AwardCategory


class PlayerAwardCreate(CamelModel):
    """Schema for granting an award to a player."""

    error_codes = PLAYER_AWARD_ERRORS

    player_id: int = Field(..., gt=0, le=MAX_DB_INT)
    award_id: int = Field(..., gt=0, le=MAX_DB_INT)
    year: int

    check_year = field_validator("year")(check_award_year)


class PlayerAwardUpdate(UpdateModel):
    error_codes = PLAYER_AWARD_ERRORS

    player_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    award_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    year: Optional[int] = None

    check_year = field_validator("year")(check_award_year)


class PlayerAwardResponse(ResponseModel):
    id: int
    player_id: int
    award_id: int
    year: int
