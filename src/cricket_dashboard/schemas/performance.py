"""Pydantic schemas for player performances."""

from typing import Optional

from pydantic import Field

from .base import MAX_DB_INT, CamelModel, FieldErrors, ResponseModel, UpdateModel

PERFORMANCE_ERRORS = {
    "matchId": FieldErrors("MISSING_MATCH_ID", "INVALID_MATCH_ID", "Match ID must be a valid integer"),
    "playerId": FieldErrors("MISSING_PLAYER_ID", "INVALID_PLAYER_ID", "Player ID must be a valid integer"),
    "runsScored": FieldErrors("INVALID_RUNS_SCORED", "INVALID_RUNS_SCORED", "Runs scored must be a non-negative integer"),
    "wicketsTaken": FieldErrors(
        "INVALID_WICKETS_TAKEN", "INVALID_WICKETS_TAKEN", "Wickets taken must be a non-negative integer"
    ),
}


class PerformanceCreate(CamelModel):
    """Performance record; runs and wickets default to zero."""

    error_codes = PERFORMANCE_ERRORS

    match_id: int = Field(..., gt=0, le=MAX_DB_INT)
    player_id: int = Field(..., gt=0, le=MAX_DB_INT)
    runs_scored: int = Field(0, ge=0, le=MAX_DB_INT)
    wickets_taken: int = Field(0, ge=0, le=MAX_DB_INT)


class PerformanceUpdate(UpdateModel):
    error_codes = PERFORMANCE_ERRORS

    match_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    player_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    runs_scored: Optional[int] = Field(None, ge=0, le=MAX_DB_INT)
    wickets_taken: Optional[int] = Field(None, ge=0, le=MAX_DB_INT)


class PerformanceResponse(ResponseModel):
    id: int
    match_id: int
    player_id: int
    runs_scored: int
    wickets_taken: int
