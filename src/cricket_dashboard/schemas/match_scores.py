"""Pydantic schemas for match team scores."""

from typing import Optional

from pydantic import Field

from .base import MAX_DB_INT, CamelModel, FieldErrors, ResponseModel, UpdateModel

MATCH_SCORE_ERRORS = {
    "matchTeamId": FieldErrors(
        "MISSING_MATCH_TEAM_ID", "INVALID_MATCH_TEAM_ID", "matchTeamId must be a valid positive integer"
    ),
    "runs": FieldErrors("MISSING_RUNS", "INVALID_RUNS", "runs must be a non-negative integer"),
    "wickets": FieldErrors("MISSING_WICKETS", "INVALID_WICKETS", "wickets must be a non-negative integer"),
    "overs": FieldErrors("MISSING_OVERS", "INVALID_OVERS", "overs must be a positive number"),
}


class MatchScoreCreate(CamelModel):
    error_codes = MATCH_SCORE_ERRORS

    match_team_id: int = Field(..., gt=0, le=MAX_DB_INT)
    runs: int = Field(..., ge=0, le=MAX_DB_INT)
    wickets: int = Field(..., ge=0, le=MAX_DB_INT)
    overs: float = Field(..., gt=0)


class MatchScoreUpdate(UpdateModel):
    error_codes = MATCH_SCORE_ERRORS

    match_team_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    runs: Optional[int] = Field(None, ge=0, le=MAX_DB_INT)
    wickets: Optional[int] = Field(None, ge=0, le=MAX_DB_INT)
    overs: Optional[float] = Field(None, gt=0)


class MatchScoreResponse(ResponseModel):
    id: int
    match_team_id: int
    runs: int
    wickets: int
    overs: float
