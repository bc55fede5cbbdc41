"""Pydantic schemas for match participants."""

from typing import Optional

from pydantic import Field

from .base import MAX_DB_INT, CamelModel, FieldErrors, ResponseModel, UpdateModel

MATCH_TEAM_ERRORS = {
    "matchId": FieldErrors("MISSING_MATCH_ID", "INVALID_MATCH_ID", "matchId must be a valid integer"),
    "teamId": FieldErrors("MISSING_TEAM_ID", "INVALID_TEAM_ID", "teamId must be a valid integer"),
}


class MatchTeamCreate(CamelModel):
    error_codes = MATCH_TEAM_ERRORS

    match_id: int = Field(..., gt=0, le=MAX_DB_INT)
    team_id: int = Field(..., gt=0, le=MAX_DB_INT)


class MatchTeamUpdate(UpdateModel):
    error_codes = MATCH_TEAM_ERRORS

    match_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    team_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)


class MatchTeamResponse(ResponseModel):
    id: int
    match_id: int
    team_id: int
