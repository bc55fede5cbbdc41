"""Pydantic schemas for match results and the score-driven result workflow."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import MAX_DB_INT, CamelModel, FieldErrors, ResponseModel, UpdateModel
from .match_scores import MatchScoreResponse

MATCH_RESULT_ERRORS = {
    "matchId": FieldErrors("MISSING_MATCH_ID", "INVALID_MATCH_ID", "matchId must be a valid integer"),
    "winningTeamId": FieldErrors(
        "INVALID_WINNING_TEAM_ID", "INVALID_WINNING_TEAM_ID", "winningTeamId must be a valid integer"
    ),
    "resultSummary": FieldErrors("INVALID_RESULT_SUMMARY", "INVALID_RESULT_SUMMARY", "resultSummary must be a string"),
}


class MatchResultCreate(CamelModel):
    error_codes = MATCH_RESULT_ERRORS

    match_id: int = Field(..., gt=0, le=MAX_DB_INT)
    winning_team_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    result_summary: Optional[str] = None


class MatchResultUpdate(UpdateModel):
    error_codes = MATCH_RESULT_ERRORS
    nullable_fields = frozenset({"winning_team_id", "result_summary"})

    match_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    winning_team_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    result_summary: Optional[str] = None


class MatchResultResponse(ResponseModel):
    id: int
    match_id: int
    winning_team_id: Optional[int]
    result_summary: Optional[str]
    created_at: datetime


class TeamScoreInput(CamelModel):
    """Innings total entered for one side.

    ``match_team_id`` names the side explicitly; when omitted the sides are
    taken in match-team id order.
    """

    match_team_id: Optional[int] = Field(None, gt=0, le=MAX_DB_INT)
    runs: int = Field(..., ge=0, le=MAX_DB_INT)
    wickets: int = Field(..., ge=0, le=MAX_DB_INT)
    overs: float = Field(..., gt=0)


class ScoredResultCreate(CamelModel):
    """Both innings totals of a match, from which the result is derived."""

    error_codes = {
        "matchId": FieldErrors("MISSING_MATCH_ID", "INVALID_MATCH_ID", "matchId must be a valid integer"),
        "team1Score": FieldErrors(
            "MISSING_TEAM1_SCORE", "INVALID_TEAM1_SCORE",
            "team1Score needs non-negative integer runs and wickets and positive overs",
        ),
        "team2Score": FieldErrors(
            "MISSING_TEAM2_SCORE", "INVALID_TEAM2_SCORE",
            "team2Score needs non-negative integer runs and wickets and positive overs",
        ),
    }

    match_id: int = Field(..., gt=0, le=MAX_DB_INT)
    team1_score: TeamScoreInput
    team2_score: TeamScoreInput


class ScoredResultResponse(ResponseModel):
    match_result: MatchResultResponse
    scores: list[MatchScoreResponse]
