"""Response shapes of the aggregate and joined read-only views."""

from datetime import date

from ..models.awards import AwardCategory
from .base import ResponseModel


class TotalRunsResponse(ResponseModel):
    player_id: int
    player_name: str
    total_runs: int


class TopScorerRow(ResponseModel):
    player_id: int
    player_name: str
    team_name: str
    total_runs: int


class MatchPerformanceRow(ResponseModel):
    match_id: int
    match_date: date
    venue: str
    player_name: str
    team_name: str
    runs_scored: int
    wickets_taken: int


class PlayerAwardDetailRow(ResponseModel):
    id: int
    player_id: int
    player_name: str
    award_name: str
    award_category: AwardCategory
    year: int
