"""Pydantic schemas for data validation."""

from .base import FieldErrors, parse_payload, translate_validation_error
from .teams import TeamCreate, TeamUpdate, TeamResponse
from .players import PlayerCreate, PlayerUpdate, PlayerResponse
from .matches import MatchCreate, MatchUpdate, MatchResponse
from .match_teams import MatchTeamCreate, MatchTeamUpdate, MatchTeamResponse
from .match_scores import MatchScoreCreate, MatchScoreUpdate, MatchScoreResponse
from .performance import PerformanceCreate, PerformanceUpdate, PerformanceResponse
from .awards import (
    AwardCreate,
    AwardUpdate,
    AwardResponse,
    PlayerAwardCreate,
    PlayerAwardUpdate,
    PlayerAwardResponse,
)
from .match_results import (
    MatchResultCreate,
    MatchResultUpdate,
    MatchResultResponse,
    ScoredResultCreate,
    ScoredResultResponse,
)
from .sql_logs import SqlLogCreate, SqlLogResponse
from .views import TotalRunsResponse, TopScorerRow, MatchPerformanceRow, PlayerAwardDetailRow

__all__ = [
    "FieldErrors",
    "parse_payload",
    "translate_validation_error",
    "TeamCreate",
    "TeamUpdate",
    "TeamResponse",
    "PlayerCreate",
    "PlayerUpdate",
    "PlayerResponse",
    "MatchCreate",
    "MatchUpdate",
    "MatchResponse",
    "MatchTeamCreate",
    "MatchTeamUpdate",
    "MatchTeamResponse",
    "MatchScoreCreate",
    "MatchScoreUpdate",
    "MatchScoreResponse",
    "PerformanceCreate",
    "PerformanceUpdate",
    "PerformanceResponse",
    "AwardCreate",
    "AwardUpdate",
    "AwardResponse",
    "PlayerAwardCreate",
    "PlayerAwardUpdate",
    "PlayerAwardResponse",
    "MatchResultCreate",
    "MatchResultUpdate",
    "MatchResultResponse",
    "ScoredResultCreate",
    "ScoredResultResponse",
    "SqlLogCreate",
    "SqlLogResponse",
    "TotalRunsResponse",
    "TopScorerRow",
    "MatchPerformanceRow",
    "PlayerAwardDetailRow",
]
