"""Database models for the cricket stats dashboard."""

from .base import Base
from .teams import Team
from .players import Player, PlayerRole
from .matches import Match, MatchType, MatchTeam, MatchScore, MatchResult
from .performance import Performance
from .awards import Award, AwardCategory, PlayerAward
from .sql_logs import SqlLog, LogStatus, OperationType

__all__ = [
    "Base",
    "Team",
    "Player",
    "PlayerRole",
    "Match",
    "MatchType",
    "MatchTeam",
    "MatchScore",
    "MatchResult",
    "Performance",
    "Award",
    "AwardCategory",
    "PlayerAward",
    "SqlLog",
    "LogStatus",
    "OperationType",
]
