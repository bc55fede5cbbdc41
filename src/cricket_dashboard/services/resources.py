"""Resource definitions for every table served through the CRUD contract."""

from typing import Any, Dict, Optional

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from ..errors import bad_request
from ..models import (
    Award,
    AwardCategory,
    LogStatus,
    Match,
    MatchResult,
    MatchScore,
    MatchTeam,
    MatchType,
    OperationType,
    Performance,
    Player,
    PlayerAward,
    PlayerRole,
    SqlLog,
    Team,
)
from ..schemas import (
    AwardCreate,
    AwardResponse,
    AwardUpdate,
    MatchCreate,
    MatchResponse,
    MatchResultCreate,
    MatchResultResponse,
    MatchResultUpdate,
    MatchScoreCreate,
    MatchScoreResponse,
    MatchScoreUpdate,
    MatchTeamCreate,
    MatchTeamResponse,
    MatchTeamUpdate,
    MatchUpdate,
    PerformanceCreate,
    PerformanceResponse,
    PerformanceUpdate,
    PlayerAwardCreate,
    PlayerAwardResponse,
    PlayerAwardUpdate,
    PlayerCreate,
    PlayerResponse,
    PlayerUpdate,
    SqlLogCreate,
    SqlLogResponse,
    TeamCreate,
    TeamResponse,
    TeamUpdate,
)
from .crud import Conflict, ListFilter, Resource
from .params import enum_filter, int_filter, text_filter

MAX_TEAMS_PER_MATCH = 2


def lock_match(session: Session, match_id: int) -> None:
    """Write-lock the match row so team assignments to one match run one at a time.

    A no-op UPDATE holds the row lock on MySQL and the database write lock on
    SQLite until the transaction ends.
    """
    session.execute(
        update(Match)
        .where(Match.id == match_id)
        .values(venue=Match.venue)
        .execution_options(synchronize_session=False)
    )


def teams_in_match(session: Session, match_id: int) -> int:
    query = select(func.count()).select_from(MatchTeam).where(MatchTeam.match_id == match_id)
    return int(session.scalar(query) or 0)


def limit_teams_per_match(session: Session, values: Dict[str, Any], row: Optional[MatchTeam]) -> None:
    """A match has at most two participating teams."""
    match_id = values.get("match_id")
    if match_id is None or (row is not None and row.match_id == match_id):
        return
    lock_match(session, match_id)
    if teams_in_match(session, match_id) >= MAX_TEAMS_PER_MATCH:
        raise bad_request(f"Match {match_id} already has {MAX_TEAMS_PER_MATCH} teams", "MATCH_TEAMS_FULL")


TEAMS = Resource(
    path="teams",
    label="Team",
    model=Team,
    create_schema=TeamCreate,
    update_schema=TeamUpdate,
    response_schema=TeamResponse,
    search_columns=(Team.name, Team.country),
    conflict=Conflict(400, "Team name already exists", "DUPLICATE_NAME"),
)

PLAYERS = Resource(
    path="players",
    label="Player",
    model=Player,
    create_schema=PlayerCreate,
    update_schema=PlayerUpdate,
    response_schema=PlayerResponse,
    search_columns=(Player.name,),
    filters=(
        ListFilter("teamId", Player.team_id, int_filter("INVALID_TEAM_ID", "Team ID must be a valid integer")),
        ListFilter("role", Player.role, enum_filter(PlayerRole, "INVALID_ROLE", "role")),
    ),
)

MATCHES = Resource(
    path="matches",
    label="Match",
    model=Match,
    create_schema=MatchCreate,
    update_schema=MatchUpdate,
    response_schema=MatchResponse,
    search_columns=(Match.venue,),
    filters=(
        ListFilter("matchType", Match.match_type, enum_filter(MatchType, "INVALID_MATCH_TYPE", "match type")),
    ),
)

MATCH_TEAMS = Resource(
    path="match-teams",
    label="Match team",
    model=MatchTeam,
    create_schema=MatchTeamCreate,
    update_schema=MatchTeamUpdate,
    response_schema=MatchTeamResponse,
    filters=(
        ListFilter("matchId", MatchTeam.match_id, int_filter("INVALID_MATCH_ID", "Match ID must be a valid integer")),
        ListFilter("teamId", MatchTeam.team_id, int_filter("INVALID_TEAM_ID", "Team ID must be a valid integer")),
    ),
    conflict=Conflict(400, "Team is already part of this match", "DUPLICATE_TEAM_IN_MATCH"),
    before_write=limit_teams_per_match,
)

MATCH_SCORES = Resource(
    path="match-scores",
    label="Match score",
    model=MatchScore,
    create_schema=MatchScoreCreate,
    update_schema=MatchScoreUpdate,
    response_schema=MatchScoreResponse,
    filters=(
        ListFilter(
            "matchTeamId",
            MatchScore.match_team_id,
            int_filter("INVALID_MATCH_TEAM_ID", "Match team ID must be a valid integer"),
        ),
    ),
    conflict=Conflict(400, "Score already exists for this match team", "DUPLICATE_MATCH_TEAM"),
)

PERFORMANCE = Resource(
    path="performance",
    label="Performance",
    model=Performance,
    create_schema=PerformanceCreate,
    update_schema=PerformanceUpdate,
    response_schema=PerformanceResponse,
    filters=(
        ListFilter("matchId", Performance.match_id, int_filter("INVALID_MATCH_ID", "Match ID must be a valid integer")),
        ListFilter(
            "playerId", Performance.player_id, int_filter("INVALID_PLAYER_ID", "Player ID must be a valid integer")
        ),
    ),
    conflict=Conflict(409, "Performance record already exists for this player in this match", "DUPLICATE_PERFORMANCE"),
)

AWARDS = Resource(
    path="awards",
    label="Award",
    model=Award,
    create_schema=AwardCreate,
    update_schema=AwardUpdate,
    response_schema=AwardResponse,
    search_columns=(Award.award_name,),
    filters=(
        ListFilter("category", Award.award_category, enum_filter(AwardCategory, "INVALID_CATEGORY", "award category")),
    ),
)

PLAYER_AWARDS = Resource(
    path="player-awards",
    label="Player award",
    model=PlayerAward,
    create_schema=PlayerAwardCreate,
    update_schema=PlayerAwardUpdate,
    response_schema=PlayerAwardResponse,
    filters=(
        ListFilter(
            "playerId", PlayerAward.player_id, int_filter("INVALID_PLAYER_ID", "Player ID must be a valid integer")
        ),
        ListFilter("awardId", PlayerAward.award_id, int_filter("INVALID_AWARD_ID", "Award ID must be a valid integer")),
        ListFilter("year", PlayerAward.year, int_filter("INVALID_YEAR", "Year must be a valid integer")),
    ),
)

MATCH_RESULTS = Resource(
    path="match-result",
    label="Match result",
    model=MatchResult,
    create_schema=MatchResultCreate,
    update_schema=MatchResultUpdate,
    response_schema=MatchResultResponse,
    filters=(
        ListFilter("matchId", MatchResult.match_id, int_filter("INVALID_MATCH_ID", "Match ID must be a valid integer")),
        ListFilter(
            "winningTeamId",
            MatchResult.winning_team_id,
            int_filter("INVALID_WINNING_TEAM_ID", "Winning team ID must be a valid integer"),
        ),
    ),
    conflict=Conflict(400, "Match result already exists for this match", "DUPLICATE_MATCH_ID"),
)

SQL_LOGS = Resource(
    path="sql-logs",
    label="SQL log",
    model=SqlLog,
    create_schema=SqlLogCreate,
    response_schema=SqlLogResponse,
    search_columns=(SqlLog.sql_statement,),
    filters=(
        ListFilter(
            "operationType", SqlLog.operation_type, enum_filter(OperationType, "INVALID_OPERATION_TYPE", "operation type")
        ),
        ListFilter("tableName", SqlLog.table_name, text_filter),
        ListFilter("status", SqlLog.status, enum_filter(LogStatus, "INVALID_STATUS", "status")),
    ),
    default_limit=20,
    max_limit=200,
    order_by=(SqlLog.executed_at.desc(), SqlLog.id.desc()),
    audit=False,
)

# Tables served with the full list/get/create/update/delete contract
RESOURCES = (
    TEAMS,
    PLAYERS,
    MATCHES,
    MATCH_TEAMS,
    MATCH_SCORES,
    PERFORMANCE,
    AWARDS,
    PLAYER_AWARDS,
    MATCH_RESULTS,
)
