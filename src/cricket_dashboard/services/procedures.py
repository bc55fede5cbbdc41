"""Stored-procedure style workflows: guarded performance insert and run totals."""

from typing import Any, Dict, Mapping, Optional

from loguru import logger
from sqlalchemy import func, select

from ..database import get_session
from ..errors import ApiError, bad_request
from ..models import Match, OperationType, Performance, Player
from ..schemas import PerformanceCreate, PerformanceResponse, TotalRunsResponse, parse_payload
from . import audit
from .crud import flush_or_raise
from .params import parse_positive_id, present
from .resources import PERFORMANCE


def insert_performance(payload: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Insert one performance after checking that its match and player exist.

    Uniqueness of (match, player) is left to the table constraint so two
    concurrent calls cannot both succeed.
    """
    data = parse_payload(PerformanceCreate, payload)
    statement = audit.render_call(
        "insert_performance", data.match_id, data.player_id, data.runs_scored, data.wickets_taken
    )

    with audit.audited(OperationType.PROCEDURE, "performance", statement) as trail:
        session = trail.session
        if session.get(Match, data.match_id) is None:
            raise ApiError(404, "Match not found", "MATCH_NOT_FOUND")
        if session.get(Player, data.player_id) is None:
            raise ApiError(404, "Player not found", "PLAYER_NOT_FOUND")

        performance = Performance(**data.model_dump())
        session.add(performance)
        flush_or_raise(session, PERFORMANCE.label, "create", PERFORMANCE.conflict)
        logger.info(
            f"Inserted performance {performance.id}: player {data.player_id} "
            f"in match {data.match_id} ({data.runs_scored} runs, {data.wickets_taken} wickets)"
        )
        return PerformanceResponse.model_validate(performance).to_json()


def total_runs(raw_player_id: Optional[str]) -> Dict[str, Any]:
    """Career runs of one player; players without performances total zero."""
    if not present(raw_player_id):
        raise bad_request("Player ID is required", "MISSING_PLAYER_ID")
    player_id = parse_positive_id(raw_player_id, "INVALID_PLAYER_ID", "Player ID must be a positive integer")

    query = (
        select(
            Player.id.label("player_id"),
            Player.name.label("player_name"),
            func.coalesce(func.sum(Performance.runs_scored), 0).label("total_runs"),
        )
        .select_from(Player)
        .outerjoin(Performance, Performance.player_id == Player.id)
        .where(Player.id == player_id)
        .group_by(Player.id, Player.name)
    )

    with get_session() as session:
        row = session.execute(query).mappings().first()
    if row is None:
        raise ApiError(404, "Player not found", "PLAYER_NOT_FOUND")

    logger.debug(f"Total runs for player {player_id}: {row['total_runs']}")
    return TotalRunsResponse.model_validate(dict(row)).to_json()
