"""Read-only joined views over performances, players and awards."""

from typing import Any, Dict, List, Mapping

from sqlalchemy import func, select

from ..database import get_session
from ..models import Award, Match, Performance, Player, PlayerAward, Team
from ..schemas import MatchPerformanceRow, PlayerAwardDetailRow, TopScorerRow
from .params import parse_page, parse_positive_id, present


def _rows(query, schema) -> List[Dict[str, Any]]:
    with get_session() as session:
        result = session.execute(query).mappings().all()
    return [schema.model_validate(dict(row)).to_json() for row in result]


def match_performance_summary(params: Mapping[str, str]) -> List[Dict[str, Any]]:
    """Per-player figures of each match with venue, date and team name."""
    page = parse_page(params, default_limit=20, max_limit=100, positive_limit=True)

    query = (
        select(
            Match.id.label("match_id"),
            Match.match_date,
            Match.venue,
            Player.name.label("player_name"),
            Team.name.label("team_name"),
            Performance.runs_scored,
            Performance.wickets_taken,
        )
        .select_from(Performance)
        .join(Match, Match.id == Performance.match_id)
        .join(Player, Player.id == Performance.player_id)
        .join(Team, Team.id == Player.team_id)
    )
    if present(params.get("matchId")):
        match_id = parse_positive_id(params["matchId"], "INVALID_MATCH_ID", "Match ID must be a positive integer")
        query = query.where(Performance.match_id == match_id)
    if present(params.get("playerId")):
        player_id = parse_positive_id(params["playerId"], "INVALID_PLAYER_ID", "Player ID must be a positive integer")
        query = query.where(Performance.player_id == player_id)

    query = (
        query.order_by(Match.match_date.desc(), Performance.runs_scored.desc(), Performance.id)
        .limit(page.limit)
        .offset(page.offset)
    )
    return _rows(query, MatchPerformanceRow)


def top_scorers(params: Mapping[str, str]) -> List[Dict[str, Any]]:
    """Players ranked by career runs, ties broken by name."""
    page = parse_page(params, default_limit=5, max_limit=50)
    total = func.coalesce(func.sum(Performance.runs_scored), 0)

    query = (
        select(
            Player.id.label("player_id"),
            Player.name.label("player_name"),
            Team.name.label("team_name"),
            total.label("total_runs"),
        )
        .select_from(Player)
        .join(Team, Team.id == Player.team_id)
        .outerjoin(Performance, Performance.player_id == Player.id)
        .group_by(Player.id, Player.name, Team.name)
        .order_by(total.desc(), Player.name)
        .limit(page.limit)
        .offset(page.offset)
    )
    return _rows(query, TopScorerRow)


def player_award_details(params: Mapping[str, str]) -> List[Dict[str, Any]]:
    page = parse_page(params, default_limit=10, max_limit=100)

    query = (
        select(
            PlayerAward.id,
            PlayerAward.player_id,
            Player.name.label("player_name"),
            Award.award_name,
            Award.award_category,
            PlayerAward.year,
        )
        .select_from(PlayerAward)
        .join(Player, Player.id == PlayerAward.player_id)
        .join(Award, Award.id == PlayerAward.award_id)
    )
    if present(params.get("playerId")):
        player_id = parse_positive_id(params["playerId"], "INVALID_PLAYER_ID", "Player ID must be a positive integer")
        query = query.where(PlayerAward.player_id == player_id)
    if present(params.get("year")):
        year = parse_positive_id(params["year"], "INVALID_YEAR", "Year must be a valid integer")
        query = query.where(PlayerAward.year == year)

    query = (
        query.order_by(PlayerAward.year.desc(), Player.name, PlayerAward.id)
        .limit(page.limit)
        .offset(page.offset)
    )
    return _rows(query, PlayerAwardDetailRow)
