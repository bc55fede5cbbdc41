"""Derive a match result from both innings totals in one transaction."""

from typing import Any, Dict, Mapping, NamedTuple, Optional, Sequence, Tuple

from loguru import logger
from sqlalchemy import select

from ..errors import ApiError, bad_request
from ..models import Match, MatchResult, MatchScore, MatchTeam, OperationType, Team
from ..schemas import ScoredResultCreate, ScoredResultResponse, parse_payload
from ..schemas.match_results import TeamScoreInput
from . import audit
from .crud import flush_or_raise
from .resources import MATCH_RESULTS, MATCH_SCORES


class Side(NamedTuple):
    """One team of the match with its innings total."""

    match_team_id: int
    team_id: int
    team_name: str
    score: TeamScoreInput


def decide_winner(first: Side, second: Side) -> Optional[Side]:
    """The side with strictly more runs wins; equal runs is a tie."""
    if first.score.runs > second.score.runs:
        return first
    if second.score.runs > first.score.runs:
        return second
    return None


def compose_summary(first: Side, second: Side, winner: Optional[Side]) -> str:
    line = (
        f"{first.team_name} {first.score.runs}/{first.score.wickets} vs "
        f"{second.team_name} {second.score.runs}/{second.score.wickets}"
    )
    if winner is None:
        return f"{line} - Match tied"
    margin = abs(first.score.runs - second.score.runs)
    return f"{line} - {winner.team_name} won by {margin} runs"


def pair_sides(participants: Sequence[Tuple[int, int, str]], data: ScoredResultCreate) -> Tuple[Side, Side]:
    """Match each score to its match team, by ``matchTeamId`` or else by id order."""
    by_id = {participant[0]: participant for participant in participants}
    first_id = data.team1_score.match_team_id
    second_id = data.team2_score.match_team_id

    for given in (first_id, second_id):
        if given is not None and given not in by_id:
            raise bad_request(
                f"Match team {given} does not belong to match {data.match_id}", "INVALID_MATCH_TEAM_ID"
            )
    if first_id is not None and first_id == second_id:
        raise bad_request("team1Score and team2Score must name different match teams", "INVALID_MATCH_TEAM_ID")

    ordered = list(by_id)
    if first_id is None and second_id is None:
        first_id, second_id = ordered
    elif first_id is None:
        first_id = next(i for i in ordered if i != second_id)
    elif second_id is None:
        second_id = next(i for i in ordered if i != first_id)

    return (
        Side(*by_id[first_id], score=data.team1_score),
        Side(*by_id[second_id], score=data.team2_score),
    )


def record_scored_result(payload: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Insert both score rows and the derived result, or nothing at all."""
    data = parse_payload(ScoredResultCreate, payload)

    with audit.audited(OperationType.TRIGGER, "match_result") as trail:
        session = trail.session
        if session.get(Match, data.match_id) is None:
            raise ApiError(404, "Match not found", "MATCH_NOT_FOUND")

        participants = session.execute(
            select(MatchTeam.id, MatchTeam.team_id, Team.name)
            .join(Team, Team.id == MatchTeam.team_id)
            .where(MatchTeam.match_id == data.match_id)
            .order_by(MatchTeam.id)
        ).all()
        if len(participants) != 2:
            raise bad_request(
                f"Match {data.match_id} must have exactly two teams, found {len(participants)}",
                "INVALID_MATCH_TEAMS",
            )

        first, second = pair_sides(participants, data)
        winner = decide_winner(first, second)

        score_values = [
            {"match_team_id": side.match_team_id, **side.score.model_dump(exclude={"match_team_id"})}
            for side in (first, second)
        ]
        result_values = {
            "match_id": data.match_id,
            "winning_team_id": winner.team_id if winner else None,
            "result_summary": compose_summary(first, second, winner),
        }
        trail.statement = "\n".join(
            [audit.render_insert("match_scores", values) for values in score_values]
            + [audit.render_insert("match_result", result_values)]
        )

        scores = [MatchScore(**values) for values in score_values]
        result = MatchResult(**result_values)
        session.add_all(scores)
        flush_or_raise(session, MATCH_SCORES.label, "create", MATCH_SCORES.conflict)
        session.add(result)
        flush_or_raise(session, MATCH_RESULTS.label, "create", MATCH_RESULTS.conflict)
        logger.info(f"Recorded result for match {data.match_id}: {result.result_summary}")

        return ScoredResultResponse.model_validate(
            {"match_result": result, "scores": scores}, from_attributes=True
        ).to_json()
