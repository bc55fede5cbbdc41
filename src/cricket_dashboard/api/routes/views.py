"""Read-only aggregate and joined views."""

from fastapi import APIRouter, Request

from ...services import procedures, views

router = APIRouter(tags=["views"])


@router.get("/api/players/total-runs")
def player_total_runs(request: Request):
    return procedures.total_runs(request.query_params.get("playerId"))


@router.get("/api/players/top-scorers")
def top_scorers(request: Request):
    return views.top_scorers(request.query_params)


@router.get("/api/player-awards/details")
def player_award_details(request: Request):
    return views.player_award_details(request.query_params)


@router.get("/api/match-performance-summary")
def match_performance_summary(request: Request):
    return views.match_performance_summary(request.query_params)
