"""Multi-step write workflows: the guarded performance insert and result derivation."""

from typing import Any, Optional

from fastapi import APIRouter, Body

from ...services import procedures, triggers

router = APIRouter(tags=["workflows"])


@router.post("/api/performance/insert", status_code=201)
def insert_performance(payload: Optional[Any] = Body(None)):
    return procedures.insert_performance(payload)


@router.post("/api/match-result/from-scores", status_code=201)
def record_scored_result(payload: Optional[Any] = Body(None)):
    return triggers.record_scored_result(payload)
