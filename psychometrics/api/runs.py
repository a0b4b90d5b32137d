"""
LLM Psychometrics — Runs API

Endpoints for scoring externally collected response sets and browsing
stored runs.  Live administration against a provider is driven from the
command line (``scripts/run_profile.py``) rather than over HTTP.
"""

from __future__ import annotations

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from psychometrics.database import get_db
from psychometrics.schemas.run import (
    RunRecord,
    RunSummary,
    ScoreRunRequest,
    ScoreRunResponse,
)
from psychometrics.services.run_service import RunService
from psychometrics.services.scoring_service import ScoringService

logger = structlog.get_logger("psychometrics.api.runs")

router = APIRouter()

# ── Service singletons (lazy, constructed on first use) ───────────────────────

_scoring_service: ScoringService | None = None
_run_service: RunService | None = None


def _get_scoring_service() -> ScoringService:
    global _scoring_service
    if _scoring_service is None:
        _scoring_service = ScoringService()
    return _scoring_service


def _get_run_service() -> RunService:
    global _run_service
    if _run_service is None:
        _run_service = RunService()
    return _run_service


# ──────────────────────────────────────────────────────────────────────────────
# POST /score — Score a raw response set and persist the run
# ──────────────────────────────────────────────────────────────────────────────

@router.post(
    "/score",
    response_model=ScoreRunResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Score raw per-item samples and store the run",
)
async def score_run(
    payload: ScoreRunRequest,
    db: AsyncSession = Depends(get_db),
) -> ScoreRunResponse:
    """Score ``raw_responses`` for the requested inventories.

    Items missing from ``raw_responses`` are simply not counted.  When
    ``bigfive`` is requested an ``mbti_derived`` result is added as well.
    """
    log = logger.bind(model_name=payload.model_name, persona=payload.persona)
    log.info("score_run_start", n_items=len(payload.raw_responses))

    profile = _get_scoring_service().build_profile(
        model_name=payload.model_name,
        raw_scores=payload.raw_responses,
        inventories=payload.inventories,
        persona=payload.persona,
        system_prompt=payload.system_prompt,
        enable_calibration=payload.enable_calibration,
        logs=[],
    )
    run_id = await _get_run_service().save_run(profile, db_session=db)

    log.info("score_run_complete", run_id=run_id)
    return ScoreRunResponse(run_id=run_id, profile=profile)


# ──────────────────────────────────────────────────────────────────────────────
# GET / — List stored runs, newest first
# ──────────────────────────────────────────────────────────────────────────────

@router.get(
    "",
    response_model=list[RunSummary],
    summary="List stored runs",
)
async def list_runs(
    model_name: Optional[str] = None,
    limit: int = Query(100, ge=1, le=1000),
    db: AsyncSession = Depends(get_db),
) -> list[RunSummary]:
    service = _get_run_service()
    records = await service.list_runs(limit=limit, model_name=model_name, db_session=db)
    return [service.summarise(record) for record in records]


# ──────────────────────────────────────────────────────────────────────────────
# GET /{run_id} — One stored run with results and logs
# ──────────────────────────────────────────────────────────────────────────────

@router.get(
    "/{run_id}",
    response_model=RunRecord,
    summary="Get one stored run",
)
async def get_run(
    run_id: str,
    db: AsyncSession = Depends(get_db),
) -> RunRecord:
    record = await _get_run_service().get_run(run_id, db_session=db)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Run {run_id} not found.",
        )
    return record
