"""
LLM Psychometrics — Leaderboard & Model Explorer API

Both views are aggregated in memory over the most recent
``RUN_QUERY_LIMIT`` stored runs.
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from psychometrics.database import get_db
from psychometrics.schemas.inventory import ModelProfile
from psychometrics.schemas.run import LeaderboardEntry
from psychometrics.services.aggregation_service import AggregationService
from psychometrics.services.run_service import RunService

logger = structlog.get_logger("psychometrics.api.leaderboard")

router = APIRouter()

_aggregation_service = AggregationService()
_run_service = RunService()


@router.get(
    "/leaderboard",
    response_model=list[LeaderboardEntry],
    summary="Per model/persona averages, most-tested first",
)
async def get_leaderboard(
    db: AsyncSession = Depends(get_db),
) -> list[LeaderboardEntry]:
    profiles = await _run_service.list_profiles(db_session=db)
    return _aggregation_service.build_leaderboard(profiles)


@router.get(
    "/models/{model_name:path}",
    response_model=ModelProfile,
    summary="Synthetic profile aggregated over every run of a model",
)
async def get_model_profile(
    model_name: str,
    db: AsyncSession = Depends(get_db),
) -> ModelProfile:
    profiles = await _run_service.list_profiles(model_name=model_name, db_session=db)
    profile = _aggregation_service.aggregate_model_profile(model_name, profiles)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No runs recorded for model '{model_name}'.",
        )
    return profile
