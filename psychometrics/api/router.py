"""
LLM Psychometrics — Main API Router

Aggregates all sub-routers under a single prefix so that
``psychometrics.main`` can mount the entire API surface with one
``include_router`` call.
"""

from fastapi import APIRouter

from psychometrics.api import inventories, leaderboard, runs

router = APIRouter()

router.include_router(inventories.router, prefix="/inventories", tags=["Inventories"])
router.include_router(runs.router, prefix="/runs", tags=["Runs"])
router.include_router(leaderboard.router, tags=["Leaderboard"])
