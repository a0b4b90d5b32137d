"""
LLM Psychometrics — Run, leaderboard and API request/response schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from psychometrics.item_banks import INVENTORY_KEYS
from psychometrics.schemas.inventory import InventoryItem, ModelProfile


class RunRecord(BaseModel):
    """A persisted run: its database identity plus the stored profile."""

    id: str
    created_at: datetime
    profile: ModelProfile


class RunSummary(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    id: str
    model_name: str
    persona: str
    created_at: datetime
    inventories: list[str]


class ScoreRunRequest(BaseModel):
    """Raw per-item samples collected elsewhere, to be scored and stored."""

    model_config = ConfigDict(protected_namespaces=())

    model_name: str = Field(..., min_length=1)
    persona: Optional[str] = None
    system_prompt: str = ""
    raw_responses: dict[str, list[float]]
    inventories: list[str] = Field(default_factory=lambda: list(INVENTORY_KEYS))
    enable_calibration: Optional[bool] = None

    @field_validator("inventories")
    @classmethod
    def validate_inventories(cls, v: list[str]) -> list[str]:
        unknown = [name for name in v if name not in INVENTORY_KEYS]
        if unknown:
            raise ValueError(f"Unknown inventories: {', '.join(unknown)}")
        if not v:
            raise ValueError("At least one inventory is required")
        return v


class ScoreRunResponse(BaseModel):
    run_id: str
    profile: ModelProfile


class InventoryItemsResponse(BaseModel):
    inventory: str
    count: int
    items: list[InventoryItem]


class LeaderboardEntry(BaseModel):
    """One ``(model, persona)`` row of the leaderboard."""

    id: str
    name: str
    persona: str
    count: int
    scores: dict[str, float]
    disc: dict[str, float]
    mbti: str = "-"
