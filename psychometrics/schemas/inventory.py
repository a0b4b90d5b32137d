"""
LLM Psychometrics — Inventory data model.

Items are immutable configuration loaded once per process; results are
created fresh per scoring call and never mutated afterwards.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ItemType = Literal["likert_5", "choice_binary", "choice_text"]
Keyed = Literal["plus", "minus"]
MBTIDimension = Literal["IE", "SN", "TF", "JP"]
DISCQuadrant = Literal["D", "I", "S", "C"]
LogType = Literal["info", "error", "success"]

# Raw responses: item id -> ordered list of sample values.
RawResponseSet = dict[str, list[float]]


class DISCWord(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    quadrant: DISCQuadrant


class InventoryItem(BaseModel):
    """One question or stimulus from an item bank."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    type: ItemType = "likert_5"
    category: Optional[str] = None
    keyed: Optional[Keyed] = None
    options: Optional[list[str]] = None

    # MBTI
    dimension: Optional[MBTIDimension] = None
    left_text: Optional[str] = None
    right_text: Optional[str] = None

    # DISC
    words: Optional[list[DISCWord]] = None

    @property
    def is_reverse_keyed(self) -> bool:
        return self.keyed == "minus"


class InventoryResult(BaseModel):
    """Scorer output for one inventory applied to one response set."""

    model_config = ConfigDict(frozen=True)

    inventory_name: str
    raw_scores: dict[str, list[float]] = Field(default_factory=dict)
    trait_scores: dict[str, float] = Field(default_factory=dict)
    type: Optional[str] = None
    psi: Optional[dict[str, float]] = None
    details: Optional[dict[str, Any]] = None


class LogEntry(BaseModel):
    timestamp: str
    message: str
    type: LogType = "info"


class ModelProfile(BaseModel):
    """One complete test run against one model/persona."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_name: str
    persona: str = "Base Model"
    system_prompt: Optional[str] = None
    timestamp: int  # epoch milliseconds
    results: dict[str, InventoryResult] = Field(default_factory=dict)
    logs: Optional[list[LogEntry]] = None
