"""
LLM Psychometrics — ScoringService: raw responses to a ModelProfile.

Hands one shared ``{item_id: samples}`` map to each requested scorer and
assembles the results under their inventory keys.  Whenever Big Five is
scored, an approximate MBTI type is also derived from it and stored under
``mbti_derived``.  Scorers only read the shared map, so the order in which
inventories are scored does not matter.
"""

from __future__ import annotations

import time
from typing import Callable, Iterable, Optional

import structlog

from psychometrics.config import get_settings
from psychometrics.item_banks import INVENTORY_KEYS
from psychometrics.schemas.inventory import (
    InventoryResult,
    LogEntry,
    ModelProfile,
    RawResponseSet,
)
from psychometrics.scoring.bigfive import calculate_big_five_scores
from psychometrics.scoring.darktriad import calculate_dark_triad_scores
from psychometrics.scoring.disc import calculate_disc_scores
from psychometrics.scoring.mbti import calculate_mbti_scores, derive_mbti_from_big_five

logger = structlog.get_logger("psychometrics.scoring_service")

Scorer = Callable[[RawResponseSet, bool], InventoryResult]


class ScoringService:
    """Dispatches raw response sets to the per-inventory scorers."""

    SCORERS: dict[str, Scorer] = {
        "bigfive": calculate_big_five_scores,
        "mbti": calculate_mbti_scores,
        "disc": calculate_disc_scores,
        "darktriad": calculate_dark_triad_scores,
    }

    def __init__(self, enable_calibration: Optional[bool] = None) -> None:
        if enable_calibration is None:
            enable_calibration = get_settings().ENABLE_CALIBRATION
        self.enable_calibration = enable_calibration

    def score_inventory(
        self,
        inventory: str,
        raw_scores: RawResponseSet,
        enable_calibration: Optional[bool] = None,
    ) -> InventoryResult:
        """Score a single inventory.

        Raises
        ------
        KeyError
            If ``inventory`` has no scorer.
        """
        if inventory not in self.SCORERS:
            raise KeyError(f"Unknown inventory {inventory!r}")
        calibrate = self.enable_calibration if enable_calibration is None else enable_calibration
        result = self.SCORERS[inventory](raw_scores, calibrate)
        logger.info(
            "inventory_scored",
            inventory=inventory,
            calibrated=calibrate,
            items_answered=sum(1 for v in raw_scores.values() if v),
            type=result.type,
        )
        return result

    def score_all(
        self,
        raw_scores: RawResponseSet,
        inventories: Iterable[str],
        enable_calibration: Optional[bool] = None,
    ) -> dict[str, InventoryResult]:
        requested = set(inventories)
        unknown = requested.difference(INVENTORY_KEYS)
        if unknown:
            logger.warning("unknown_inventories_ignored", inventories=sorted(unknown))

        results: dict[str, InventoryResult] = {}
        for inventory in INVENTORY_KEYS:
            if inventory not in requested:
                continue
            results[inventory] = self.score_inventory(inventory, raw_scores, enable_calibration)
            if inventory == "bigfive":
                results["mbti_derived"] = derive_mbti_from_big_five(results["bigfive"])
        return results

    def build_profile(
        self,
        model_name: str,
        raw_scores: RawResponseSet,
        inventories: Iterable[str],
        persona: Optional[str] = None,
        system_prompt: str = "",
        enable_calibration: Optional[bool] = None,
        logs: Optional[list[LogEntry]] = None,
        timestamp: Optional[int] = None,
    ) -> ModelProfile:
        persona = persona or get_settings().DEFAULT_PERSONA
        log = logger.bind(model_name=model_name, persona=persona)
        log.info("build_profile_start", n_items=len(raw_scores))

        results = self.score_all(raw_scores, inventories, enable_calibration)

        profile = ModelProfile(
            model_name=model_name,
            persona=persona,
            system_prompt=system_prompt,
            timestamp=timestamp if timestamp is not None else int(time.time() * 1000),
            results=results,
            logs=logs,
        )
        log.info("build_profile_complete", inventories=list(results))
        return profile
