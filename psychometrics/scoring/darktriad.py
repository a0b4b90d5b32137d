"""
LLM Psychometrics — Short Dark Triad (SD3) scorer.

Each subscale is the mean of its item means (1-5) rescaled linearly to 0-100
via ``(avg - 1) * 25``.  No z-score calibration constants have been tuned for
this inventory, so ``enable_calibration`` is accepted for interface parity
but has no effect.
"""

from __future__ import annotations

from typing import Optional, Sequence

from psychometrics.item_banks.darktriad import DARK_TRIAD_ITEMS, SUBSCALES
from psychometrics.schemas.inventory import InventoryItem, InventoryResult, RawResponseSet
from psychometrics.scoring.accumulator import Accumulator, reverse_code, sample_mean

INVENTORY_NAME = "Dark Triad (SD3)"

LIKERT_MIN: float = 1.0
RESCALE_FACTOR: float = 25.0


def rescale_to_percent(average: float) -> float:
    """Map a 1-5 average onto 0-100 (1 -> 0, 3 -> 50, 5 -> 100)."""
    return (average - LIKERT_MIN) * RESCALE_FACTOR


def calculate_dark_triad_scores(
    raw_scores: RawResponseSet,
    enable_calibration: bool = True,
    items: Optional[Sequence[InventoryItem]] = None,
) -> InventoryResult:
    items = DARK_TRIAD_ITEMS if items is None else items

    subscales = {name: Accumulator() for name in SUBSCALES}
    for item in items:
        mean = sample_mean(raw_scores.get(item.id))
        if mean is None or not item.category:
            continue
        score = reverse_code(mean) if item.is_reverse_keyed else mean
        subscales.setdefault(item.category, Accumulator()).add(score)

    # A subscale with no contributing items scores 0 rather than NaN.
    trait_scores: dict[str, float] = {}
    for name, acc in subscales.items():
        average = acc.mean()
        trait_scores[name] = rescale_to_percent(average) if average is not None else 0.0

    return InventoryResult(
        inventory_name=INVENTORY_NAME,
        raw_scores=raw_scores,
        trait_scores=trait_scores,
        details={
            "calibrated": False,
            "item_counts": {name: acc.count for name, acc in subscales.items()},
        },
    )
