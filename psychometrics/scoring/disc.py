"""
LLM Psychometrics — DISC forced-choice scorer.

Each of the 28 word groups is answered with a MOST and a LEAST pick, stored
per sample as ``most_index * 10 + least_index`` (indices 0-3 into the item's
word list).  Picks are tallied per quadrant into Graph I (most) and Graph II
(least); the integrated score ``(graph1 - graph2 + 28) / 2`` maps the
difference range [-28, 28] onto [0, 28].

Categorical samples are not averaged.  One sample per item is chosen by a
named selection strategy; ``last_sample`` is the default and keeps existing
score distributions unchanged.
"""

from __future__ import annotations

import math
from collections import Counter
from typing import Callable, Optional, Sequence

from psychometrics.item_banks.disc import DISC_ITEMS, QUADRANTS
from psychometrics.schemas.inventory import InventoryItem, InventoryResult, RawResponseSet
from psychometrics.scoring.calibration import calibrate_disc_quadrant

INVENTORY_NAME = "DISC Assessment"

GROUP_COUNT: int = 28
WORDS_PER_GROUP: int = 4
# Stands in for a pick outside the word list so only that pick is skipped.
SKIPPED_INDEX: int = 9

SampleStrategy = Callable[[Sequence[float]], float]


def encode_choice(most_index: int, least_index: int) -> int:
    return most_index * 10 + least_index


def decode_choice(encoded: float) -> tuple[int, int]:
    """Split an encoded sample into ``(most_index, least_index)``.

    The remainder truncates toward zero, so a negative encoding never yields
    a valid least index.
    """
    most_index = math.floor(encoded / 10)
    least_index = int(math.fmod(encoded, 10))
    return most_index, least_index


def last_sample(samples: Sequence[float]) -> float:
    return samples[-1]


def mode_sample(samples: Sequence[float]) -> float:
    """Most frequent sample; ties go to the value seen most recently."""
    counts = Counter(samples)
    best = max(counts.values())
    for value in reversed(samples):
        if counts[value] == best:
            return value
    return samples[-1]


SAMPLE_STRATEGIES: dict[str, SampleStrategy] = {
    "last": last_sample,
    "mode": mode_sample,
}


def _quadrant_at(item: InventoryItem, index: int) -> Optional[str]:
    if not 0 <= index < WORDS_PER_GROUP or not item.words or index >= len(item.words):
        return None
    return item.words[index].quadrant


def tally_graphs(
    raw_scores: RawResponseSet,
    items: Sequence[InventoryItem] = DISC_ITEMS,
    strategy: SampleStrategy = last_sample,
) -> tuple[dict[str, int], dict[str, int], int]:
    """Return ``(graph1, graph2, items_scored)``.

    Out-of-range indices are skipped for that pick only.
    """
    graph1 = {q: 0 for q in QUADRANTS}
    graph2 = {q: 0 for q in QUADRANTS}
    items_scored = 0

    for item in items:
        samples = raw_scores.get(item.id)
        if not samples:
            continue
        items_scored += 1
        most_index, least_index = decode_choice(strategy(samples))

        most = _quadrant_at(item, most_index)
        if most is not None:
            graph1[most] += 1
        least = _quadrant_at(item, least_index)
        if least is not None:
            graph2[least] += 1

    return graph1, graph2, items_scored


def integrated_score(most_count: int, least_count: int) -> float:
    return (most_count - least_count + GROUP_COUNT) / 2


def calculate_disc_scores(
    raw_scores: RawResponseSet,
    enable_calibration: bool = True,
    items: Optional[Sequence[InventoryItem]] = None,
    sample_strategy: str = "last",
) -> InventoryResult:
    items = DISC_ITEMS if items is None else items
    strategy = SAMPLE_STRATEGIES[sample_strategy]

    graph1, graph2, items_scored = tally_graphs(raw_scores, items, strategy)
    raw_quadrants = {q: integrated_score(graph1[q], graph2[q]) for q in QUADRANTS}

    if enable_calibration:
        quadrants = {q: calibrate_disc_quadrant(v) for q, v in raw_quadrants.items()}
    else:
        quadrants = dict(raw_quadrants)

    trait_scores: dict[str, float] = dict(quadrants)
    trait_scores.update({f"_raw_{q}": v for q, v in raw_quadrants.items()})

    return InventoryResult(
        inventory_name=INVENTORY_NAME,
        raw_scores=raw_scores,
        trait_scores=trait_scores,
        details={
            "graph1": graph1,
            "graph2": graph2,
            "calibrated": enable_calibration,
            "sample_strategy": sample_strategy,
            "items_scored": items_scored,
        },
    )
