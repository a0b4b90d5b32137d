"""
LLM Psychometrics — MBTI scoring.

Two independent paths are kept side by side:

* ``calculate_mbti_scores`` scores the OEJTS 1.2 inventory directly.  Each of
  the four dimensions sums 8 bipolar items (raw 8-40, midpoint 24).  A score
  strictly above 24 selects the right-pole letter, so an exact 24 resolves to
  the left pole (I, S, F, J).
* ``derive_mbti_from_big_five`` approximates a type from Big Five domains
  when the direct inventory was not run.  A score at or above 72 selects the
  first letter of each pair (E, N, F, J), so an exact 72 resolves the other
  way from the direct path.

The tie rules differ between the two paths and are intentionally not
harmonised; consumers prefer direct results when both exist.
"""

from __future__ import annotations

from typing import Optional, Sequence

from psychometrics.item_banks.mbti import DIMENSIONS, MBTI_ITEMS
from psychometrics.schemas.inventory import InventoryItem, InventoryResult, RawResponseSet
from psychometrics.scoring.accumulator import Accumulator, sample_mean
from psychometrics.scoring.calibration import calibrate_mbti_dimension

INVENTORY_NAME = "MBTI (OEJTS 1.2)"
DERIVED_INVENTORY_NAME = "MBTI (Derived from Big Five)"

MBTI_MIDPOINT: float = 24.0
MBTI_MAX_DELTA: float = 16.0
MBTI_PAIR_TOTAL: float = 48.0  # left + right letter scores on the 8-40 range

BIG_FIVE_MIDPOINT: float = 72.0
BIG_FIVE_MAX_DELTA: float = 48.0
BIG_FIVE_PAIR_TOTAL: float = 144.0

# dimension -> (left pole, right pole); low scores lean left
POLES: dict[str, tuple[str, str]] = {
    "IE": ("I", "E"),
    "SN": ("S", "N"),
    "TF": ("F", "T"),
    "JP": ("J", "P"),
}

# MBTI axis -> (Big Five domain, letter at/above midpoint, letter below)
BIG_FIVE_AXES: dict[str, tuple[str, str, str]] = {
    "IE": ("E", "E", "I"),
    "SN": ("O", "N", "S"),
    "TF": ("A", "F", "T"),
    "JP": ("C", "J", "P"),
}


def classify_direct(dimension_scores: dict[str, float]) -> str:
    """Four-letter type from direct dimension scores (strict ``>`` midpoint)."""
    letters = []
    for dimension in DIMENSIONS:
        left, right = POLES[dimension]
        letters.append(right if dimension_scores[dimension] > MBTI_MIDPOINT else left)
    return "".join(letters)


def preference_strength(score: float, midpoint: float, max_delta: float) -> float:
    return abs(score - midpoint) / max_delta


def letter_scores(dimension_scores: dict[str, float]) -> dict[str, float]:
    """Complementary single-letter scores; each pair sums to 48."""
    scores: dict[str, float] = {}
    for dimension in DIMENSIONS:
        left, right = POLES[dimension]
        scores[right] = dimension_scores[dimension]
        scores[left] = MBTI_PAIR_TOTAL - dimension_scores[dimension]
    return scores


def calculate_mbti_scores(
    raw_scores: RawResponseSet,
    enable_calibration: bool = True,
    items: Optional[Sequence[InventoryItem]] = None,
) -> InventoryResult:
    items = MBTI_ITEMS if items is None else items

    sums = {dimension: Accumulator() for dimension in DIMENSIONS}
    for item in items:
        mean = sample_mean(raw_scores.get(item.id))
        if mean is None or item.dimension is None:
            continue
        sums[item.dimension].add(mean)

    raw_dimensions = {dimension: acc.total for dimension, acc in sums.items()}
    if enable_calibration:
        dimensions = {d: calibrate_mbti_dimension(v) for d, v in raw_dimensions.items()}
    else:
        dimensions = dict(raw_dimensions)

    psi = {
        d: preference_strength(v, MBTI_MIDPOINT, MBTI_MAX_DELTA)
        for d, v in dimensions.items()
    }

    trait_scores: dict[str, float] = dict(dimensions)
    trait_scores.update(letter_scores(dimensions))
    trait_scores.update({f"_raw_{d}": v for d, v in raw_dimensions.items()})

    return InventoryResult(
        inventory_name=INVENTORY_NAME,
        raw_scores=raw_scores,
        trait_scores=trait_scores,
        type=classify_direct(dimensions),
        psi=psi,
        details={
            "derived": False,
            "source": "OEJTS 1.2",
            "calibrated": enable_calibration,
            "item_counts": {d: acc.count for d, acc in sums.items()},
        },
    )


def classify_from_big_five(domain_scores: dict[str, float]) -> str:
    """Four-letter type from Big Five domains (inclusive ``>=`` midpoint)."""
    letters = []
    for dimension in DIMENSIONS:
        domain, high, low = BIG_FIVE_AXES[dimension]
        letters.append(high if domain_scores[domain] >= BIG_FIVE_MIDPOINT else low)
    return "".join(letters)


def derive_mbti_from_big_five(big_five: InventoryResult) -> InventoryResult:
    """Approximate an MBTI result from an already computed Big Five result.

    E -> IE, O -> SN, A -> TF (high A reads as F), C -> JP (high C reads as
    J).  These associations are a heuristic, not a validated factor mapping.
    Missing or zero domain scores fall back to the midpoint.
    """
    scores = big_five.trait_scores
    domains = {
        domain: scores.get(domain) or BIG_FIVE_MIDPOINT
        for domain, _, _ in BIG_FIVE_AXES.values()
    }

    psi = {
        dimension: preference_strength(
            domains[domain], BIG_FIVE_MIDPOINT, BIG_FIVE_MAX_DELTA
        )
        for dimension, (domain, _, _) in BIG_FIVE_AXES.items()
    }

    trait_scores: dict[str, float] = {}
    for domain, high, low in BIG_FIVE_AXES.values():
        trait_scores[high] = domains[domain]
        trait_scores[low] = BIG_FIVE_PAIR_TOTAL - domains[domain]

    return InventoryResult(
        inventory_name=DERIVED_INVENTORY_NAME,
        raw_scores={},
        trait_scores=trait_scores,
        type=classify_from_big_five(domains),
        psi=psi,
        details={"derived": True, "source": "IPIP-NEO-120"},
    )
