"""
LLM Psychometrics — Big Five (IPIP-NEO-120) scorer.

Pipeline:
  1. Average each item's repeated samples.
  2. Reverse-code ``keyed == "minus"`` items (6 - mean).
  3. Sum item scores into their facet (4 items per facet).
  4. Sum the 6 facets of each domain (raw range 24-120).
  5. Optionally calibrate each domain.

Facet sums are reported uncalibrated; domains are reported calibrated (or raw
when calibration is off), with the pre-calibration values under ``_raw_<D>``.
"""

from __future__ import annotations

from typing import Optional, Sequence

from psychometrics.item_banks.bigfive import BIG_FIVE_ITEMS, DOMAINS
from psychometrics.schemas.inventory import InventoryItem, InventoryResult, RawResponseSet
from psychometrics.scoring.accumulator import Accumulator, reverse_code, sample_mean
from psychometrics.scoring.calibration import calibrate_big_five_domain

INVENTORY_NAME = "Big Five (IPIP-NEO-120)"


def score_facets(
    raw_scores: RawResponseSet,
    items: Sequence[InventoryItem] = BIG_FIVE_ITEMS,
) -> dict[str, Accumulator]:
    """Accumulate per-item scores into facets, keyed by facet code.

    Facets are created on first contribution, so a facet without any
    answered item is absent from the result.
    """
    facets: dict[str, Accumulator] = {}
    for item in items:
        mean = sample_mean(raw_scores.get(item.id))
        if mean is None:
            continue
        score = reverse_code(mean) if item.is_reverse_keyed else mean
        facets.setdefault(item.category, Accumulator()).add(score)
    return facets


def domain_totals(facets: dict[str, Accumulator]) -> dict[str, float]:
    """Sum facet totals into domains; the facet code's first letter is the domain."""
    totals = {domain: 0.0 for domain in DOMAINS}
    for facet, acc in facets.items():
        domain = facet[0]
        totals[domain] = totals.get(domain, 0.0) + acc.total
    return totals


def calculate_big_five_scores(
    raw_scores: RawResponseSet,
    enable_calibration: bool = True,
    items: Optional[Sequence[InventoryItem]] = None,
) -> InventoryResult:
    items = BIG_FIVE_ITEMS if items is None else items

    facets = score_facets(raw_scores, items)
    raw_domains = domain_totals(facets)

    if enable_calibration:
        domains = {d: calibrate_big_five_domain(v) for d, v in raw_domains.items()}
    else:
        domains = dict(raw_domains)

    trait_scores: dict[str, float] = {facet: acc.total for facet, acc in facets.items()}
    trait_scores.update(domains)
    trait_scores.update({f"_raw_{d}": v for d, v in raw_domains.items()})

    return InventoryResult(
        inventory_name=INVENTORY_NAME,
        raw_scores=raw_scores,
        trait_scores=trait_scores,
        details={
            "calibrated": enable_calibration,
            "items_scored": sum(acc.count for acc in facets.values()),
            "facet_item_counts": {facet: acc.count for facet, acc in facets.items()},
        },
    )
