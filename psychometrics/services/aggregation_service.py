"""
LLM Psychometrics — AggregationService: cross-run summaries.

Two views are built from stored profiles:

* **Leaderboard** — one row per ``(model, persona)`` with averaged Big Five
  domains, averaged DISC quadrants and the modal MBTI type.
* **Model profile** — one synthetic ``ModelProfile`` per model across all of
  its personas, used by the model detail view.

MBTI modes prefer direct administrations: each run contributes its direct
``mbti`` type when present, else its ``mbti_derived`` type, and derived
votes are only consulted when no run in the group has a direct type.
"""

from __future__ import annotations

import time
from collections import Counter
from typing import Iterable, Optional

import structlog

from psychometrics.config import get_settings
from psychometrics.item_banks.darktriad import SUBSCALES
from psychometrics.item_banks.bigfive import DOMAINS
from psychometrics.item_banks.disc import QUADRANTS
from psychometrics.schemas.inventory import InventoryResult, ModelProfile
from psychometrics.schemas.run import LeaderboardEntry

logger = structlog.get_logger("psychometrics.aggregation_service")


def _first_max(counts: dict[str, int]) -> tuple[Optional[str], int]:
    """Return the key with the highest count; the first to reach it wins ties."""
    best: Optional[str] = None
    best_count = 0
    for key, count in counts.items():
        if count > best_count:
            best, best_count = key, count
    return best, best_count


class _Averager:
    """Per-key running sums over the runs that carry an inventory."""

    def __init__(self, keys: Iterable[str]) -> None:
        self.keys = tuple(keys)
        self.totals = {k: 0.0 for k in self.keys}
        self.count = 0

    def add(self, result: Optional[InventoryResult]) -> None:
        if result is None:
            return
        for k in self.keys:
            self.totals[k] += result.trait_scores.get(k, 0.0)
        self.count += 1

    def averages(self) -> dict[str, float]:
        if not self.count:
            return {k: 0.0 for k in self.keys}
        return {k: total / self.count for k, total in self.totals.items()}


class _MbtiVotes:
    def __init__(self) -> None:
        self.direct: dict[str, int] = {}
        self.derived: dict[str, int] = {}

    def add(self, profile: ModelProfile) -> None:
        direct = profile.results.get("mbti")
        derived = profile.results.get("mbti_derived")
        if direct is not None and direct.type:
            self.direct[direct.type] = self.direct.get(direct.type, 0) + 1
        elif derived is not None and derived.type:
            self.derived[derived.type] = self.derived.get(derived.type, 0) + 1

    def mode(self) -> tuple[Optional[str], int]:
        return _first_max(self.direct or self.derived)


class AggregationService:
    """Builds leaderboard rows and per-model synthetic profiles."""

    MBTI_LETTERS: tuple[str, ...] = ("I", "E", "S", "N", "T", "F", "J", "P")
    NO_TYPE: str = "-"

    # ══════════════════════════════════════════════════════════════════════
    # 1. build_leaderboard
    # ══════════════════════════════════════════════════════════════════════

    def build_leaderboard(self, profiles: Iterable[ModelProfile]) -> list[LeaderboardEntry]:
        """Group runs by ``(model_name, persona)`` and summarise each group.

        Rows are sorted by run count, highest first.  Big Five and DISC
        averages only include runs that carry the inventory.
        """
        default_persona = get_settings().DEFAULT_PERSONA
        groups: dict[str, dict] = {}

        for profile in profiles:
            persona = profile.persona or default_persona
            key = f"{profile.model_name}::{persona}"
            stats = groups.get(key)
            if stats is None:
                stats = groups[key] = {
                    "name": profile.model_name,
                    "persona": persona,
                    "count": 0,
                    "bigfive": _Averager(DOMAINS),
                    "disc": _Averager(QUADRANTS),
                    "mbti": _MbtiVotes(),
                }
            stats["count"] += 1
            stats["bigfive"].add(profile.results.get("bigfive"))
            stats["disc"].add(profile.results.get("disc"))
            stats["mbti"].add(profile)

        entries = []
        for key, stats in groups.items():
            top_type, _ = stats["mbti"].mode()
            entries.append(
                LeaderboardEntry(
                    id=key,
                    name=stats["name"],
                    persona=stats["persona"],
                    count=stats["count"],
                    scores=stats["bigfive"].averages(),
                    disc=stats["disc"].averages(),
                    mbti=top_type or self.NO_TYPE,
                )
            )
        entries.sort(key=lambda e: e.count, reverse=True)

        logger.info("leaderboard_built", groups=len(entries))
        return entries

    # ══════════════════════════════════════════════════════════════════════
    # 2. aggregate_model_profile
    # ══════════════════════════════════════════════════════════════════════

    def aggregate_model_profile(
        self,
        model_name: str,
        profiles: Iterable[ModelProfile],
    ) -> Optional[ModelProfile]:
        """Collapse every run of ``model_name`` into one synthetic profile.

        Returns ``None`` when there are no runs for the model.  Only
        inventories present in at least one run appear in the result; each
        carries ``details.count``, the number of runs averaged.
        """
        runs = [p for p in profiles if p.model_name == model_name]
        if not runs:
            logger.info("model_profile_empty", model_name=model_name)
            return None

        default_persona = get_settings().DEFAULT_PERSONA
        bigfive = _Averager(DOMAINS)
        disc = _Averager(QUADRANTS)
        darktriad = _Averager(SUBSCALES)
        votes = _MbtiVotes()
        letter_totals = {k: 0.0 for k in self.MBTI_LETTERS}
        letter_runs = 0

        for profile in runs:
            bigfive.add(profile.results.get("bigfive"))
            disc.add(profile.results.get("disc"))
            darktriad.add(profile.results.get("darktriad"))
            votes.add(profile)

            mbti = profile.results.get("mbti") or profile.results.get("mbti_derived")
            if mbti is not None:
                for k in self.MBTI_LETTERS:
                    if k in mbti.trait_scores:
                        letter_totals[k] += mbti.trait_scores[k]
                letter_runs += 1

        results: dict[str, InventoryResult] = {}
        for key, name, averager in (
            ("bigfive", "Big Five (Aggregated)", bigfive),
            ("disc", "DISC (Aggregated)", disc),
            ("darktriad", "Dark Triad (Aggregated)", darktriad),
        ):
            if averager.count:
                results[key] = InventoryResult(
                    inventory_name=name,
                    trait_scores=averager.averages(),
                    details={"count": averager.count},
                )

        top_type, top_count = votes.mode()
        if top_type:
            letters = (
                {k: v / letter_runs for k, v in letter_totals.items()} if letter_runs else {}
            )
            results["mbti_derived"] = InventoryResult(
                inventory_name="MBTI (Most Frequent)",
                trait_scores=letters,
                type=top_type,
                details={"count": top_count, "total": len(runs)},
            )

        personas = Counter(p.persona or default_persona for p in runs)
        top_persona, _ = _first_max(dict(personas))

        logger.info(
            "model_profile_aggregated",
            model_name=model_name,
            runs=len(runs),
            inventories=sorted(results),
        )
        return ModelProfile(
            model_name=model_name,
            persona=top_persona or default_persona,
            timestamp=int(time.time() * 1000),
            results=results,
        )
