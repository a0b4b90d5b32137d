"""
LLM Psychometrics — AssessmentService: administer inventories to a model.

Orchestrates one full test run:

  1. Collect the item banks for the requested inventories.
  2. Dispatch items in small concurrent chunks (``ITEM_CHUNK_SIZE``); each
     item issues ``SAMPLES_PER_ITEM`` sequential, independent requests.
  3. Parse each reply into a numeric sample.  Request errors and
     unparseable replies are logged and replaced with a fallback value
     (3 for Likert items, 0 for DISC), so every item ends up with a full
     sample list.
  4. Score the collected ``{item_id: samples}`` map and return a
     ``ModelProfile`` carrying the verification log.

Every event is written both to structlog and to the profile's own log so
that a stored run can be audited later.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Callable, Iterable, Optional

import structlog

from psychometrics.config import get_settings
from psychometrics.item_banks import INVENTORY_KEYS, get_items
from psychometrics.schemas.inventory import (
    InventoryItem,
    LogEntry,
    LogType,
    ModelProfile,
    RawResponseSet,
)
from psychometrics.scoring.disc import decode_choice
from psychometrics.services.openrouter_service import OpenRouterService
from psychometrics.services.prompt_service import PromptService
from psychometrics.services.scoring_service import ScoringService

logger = structlog.get_logger("psychometrics.assessment_service")

ProgressCallback = Callable[[int, int], None]


class VerificationLog:
    """Ordered, timestamped log entries stored with the run."""

    def __init__(self, log: structlog.stdlib.BoundLogger) -> None:
        self._log = log
        self.entries: list[LogEntry] = []

    def add(self, message: str, type: LogType = "info") -> None:
        self.entries.append(
            LogEntry(
                timestamp=datetime.now().strftime("%H:%M:%S"),
                message=message,
                type=type,
            )
        )
        if type == "error":
            self._log.warning("run_log", message=message)
        else:
            self._log.debug("run_log", message=message, type=type)


class AssessmentService:
    """Runs the selected inventories against one model/persona."""

    # Bank order in which items are administered.
    ADMINISTRATION_ORDER: tuple[str, ...] = ("bigfive", "disc", "mbti", "darktriad")

    def __init__(
        self,
        client: OpenRouterService,
        prompt_service: Optional[PromptService] = None,
        scoring_service: Optional[ScoringService] = None,
        samples_per_item: Optional[int] = None,
        chunk_size: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self._client = client
        self._prompts = prompt_service or PromptService()
        self._scoring = scoring_service or ScoringService()
        self.samples_per_item = samples_per_item or settings.SAMPLES_PER_ITEM
        self.chunk_size = chunk_size or settings.ITEM_CHUNK_SIZE
        self.temperature = settings.DEFAULT_TEMPERATURE

    # ══════════════════════════════════════════════════════════════════
    # Public API
    # ══════════════════════════════════════════════════════════════════

    async def run_assessment(
        self,
        model: str,
        inventories: Iterable[str],
        persona: Optional[str] = None,
        system_prompt: str = "",
        progress: Optional[ProgressCallback] = None,
        enable_calibration: Optional[bool] = None,
    ) -> ModelProfile:
        persona = persona or get_settings().DEFAULT_PERSONA
        requested = list(dict.fromkeys(inventories))
        log = logger.bind(model=model, persona=persona)
        vlog = VerificationLog(log)

        unknown = [name for name in requested if name not in INVENTORY_KEYS]
        if unknown:
            log.warning("unknown_inventories_ignored", inventories=unknown)

        vlog.add(f"Starting test for model: {model} [{persona}]")

        items = self._collect_items(requested)
        total = len(items)
        vlog.add(
            f"Total items to query: {total} "
            f"(x{self.samples_per_item} samples = {total * self.samples_per_item} requests)"
        )
        log.info("assessment_start", n_items=total, inventories=requested)

        raw_scores: RawResponseSet = {}
        for start in range(0, total, self.chunk_size):
            chunk = items[start:start + self.chunk_size]
            samples = await asyncio.gather(
                *(self._collect_item(item, model, system_prompt, vlog) for item in chunk)
            )
            for item, item_samples in zip(chunk, samples):
                raw_scores[item.id] = item_samples
            if progress is not None:
                progress(min(start + len(chunk), total), total)

        vlog.add("Calculating scores...")
        profile = self._scoring.build_profile(
            model_name=model,
            raw_scores=raw_scores,
            inventories=requested,
            persona=persona,
            system_prompt=system_prompt,
            enable_calibration=enable_calibration,
        )
        vlog.add("Test completed successfully!", "success")
        log.info("assessment_complete", results=list(profile.results))
        return profile.model_copy(update={"logs": list(vlog.entries)})

    # ══════════════════════════════════════════════════════════════════
    # Internals
    # ══════════════════════════════════════════════════════════════════

    def _collect_items(self, inventories: list[str]) -> list[InventoryItem]:
        items: list[InventoryItem] = []
        for name in self.ADMINISTRATION_ORDER:
            if name in inventories:
                items.extend(get_items(name))
        return items

    def _fallback_value(self, item: InventoryItem) -> int:
        if item.type == "choice_binary":
            return PromptService.DISC_PARSE_FAILURE
        return PromptService.NEUTRAL_LIKERT

    async def _collect_item(
        self,
        item: InventoryItem,
        model: str,
        system_prompt: str,
        vlog: VerificationLog,
    ) -> list[float]:
        prompt = self._prompts.build_prompt(item)
        samples: list[float] = []
        for _ in range(self.samples_per_item):
            try:
                response = await self._client.complete(
                    model, prompt, self.temperature, system_prompt
                )
            except Exception as exc:
                vlog.add(f'Error fetching item "{item.text}": {exc}', "error")
                samples.append(self._fallback_value(item))
                continue
            samples.append(self._parse_sample(item, response, vlog))
        return samples

    def _parse_sample(self, item: InventoryItem, response: str, vlog: VerificationLog) -> int:
        if self._prompts.is_debug_payload(response):
            vlog.add(f"Model returned invalid structure (Debug Info): {response}", "error")
            return self._fallback_value(item)

        if item.type == "choice_binary":
            encoded = self._prompts.encode_disc(response)
            if encoded is None:
                vlog.add(f'Failed to parse DISC response: "{response}"', "error")
                return PromptService.DISC_PARSE_FAILURE
            most, least = decode_choice(encoded)
            vlog.add(
                f"[{item.id}] DISC: Most={most + 1} ({self._quadrant(item, most)}), "
                f"Least={least + 1} ({self._quadrant(item, least)})",
                "success",
            )
            return encoded

        score, used_fallback = self._prompts.parse_likert(response)
        if score is None:
            vlog.add(
                f'Failed to parse response for item "{item.text}". Raw response: "{response}"',
                "error",
            )
            return PromptService.NEUTRAL_LIKERT
        suffix = " (Fallback)" if used_fallback else ""
        vlog.add(
            f'[{item.id}] Question: "{item.text}" | Raw Answer: "{response}" -> Score: {score}{suffix}',
            "success",
        )
        return score

    @staticmethod
    def _quadrant(item: InventoryItem, index: int) -> str:
        if item.words and 0 <= index < len(item.words):
            return item.words[index].quadrant
        return "?"
