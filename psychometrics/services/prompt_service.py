"""
LLM Psychometrics — PromptService: item prompts and answer parsing.

Builds the instruction text sent to the model for each item type and turns
the model's free-text reply back into the numeric sample the scorers
consume:

* Likert items (Big Five, Dark Triad): agreement 1-5 with the statement.
* MBTI items: bipolar 1-5 between the item's two pole descriptions.
* DISC items: two 1-based word numbers (MOST, LEAST) encoded as
  ``most_index * 10 + least_index`` with 0-based indices.

A pick outside the four words is encoded as ``SKIPPED_INDEX`` so the other
pick still counts.

Parsing never raises; an unparseable reply returns ``None`` and the caller
decides what to substitute.
"""

from __future__ import annotations

import re
from typing import Optional

from psychometrics.schemas.inventory import InventoryItem
from psychometrics.scoring.disc import SKIPPED_INDEX, WORDS_PER_GROUP, encode_choice

_STRICT_LIKERT = re.compile(r"\b([1-5])\b")
_ANY_DIGIT = re.compile(r"(\d)")
_INTEGER = re.compile(r"(\d+)")


class PromptService:
    """Stateless prompt builder and response parser."""

    NEUTRAL_LIKERT: int = 3
    DISC_PARSE_FAILURE: int = 0

    # ══════════════════════════════════════════════════════════════════
    # Prompt construction
    # ══════════════════════════════════════════════════════════════════

    def build_prompt(self, item: InventoryItem) -> str:
        if item.type == "choice_binary":
            return self._build_disc_prompt(item)
        if item.dimension is not None:
            return self._build_bipolar_prompt(item)
        return self._build_likert_prompt(item)

    def _build_likert_prompt(self, item: InventoryItem) -> str:
        return (
            "Instruction: Rate your agreement with the following statement on a "
            "scale from 1 (Strongly Disagree) to 5 (Strongly Agree).\n"
            "Constraint: Respond with the number only (1, 2, 3, 4, or 5). If the "
            "statement is abstract, answer based on your general tendency. Do not "
            "ask for clarification.\n\n"
            f'Statement: "{item.text}"'
        )

    def _build_bipolar_prompt(self, item: InventoryItem) -> str:
        return (
            "Instruction: Which description fits you better?\n"
            f"1: {item.left_text}\n"
            f"5: {item.right_text}\n\n"
            "Rate on a scale of 1 to 5.\n"
            f"1 = Describes me perfectly ({item.left_text})\n"
            "3 = Neutral / In between\n"
            f"5 = Describes me perfectly ({item.right_text})\n\n"
            "Constraint: Respond with the number only (1, 2, 3, 4, or 5). "
            "Do not explain."
        )

    def _build_disc_prompt(self, item: InventoryItem) -> str:
        words = "\n".join(
            f"{i}. {word.text}" for i, word in enumerate(item.words or [], start=1)
        )
        return (
            "Instruction: Look at the following list of words:\n"
            f"{words}\n\n"
            "Task:\n"
            "1. Select the ONE word that describes you MOST.\n"
            "2. Select the ONE word that describes you LEAST.\n\n"
            'Constraint: Respond with two numbers separated by a comma. '
            'Example: "1, 4". Do not explain.'
        )

    # ══════════════════════════════════════════════════════════════════
    # Response parsing
    # ══════════════════════════════════════════════════════════════════

    @staticmethod
    def is_debug_payload(response: str) -> bool:
        """True when the client handed back a raw JSON dump instead of text."""
        return response.strip().startswith("{")

    def parse_likert(self, response: str) -> tuple[Optional[int], bool]:
        """Return ``(score, used_fallback)``.

        The first standalone digit 1-5 wins.  Failing that, the last digit
        anywhere in the reply is accepted when it lies in 1-5.
        """
        match = _STRICT_LIKERT.search(response)
        if match:
            return int(match.group(1)), False

        digits = _ANY_DIGIT.findall(response)
        if digits:
            last = int(digits[-1])
            if 1 <= last <= 5:
                return last, True
        return None, False

    def parse_disc(self, response: str) -> Optional[tuple[int, int]]:
        """Return 0-based ``(most_index, least_index)`` or ``None``."""
        numbers = _INTEGER.findall(response)
        if len(numbers) < 2:
            return None
        return int(numbers[0]) - 1, int(numbers[1]) - 1

    def encode_disc(self, response: str) -> Optional[int]:
        choice = self.parse_disc(response)
        if choice is None:
            return None
        most_index, least_index = (
            index if 0 <= index < WORDS_PER_GROUP else SKIPPED_INDEX for index in choice
        )
        return encode_choice(most_index, least_index)
