"""
LLM Psychometrics — partial aggregation helpers.

Missing samples are never zero-filled.  An item with no samples simply does
not contribute, so a facet or subscale may sum fewer terms than its nominal
item count.  ``Accumulator`` keeps the running ``(total, count)`` pair so that
shift is visible in the output instead of hidden behind optional lookups.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

LIKERT_REFLECTION: float = 6.0  # 6 - x mirrors 1..5 around the midpoint 3


@dataclass
class Accumulator:
    total: float = 0.0
    count: int = 0

    def add(self, value: float) -> None:
        self.total += value
        self.count += 1

    def mean(self) -> Optional[float]:
        """Mean of contributions, or ``None`` when nothing contributed."""
        if self.count == 0:
            return None
        return self.total / self.count


def sample_mean(samples: Optional[Sequence[float]]) -> Optional[float]:
    """Arithmetic mean of an item's repeated samples; ``None`` if absent."""
    if not samples:
        return None
    return sum(samples) / len(samples)


def reverse_code(value: float) -> float:
    return LIKERT_REFLECTION - value
