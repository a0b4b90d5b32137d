"""
LLM Psychometrics — embedded item banks.

Banks are static configuration: built once at import and only ever read.
"""

from __future__ import annotations

from psychometrics.item_banks.bigfive import BIG_FIVE_ITEMS
from psychometrics.item_banks.darktriad import DARK_TRIAD_ITEMS
from psychometrics.item_banks.disc import DISC_ITEMS
from psychometrics.item_banks.mbti import MBTI_ITEMS
from psychometrics.schemas.inventory import InventoryItem

ITEM_BANKS: dict[str, list[InventoryItem]] = {
    "bigfive": BIG_FIVE_ITEMS,
    "disc": DISC_ITEMS,
    "mbti": MBTI_ITEMS,
    "darktriad": DARK_TRIAD_ITEMS,
}

INVENTORY_KEYS: tuple[str, ...] = tuple(ITEM_BANKS)


def get_items(inventory: str) -> list[InventoryItem]:
    """Return the item bank for ``inventory``.

    Raises
    ------
    KeyError
        If ``inventory`` is not one of ``INVENTORY_KEYS``.
    """
    try:
        return ITEM_BANKS[inventory]
    except KeyError:
        raise KeyError(f"Unknown inventory {inventory!r}") from None


__all__ = [
    "BIG_FIVE_ITEMS",
    "DARK_TRIAD_ITEMS",
    "DISC_ITEMS",
    "INVENTORY_KEYS",
    "ITEM_BANKS",
    "MBTI_ITEMS",
    "get_items",
]
