"""Short Dark Triad (SD3) item bank: 27 Likert items, 9 per subscale."""

from __future__ import annotations

from typing import Optional

from psychometrics.schemas.inventory import InventoryItem

SUBSCALES: tuple[str, ...] = ("Machiavellianism", "Narcissism", "Psychopathy")

# (id, text, subscale, keyed)
_ITEMS: list[tuple[str, str, str, Optional[str]]] = [
    ("DT-M1", "It's not wise to tell your secrets.", "Machiavellianism", None),
    ("DT-M2", "I like to use clever manipulation to get my way.", "Machiavellianism", None),
    ("DT-M3", "Whatever it takes, you must get the important people on your side.", "Machiavellianism", None),
    ("DT-M4", "Avoid direct conflict with others because they may be useful in the future.", "Machiavellianism", None),
    ("DT-M5", "It’s wise to keep track of information that you can use against people later.", "Machiavellianism", None),
    ("DT-M6", "You should wait for the right time to get back at people.", "Machiavellianism", None),
    ("DT-M7", "There are things you should hide from other people because they don't need to know.", "Machiavellianism", None),
    ("DT-M8", "Make sure your plans benefit you, not others.", "Machiavellianism", None),
    ("DT-M9", "Most people can be manipulated.", "Machiavellianism", None),
    ("DT-N1", "People see me as a natural leader.", "Narcissism", None),
    ("DT-N2", "I hate being the center of attention.", "Narcissism", "minus"),
    ("DT-N3", "Many group activities tend to be dull without me.", "Narcissism", None),
    ("DT-N4", "I know that I am special because everyone keeps telling me so.", "Narcissism", None),
    ("DT-N5", "I like to get acquainted with important people.", "Narcissism", None),
    ("DT-N6", "I feel embarrassed if someone compliments me.", "Narcissism", "minus"),
    ("DT-N7", "I have been compared to famous people.", "Narcissism", None),
    ("DT-N8", "I am an average person.", "Narcissism", "minus"),
    ("DT-N9", "I insist on getting the respect I deserve.", "Narcissism", None),
    ("DT-P1", "I like to get revenge on authorities.", "Psychopathy", None),
    ("DT-P2", "I avoid dangerous situations.", "Psychopathy", "minus"),
    ("DT-P3", "Payback needs to be quick and nasty.", "Psychopathy", None),
    ("DT-P4", "People often say I’m out of control.", "Psychopathy", None),
    ("DT-P5", "It’s true that I can be mean to others.", "Psychopathy", None),
    ("DT-P6", "People who mess with me always regret it.", "Psychopathy", None),
    ("DT-P7", "I have never gotten into trouble with the law.", "Psychopathy", "minus"),
    ("DT-P8", "I enjoy having sex with people I hardly know.", "Psychopathy", None),
    ("DT-P9", "I’ll say anything to get what I want.", "Psychopathy", None),
]

DARK_TRIAD_ITEMS: list[InventoryItem] = [
    InventoryItem(id=item_id, text=text, type="likert_5", category=subscale, keyed=keyed)
    for item_id, text, subscale, keyed in _ITEMS
]
