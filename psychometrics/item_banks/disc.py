"""DISC item bank: 28 forced-choice groups of four quadrant-tagged words."""

from __future__ import annotations

from psychometrics.schemas.inventory import DISCWord, InventoryItem

QUADRANTS: tuple[str, ...] = ("D", "I", "S", "C")

DISC_PROMPT_TEXT = (
    "Select the word that is MOST like you and the word that is LEAST like you."
)

# Some groups carry two words from one quadrant; that is how the published
# word lists are laid out and the scorer handles it without special casing.
_GROUPS: list[tuple[str, tuple[tuple[str, str], ...]]] = [
    ("disc_1", (("Charismatic", "I"), ("Assertive", "D"), ("Patient", "S"), ("Analytical", "C"))),
    ("disc_2", (("Enthusiastic", "I"), ("Decisive", "D"), ("Methodical", "C"), ("Supportive", "S"))),
    ("disc_3", (("Competitive", "D"), ("Reliable", "S"), ("Outgoing", "I"), ("Detail-oriented", "C"))),
    ("disc_4", (("Independent", "D"), ("Precise", "C"), ("Calm", "S"), ("Persuasive", "I"))),
    ("disc_5", (("Loyal", "S"), ("Sociable", "I"), ("Organized", "C"), ("Driven", "D"))),
    ("disc_6", (("Bold", "D"), ("Inspiring", "I"), ("Understanding", "S"), ("Systematic", "C"))),
    ("disc_7", (("Optimistic", "I"), ("Forceful", "D"), ("Steady", "S"), ("Exact", "C"))),
    ("disc_8", (("Thorough", "C"), ("Gentle", "S"), ("Talkative", "I"), ("Self-assured", "D"))),
    ("disc_9", (("Resolute", "D"), ("Energetic", "I"), ("Meticulous", "C"), ("Dependable", "S"))),
    ("disc_10", (("Reassuring", "S"), ("Friendly", "I"), ("Commanding", "D"), ("Rigorous", "C"))),
    ("disc_11", (("Engaging", "I"), ("Determined", "D"), ("Consistent", "S"), ("Careful", "C"))),
    ("disc_12", (("Trustworthy", "S"), ("Lively", "I"), ("Accurate", "C"), ("Strategic", "D"))),
    ("disc_13", (("Authoritative", "D"), ("Supportive", "S"), ("Outgoing", "I"), ("Structured", "C"))),
    ("disc_14", (("Persuasive", "I"), ("Exacting", "C"), ("Goal-oriented", "D"), ("Adaptable", "S"))),
    ("disc_15", (("Calm", "S"), ("Enthusiastic", "I"), ("Direct", "D"), ("Planned", "C"))),
    ("disc_16", (("Sociable", "I"), ("Reliable", "S"), ("Impactful", "D"), ("Systematic", "C"))),
    ("disc_17", (("Vibrant", "I"), ("Self-confident", "D"), ("Thorough", "C"), ("Steady", "S"))),
    ("disc_18", (("Consistent", "C"), ("Upbeat", "I"), ("Patient", "S"), ("Unyielding", "D"))),
    ("disc_19", (("Adventurous", "D"), ("Friendly", "I"), ("Disciplined", "C"), ("Motivating", "I"))),
    ("disc_20", (("Tenacious", "D"), ("Detailed", "C"), ("Understanding", "S"), ("Expressive", "I"))),
    ("disc_21", (("Loyal", "S"), ("Dynamic", "I"), ("Warm", "S"), ("Logical", "C"))),
    ("disc_22", (("Composed", "C"), ("Intuitive", "I"), ("Precise", "C"), ("Radiant", "I"))),
    ("disc_23", (("Inviting", "I"), ("Steadfast", "S"), ("Bold", "D"), ("Detailed", "C"))),
    ("disc_24", (("Stable", "S"), ("Restless", "D"), ("Observant", "C"), ("Jovial", "I"))),
    ("disc_25", (("Tactful", "C"), ("Willing", "S"), ("Restless", "D"), ("Aggressive", "D"))),
    ("disc_26", (("Pioneering", "D"), ("Amiable", "S"), ("Good-natured", "I"), ("Respectful", "C"))),
    ("disc_27", (("Accurate", "C"), ("Enthusiastic", "I"), ("Decisive", "D"), ("Cooperative", "S"))),
    ("disc_28", (("Forceful", "D"), ("Enthusiastic", "I"), ("Patient", "S"), ("Systematic", "C"))),
]

DISC_ITEMS: list[InventoryItem] = [
    InventoryItem(
        id=item_id,
        text=DISC_PROMPT_TEXT,
        type="choice_binary",
        words=[DISCWord(text=text, quadrant=quadrant) for text, quadrant in words],
    )
    for item_id, words in _GROUPS
]
