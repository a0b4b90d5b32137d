"""OEJTS 1.2 item bank: 32 bipolar items, 8 per dimension.

A response of 1 endorses ``left_text`` and 5 endorses ``right_text``; the
right pole is the first letter of each dimension code's partner (E, N, T, P).
"""

from __future__ import annotations

from psychometrics.schemas.inventory import InventoryItem

DIMENSIONS: tuple[str, ...] = ("IE", "SN", "TF", "JP")

# (id, dimension, label, left pole, right pole)
_ITEMS: list[tuple[str, str, str, str, str]] = [
    ("mbti_1", "IE", "Social Interaction", "Needs time alone", "Bored by time alone"),
    ("mbti_2", "IE", "Energy Source", "Mellow", "Energetic"),
    ("mbti_3", "IE", "Group Work", "Works best alone", "Works best in groups"),
    ("mbti_4", "IE", "Parties", "Gets worn out by parties", "Gets fired up by parties"),
    ("mbti_5", "IE", "Conversation", "Listens more", "Talks more"),
    ("mbti_6", "IE", "Going Out", "Stays at home", "Goes out on the town"),
    ("mbti_7", "IE", "Communication Volume", "Finds it difficult to yell very loudly", "Yelling to others when they are far away comes naturally"),
    ("mbti_8", "IE", "Public Speaking", "Avoids public speaking", "Likes to perform in front of other people"),
    ("mbti_9", "SN", "Perspective", "Accepts things as they are", "Unsatisfied with the way things are"),
    ("mbti_10", "SN", "Question Style", "Prefer to take multiple choice test", "Prefer essay answers"),
    ("mbti_11", "SN", "Time Focus", "Focused on the present", "Focused on the future"),
    ("mbti_12", "SN", "Social Fit", "Fits in", "Stands out"),
    ("mbti_13", "SN", "Storytelling", "Tell people what happened", "Tell people what it meant"),
    ("mbti_14", "SN", "Viewpoint", "Wants the details", "Wants the big picture"),
    ("mbti_15", "SN", "Verification", "Empirical", "Theoretical"),
    ("mbti_16", "SN", "Curiosity", "Likes to know \"who?\", \"what?\", \"when?\"", "Likes to know \"why?\""),
    ("mbti_17", "TF", "Belief", "Wants to believe", "Sceptical"),
    ("mbti_18", "TF", "Mindset", "Thinks \"robotic\" is an insult", "Strives to have a mechanical mind"),
    ("mbti_19", "TF", "Sensitivity", "Easily hurt", "Thick-skinned"),
    ("mbti_20", "TF", "Desire", "Wants their love", "Wants people's respect"),
    ("mbti_21", "TF", "Skill", "Wants to be good at fixing people", "Wants to be good at fixing things"),
    ("mbti_22", "TF", "Decision Making", "Follows the heart", "Follows the head"),
    ("mbti_23", "TF", "Morality", "Bases morality on compassion", "Bases morality on justice"),
    ("mbti_24", "TF", "Emotion", "Values emotions", "Uncomfortable with emotions"),
    ("mbti_25", "JP", "Organization", "Makes lists", "Relies on memory"),
    ("mbti_26", "JP", "Tidiness", "Keeps a clean room", "Just puts stuff wherever"),
    ("mbti_27", "JP", "Order", "Organized", "Chaotic"),
    ("mbti_28", "JP", "Planning", "Plans far ahead", "Plans at the last minute"),
    ("mbti_29", "JP", "Commitment", "Commits", "Keeps options open"),
    ("mbti_30", "JP", "Execution", "Gets work done right away", "Procrastinates"),
    ("mbti_31", "JP", "Preparation", "Prepares", "Improvises"),
    ("mbti_32", "JP", "Work Style", "Works hard", "Plays hard"),
]

MBTI_ITEMS: list[InventoryItem] = [
    InventoryItem(
        id=item_id,
        text=label,
        type="likert_5",
        dimension=dimension,
        left_text=left,
        right_text=right,
    )
    for item_id, dimension, label, left, right in _ITEMS
]
