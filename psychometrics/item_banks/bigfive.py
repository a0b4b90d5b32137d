"""IPIP-NEO-120 item bank: 120 Likert items, 4 per facet, 6 facets per domain."""

from __future__ import annotations

from psychometrics.schemas.inventory import InventoryItem

DOMAINS: tuple[str, ...] = ("N", "E", "O", "A", "C")

# (id, text, keyed, facet)
_ITEMS: list[tuple[str, str, str, str]] = [
    ("1", "Worry about things", "plus", "N1"),
    ("2", "Make friends easily", "plus", "E1"),
    ("3", "Have a vivid imagination", "plus", "O1"),
    ("4", "Trust others", "plus", "A1"),
    ("5", "Complete tasks successfully", "plus", "C1"),
    ("6", "Get angry easily", "plus", "N2"),
    ("7", "Love large parties", "plus", "E2"),
    ("8", "Believe in the importance of art", "plus", "O2"),
    ("9", "Use others for my own ends", "minus", "A2"),
    ("10", "Like to tidy up", "plus", "C2"),
    ("11", "Often feel blue", "plus", "N3"),
    ("12", "Take charge", "plus", "E3"),
    ("13", "Experience my emotions intensely", "plus", "O3"),
    ("14", "Love to help others", "plus", "A3"),
    ("15", "Keep my promises", "plus", "C3"),
    ("16", "Find it difficult to approach others", "plus", "N4"),
    ("17", "Am always busy", "plus", "E4"),
    ("18", "Prefer variety to routine", "plus", "O4"),
    ("19", "Love a good fight", "minus", "A4"),
    ("20", "Work hard", "plus", "C4"),
    ("21", "Go on binges", "plus", "N5"),
    ("22", "Love excitement", "plus", "E5"),
    ("23", "Love to read challenging material", "plus", "O5"),
    ("24", "Believe that I am better than others", "minus", "A5"),
    ("25", "Am always prepared", "plus", "C5"),
    ("26", "Panic easily", "plus", "N6"),
    ("27", "Radiate joy", "plus", "E6"),
    ("28", "Tend to vote for liberal political candidates", "plus", "O6"),
    ("29", "Sympathize with the homeless", "plus", "A6"),
    ("30", "Jump into things without thinking", "minus", "C6"),
    ("31", "Fear for the worst", "plus", "N1"),
    ("32", "Feel comfortable around people", "plus", "E1"),
    ("33", "Enjoy wild flights of fantasy", "plus", "O1"),
    ("34", "Believe that others have good intentions", "plus", "A1"),
    ("35", "Excel in what I do", "plus", "C1"),
    ("36", "Get irritated easily", "plus", "N2"),
    ("37", "Talk to a lot of different people at parties", "plus", "E2"),
    ("38", "See beauty in things that others might not notice", "plus", "O2"),
    ("39", "Cheat to get ahead", "minus", "A2"),
    ("40", "Often forget to put things back in their proper place", "minus", "C2"),
    ("41", "Dislike myself", "plus", "N3"),
    ("42", "Try to lead others", "plus", "E3"),
    ("43", "Feel others' emotions", "plus", "O3"),
    ("44", "Am concerned about others", "plus", "A3"),
    ("45", "Tell the truth", "plus", "C3"),
    ("46", "Am afraid to draw attention to myself", "plus", "N4"),
    ("47", "Am always on the go", "plus", "E4"),
    ("48", "Prefer to stick with things that I know", "minus", "O4"),
    ("49", "Yell at people", "minus", "A4"),
    ("50", "Do more than what's expected of me", "plus", "C4"),
    ("51", "Rarely overindulge", "minus", "N5"),
    ("52", "Seek adventure", "plus", "E5"),
    ("53", "Avoid philosophical discussions", "minus", "O5"),
    ("54", "Think highly of myself", "minus", "A5"),
    ("55", "Carry out my plans", "plus", "C5"),
    ("56", "Become overwhelmed by events", "plus", "N6"),
    ("57", "Have a lot of fun", "plus", "E6"),
    ("58", "Believe that there is no absolute right and wrong", "plus", "O6"),
    ("59", "Feel sympathy for those who are worse off than myself", "plus", "A6"),
    ("60", "Make rash decisions", "minus", "C6"),
    ("61", "Am afraid of many things", "plus", "N1"),
    ("62", "Avoid contacts with others", "minus", "E1"),
    ("63", "Love to daydream", "plus", "O1"),
    ("64", "Trust what people say", "plus", "A1"),
    ("65", "Handle tasks smoothly", "plus", "C1"),
    ("66", "Lose my temper", "plus", "N2"),
    ("67", "Prefer to be alone", "minus", "E2"),
    ("68", "Do not enjoy going to art museums", "minus", "O2"),
    ("69", "Take advantage of others", "minus", "A2"),
    ("70", "Leave a mess in my room", "minus", "C2"),
    ("71", "Am often down in the dumps", "plus", "N3"),
    ("72", "Take control of things", "plus", "E3"),
    ("73", "Rarely notice my emotional reactions", "minus", "O3"),
    ("74", "Am indifferent to the feelings of others", "minus", "A3"),
    ("75", "Break rules", "minus", "C3"),
    ("76", "Only feel comfortable with friends", "plus", "N4"),
    ("77", "Do a lot in my spare time", "plus", "E4"),
    ("78", "Dislike changes", "minus", "O4"),
    ("79", "Insult people", "minus", "A4"),
    ("80", "Do just enough work to get by", "minus", "C4"),
    ("81", "Easily resist temptations", "minus", "N5"),
    ("82", "Enjoy being reckless", "plus", "E5"),
    ("83", "Have difficulty understanding abstract ideas", "minus", "O5"),
    ("84", "Have a high opinion of myself", "minus", "A5"),
    ("85", "Waste my time", "minus", "C5"),
    ("86", "Feel that I'm unable to deal with things", "plus", "N6"),
    ("87", "Love life", "plus", "E6"),
    ("88", "Tend to vote for conservative political candidates", "minus", "O6"),
    ("89", "Am not interested in other people's problems", "minus", "A6"),
    ("90", "Rush into things", "minus", "C6"),
    ("91", "Get stressed out easily", "plus", "N1"),
    ("92", "Keep others at a distance", "minus", "E1"),
    ("93", "Like to get lost in thought", "plus", "O1"),
    ("94", "Distrust people", "minus", "A1"),
    ("95", "Know how to get things done", "plus", "C1"),
    ("96", "Am not easily annoyed", "minus", "N2"),
    ("97", "Avoid crowds", "minus", "E2"),
    ("98", "Do not enjoy going to art museums", "minus", "O2"),
    ("99", "Obstruct others' plans", "minus", "A2"),
    ("100", "Leave my belongings around", "minus", "C2"),
    ("101", "Feel comfortable with myself", "minus", "N3"),
    ("102", "Wait for others to lead the way", "minus", "E3"),
    ("103", "Don't understand people who get emotional", "minus", "O3"),
    ("104", "Take no time for others", "minus", "A3"),
    ("105", "Break my promises", "minus", "C3"),
    ("106", "Am not bothered by difficult social situations", "minus", "N4"),
    ("107", "Like to take it easy", "minus", "E4"),
    ("108", "Am attached to conventional ways", "minus", "O4"),
    ("109", "Get back at others", "minus", "A4"),
    ("110", "Put little time and effort into my work", "minus", "C4"),
    ("111", "Am able to control my cravings", "minus", "N5"),
    ("112", "Act wild and crazy", "plus", "E5"),
    ("113", "Am not interested in theoretical discussions", "minus", "O5"),
    ("114", "Boast about my virtues", "minus", "A5"),
    ("115", "Have difficulty starting tasks", "minus", "C5"),
    ("116", "Remain calm under pressure", "minus", "N6"),
    ("117", "Look at the bright side of life", "plus", "E6"),
    ("118", "Believe that we should be tough on crime", "minus", "O6"),
    ("119", "Try not to think about the needy", "minus", "A6"),
    ("120", "Act without thinking", "minus", "C6"),
]

BIG_FIVE_ITEMS: list[InventoryItem] = [
    InventoryItem(id=item_id, text=text, type="likert_5", keyed=keyed, category=facet)
    for item_id, text, keyed, facet in _ITEMS
]
