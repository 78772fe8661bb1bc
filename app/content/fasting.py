"""
Fasting page content.

Static descriptive and encouragement text served by the store.  The
hourly encouragement list is indexed by elapsed whole hours; clients
clamp to the last message once the list is exhausted.
"""

from app.schemas.fasting import FastingContent, VerseReference

_DESCRIPTION = (
    "Fasting is a spiritual discipline of setting aside food for a season in order to seek God "
    "with an undivided heart. It is not a way to earn favour but a way to make room: every "
    "pang of hunger becomes a reminder to pray.\n\n"
    "Jesus assumed his followers would fast and taught them to do it quietly, before the Father "
    "who sees in secret (Matthew 6:16-18). The prophets called God's people to a fast that "
    "loosens the chains of injustice and shares bread with the hungry (Isaiah 58:6-9), and to "
    "return to the Lord with all their heart (Joel 2:12).\n\n"
    "Choose a goal that is realistic for your health and season of life. Drink water, rest when "
    "you need to, and end the fast early without guilt if your body asks you to."
)

_HOURLY_ENCOURAGEMENT = [
    "You have begun. Offer this fast to God and ask him to meet you in it.",
    "When hunger comes, let it turn your thoughts to prayer.",
    "Man shall not live by bread alone, but by every word that comes from the mouth of God.",
    "Take a moment to read a psalm slowly and let it become your prayer.",
    "Remember someone who is hungry today and pray for them by name.",
    "Keep going. His grace is sufficient for you; his power is made perfect in weakness.",
]

FASTING_CONTENT = FastingContent(
    description=_DESCRIPTION,
    reflection_prompt="What did God show you during this fast? What will you carry forward?",
    completion_encouragement="Well done. Your fast is complete; give thanks and break it gently.",
    scripture_references=[
        VerseReference(book="Matthew", chapter=6, verse_start=16, verse_end=18),
        VerseReference(book="Isaiah", chapter=58, verse_start=6, verse_end=9),
        VerseReference(book="Joel", chapter=2, verse_start=12, verse_end=12),
    ],
    hourly_encouragement=_HOURLY_ENCOURAGEMENT,
)
