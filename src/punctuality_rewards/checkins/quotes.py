from __future__ import annotations

import random
from typing import Optional

from ..core.enums import CheckInType
from .model import Quote

QUOTES: dict[CheckInType, tuple[Quote, ...]] = {
    CheckInType.EARLY: (
        Quote("The early bird catches the worm!", "William Camden"),
        Quote("Well begun is half done.", "Aristotle"),
        Quote("Early to bed and early to rise makes a man healthy, wealthy, and wise.", "Benjamin Franklin"),
    ),
    CheckInType.ONTIME: (
        Quote("Punctuality is the politeness of kings.", "Louis XVIII"),
        Quote("Better three hours too soon than a minute too late.", "William Shakespeare"),
        Quote("Time is the most valuable thing a man can spend.", "Theophrastus"),
    ),
    CheckInType.LATE: (
        Quote("It's never too late to be what you might have been.", "George Eliot"),
        Quote("Tomorrow is the first day of the rest of your life.", "Abbie Hoffman"),
        Quote("Every moment is a fresh beginning.", "T.S. Eliot"),
    ),
}


def pick_quote(check_in_type: CheckInType, rng: Optional[random.Random] = None, *, quotes=None) -> Optional[Quote]:
    """Uniformly random quote for the check-in type, or None when there is none."""
    choices = (QUOTES if quotes is None else quotes).get(check_in_type)
    if not choices:
        return None
    return (rng or random).choice(choices)
