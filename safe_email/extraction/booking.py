"""
Booking-reference extractor — PNR-style codes.

Three passes, in order:
    1. code after an explicit keyword (EK #, Booking, PNR, Reference)
    2. any bare 6-letter uppercase token
    3. 5-7 character code wrapped in single asterisks (bold in normalized text)

Pass 2 is deliberately broad and also catches incidental capitalized words
such as "MIAMI"; callers get recall over precision here.
"""
import re
from typing import List, Tuple

from safe_email.config.constants import BOOKING_KEYWORDS

_KEYWORD_ALT = "|".join(re.escape(k) for k in BOOKING_KEYWORDS)

# Keyword matching is case-insensitive, the code itself must be uppercase.
BOOKING_PATTERNS = [
    re.compile(rf"(?i:{_KEYWORD_ALT}):\s*([A-Z0-9]{{4,8}})"),
    re.compile(r"\b([A-Z]{6})\b"),
    re.compile(r"\*([A-Z0-9]{5,7})\*"),
]


def extract_booking_references(text: str) -> Tuple[str, ...]:
    """Return distinct booking references in first-seen order."""
    if not isinstance(text, str) or not text:
        return ()

    refs: List[str] = []
    seen = set()
    for pattern in BOOKING_PATTERNS:
        for match in pattern.finditer(text):
            ref = match.group(1)
            if ref and ref not in seen:
                seen.add(ref)
                refs.append(ref)
    return tuple(refs)
