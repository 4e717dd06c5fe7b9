"""
Signature-block extractor — sender identity from the end of the message.

Only the last SIGNATURE_WINDOW_LINES non-empty lines are inspected. Each
line is tested in a fixed order and every field keeps its first match:

    name     short "Capitalized Words" line without '@' or 'www'
    title    mentions expert / agent / manager
    phone    NANP phone number, stored as a one-element tuple
    email    address pattern
    website  bare domain pattern
    address  mentions avenue / street / a known city

A line taken as name or title is not tested for the other fields. These are
heuristics, so short capitalized phrases ("Best Regards") can be taken as
the name.
"""
import re
from typing import Dict, List, Optional

from safe_email.config.constants import (
    ADDRESS_KEYWORDS,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    SIGNATURE_WINDOW_LINES,
    TITLE_KEYWORDS,
)
from safe_email.models.extracted import BusinessInfo

NAME_PATTERN = re.compile(r"^[A-Z][a-z]+(?: [A-Z][a-z]+)*$")
PHONE_PATTERN = re.compile(r"\+?1?\s*\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
EMAIL_PATTERN = re.compile(r"(?<![a-zA-Z0-9._%+-])([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})")
WEBSITE_PATTERN = re.compile(r"(?<![a-zA-Z0-9-])((?:www\.)?[a-zA-Z0-9-]+\.[a-zA-Z]{2,}(?:\.[a-zA-Z]{2,})?)")


def signature_lines(text: str, window: int = SIGNATURE_WINDOW_LINES) -> List[str]:
    """Trimmed non-empty lines from the tail of *text*."""
    lines = [line.strip() for line in text.split("\n") if line.strip()]
    return lines[-window:]


def _looks_like_name(line: str) -> bool:
    return (
        NAME_MIN_LENGTH <= len(line) <= NAME_MAX_LENGTH
        and "@" not in line
        and "www" not in line
        and NAME_PATTERN.match(line) is not None
    )


def extract_business_signature(text: str) -> Optional[BusinessInfo]:
    """
    Parse the trailing signature block.

    Args:
        text: Normalized email text.

    Returns:
        BusinessInfo with at least one field set, or None.
    """
    if not isinstance(text, str) or not text:
        return None

    fields: Dict[str, object] = {}

    for line in signature_lines(text):
        lower = line.lower()

        if "name" not in fields and _looks_like_name(line):
            fields["name"] = line
            continue

        if "title" not in fields and any(k in lower for k in TITLE_KEYWORDS):
            fields["title"] = line
            continue

        if "phone" not in fields:
            phone = PHONE_PATTERN.search(line)
            if phone:
                fields["phone"] = (phone.group(0).strip(),)

        if "email" not in fields:
            email = EMAIL_PATTERN.search(line)
            if email:
                fields["email"] = email.group(1)

        if "website" not in fields:
            website = WEBSITE_PATTERN.search(line)
            if website:
                fields["website"] = website.group(1)

        if "address" not in fields and any(k in lower for k in ADDRESS_KEYWORDS):
            fields["address"] = line

    info = BusinessInfo(**fields)
    if info.is_empty():
        return None
    return info
