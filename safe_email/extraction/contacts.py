"""
Contact-info extractor — phones, email addresses, websites.

Every match produces an entry; an email's domain also shows up as a website.
"""
import re
from typing import List, Tuple

from safe_email.models.extracted import ContactItem

PHONE_PATTERN = re.compile(
    r"\+?1?\s*\(?(\d{3})\)?[-.\s]?(\d{3})[-.\s]?(\d{4})(?:\s*-?\s*ext\.?\s*(\d+))?",
    re.IGNORECASE,
)
EMAIL_PATTERN = re.compile(r"(?<![a-zA-Z0-9._%+-])([a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,})")
WEBSITE_PATTERN = re.compile(
    r"(?<![a-zA-Z0-9-])((?:https?://)?(?:www\.)?[a-zA-Z0-9-]+\.[a-zA-Z]{2,}(?:\.[a-zA-Z]{2,})?)",
    re.IGNORECASE,
)


def extract_contact_info(text: str) -> Tuple[ContactItem, ...]:
    """Phones first, then emails, then websites, each in text order."""
    if not isinstance(text, str) or not text:
        return ()

    contacts: List[ContactItem] = []

    for match in PHONE_PATTERN.finditer(text):
        ext = match.group(4)
        contacts.append(
            ContactItem(
                kind="phone",
                value=match.group(0).strip(),
                label=f"ext. {ext}" if ext else None,
            )
        )

    for match in EMAIL_PATTERN.finditer(text):
        contacts.append(ContactItem(kind="email", value=match.group(1)))

    for match in WEBSITE_PATTERN.finditer(text):
        contacts.append(ContactItem(kind="website", value=match.group(1)))

    return tuple(contacts)
