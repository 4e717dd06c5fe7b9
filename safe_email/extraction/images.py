"""
Image extractor — <img> tags from the original, pre-sanitization markup.

Sanitization drops <img> entirely, so this is the one extractor that reads
the raw body. It only pattern-matches attribute text; the markup is never
parsed into a DOM or rendered.
"""
import re
from typing import Iterator, List, Optional, Tuple

from safe_email.config.constants import (
    ATTACHMENT_SRC_KEYWORDS,
    HEADER_SRC_KEYWORDS,
    SIGNATURE_MESSAGE_KEYWORD,
    SIGNATURE_SRC_KEYWORDS,
)
from safe_email.models.extracted import EmailImage, ImageRole

IMG_OPEN_PATTERN = re.compile(r"<img\b", re.IGNORECASE)


def _attr_pattern(name: str) -> re.Pattern:
    return re.compile(rf"{name}=[\"']([^\"']+)[\"']", re.IGNORECASE)


SRC_PATTERN = _attr_pattern("src")
ALT_PATTERN = _attr_pattern("alt")
WIDTH_PATTERN = _attr_pattern("width")
HEIGHT_PATTERN = _attr_pattern("height")


def _attr(pattern: re.Pattern, tag: str) -> Optional[str]:
    match = pattern.search(tag)
    return match.group(1) if match else None


def img_tags(markup: str) -> Iterator[str]:
    """Yield each <img ...> tag; an unterminated tag ends the scan."""
    pos = 0
    while True:
        opener = IMG_OPEN_PATTERN.search(markup, pos)
        if opener is None:
            return
        end = markup.find(">", opener.end())
        if end == -1:
            return
        yield markup[opener.start():end + 1]
        pos = end + 1


def _role(src: str, mentions_signature: bool) -> ImageRole:
    src = src.lower()
    if mentions_signature or any(k in src for k in SIGNATURE_SRC_KEYWORDS):
        return "signature"
    if any(k in src for k in HEADER_SRC_KEYWORDS):
        return "header"
    if any(k in src for k in ATTACHMENT_SRC_KEYWORDS):
        return "attachment"
    return "content"


def classify_image_role(src: str, message: str) -> ImageRole:
    """First matching rule wins: signature, header, attachment, content."""
    return _role(src, SIGNATURE_MESSAGE_KEYWORD in message.lower())


def extract_images(raw_markup: str) -> Tuple[EmailImage, ...]:
    """
    Collect every <img> with a non-empty src.

    Args:
        raw_markup: Original email body, before sanitization.

    Returns:
        EmailImages in document order.
    """
    if not isinstance(raw_markup, str) or not raw_markup:
        return ()

    mentions_signature = SIGNATURE_MESSAGE_KEYWORD in raw_markup.lower()
    images: List[EmailImage] = []
    for tag in img_tags(raw_markup):
        src = _attr(SRC_PATTERN, tag)
        if not src:
            continue
        images.append(
            EmailImage(
                src=src,
                alt=_attr(ALT_PATTERN, tag),
                width=_attr(WIDTH_PATTERN, tag),
                height=_attr(HEIGHT_PATTERN, tag),
                role=_role(src, mentions_signature),
            )
        )
    return tuple(images)
