"""
HTML Sanitizer — allow-list policy for untrusted email bodies.

Output keeps only ALLOWED_TAGS, and on anchors only an ``href`` whose scheme
is in ALLOWED_PROTOCOLS (or relative). Everything else is stripped, stray
markup is escaped to text.

Fail-closed rule: if the parser raises, or the cleaned output does not pass
an independent re-check of the allow-list, the whole input is escaped to
inert text. This is the only stage that refuses output instead of degrading
to an empty result.
"""
import html
import logging
import re
from typing import Dict, List, Optional, Protocol, Sequence

import bleach

from safe_email.config.constants import (
    ALLOWED_ATTRIBUTES,
    ALLOWED_PROTOCOLS,
    ALLOWED_TAGS,
    FORBIDDEN_BLOCK_TAGS,
)
from safe_email.logging_utils import body_preview
from safe_email.metrics import record_fail_closed

logger = logging.getLogger(__name__)

_FORBIDDEN_OPEN_RE = re.compile(r"<(%s)\b" % "|".join(FORBIDDEN_BLOCK_TAGS), re.IGNORECASE)
_FORBIDDEN_CLOSE_RES = {
    tag: re.compile(r"</%s\s*>" % tag, re.IGNORECASE) for tag in FORBIDDEN_BLOCK_TAGS
}

# Quoted attribute values may contain '>' so they are consumed whole.
_TAG_RE = re.compile(r"<(/?)([a-zA-Z][a-zA-Z0-9]*)((?:\"[^\"]*\"|'[^']*'|[^'\">])*)>")
_ATTR_RE = re.compile(r"([^\s=/>\"']+)(?:\s*=\s*(\"[^\"]*\"|'[^']*'|[^\s>]+))?")
_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")
_URI_JUNK_RE = re.compile(r"[\x00-\x20\x7f]+")
# Never valid unescaped in a URI; bleach cannot serialize them stably.
_URI_BREAKOUT_RE = re.compile(r"[<>\"]")


class Sanitizer(Protocol):
    """Anything that turns untrusted HTML into allow-listed HTML."""

    def sanitize(self, markup: str) -> str:
        ...


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _href_is_safe(value: str, protocols: Sequence[str]) -> bool:
    if _URI_BREAKOUT_RE.search(html.unescape(value)):
        return False
    decoded = _URI_JUNK_RE.sub("", html.unescape(value))
    match = _SCHEME_RE.match(decoded)
    if match is None:
        return True
    return match.group(1).lower() in protocols


def strip_forbidden_blocks(markup: str) -> str:
    """
    Remove script/style/iframe/object/embed elements together with their content.

    Runs in linear time: each opener is matched with the next closer of the
    same name, and once a name has no closer left its remaining openers are
    kept for bleach to strip.
    """
    parts: List[str] = []
    pos = 0
    unclosed = set()
    while True:
        opener = _FORBIDDEN_OPEN_RE.search(markup, pos)
        if opener is None:
            break
        tag_end = markup.find(">", opener.end())
        if tag_end == -1:
            break
        name = opener.group(1).lower()
        closer = None
        if name not in unclosed:
            closer = _FORBIDDEN_CLOSE_RES[name].search(markup, tag_end + 1)
            if closer is None:
                unclosed.add(name)
        if closer is None:
            parts.append(markup[pos:tag_end + 1])
            pos = tag_end + 1
            continue
        parts.append(markup[pos:opener.start()])
        pos = closer.end()
    parts.append(markup[pos:])
    return "".join(parts)


def is_allow_listed(
    markup: str,
    tags: Sequence[str] = ALLOWED_TAGS,
    attributes: Optional[Dict[str, List[str]]] = None,
    protocols: Sequence[str] = ALLOWED_PROTOCOLS,
) -> bool:
    """
    Re-check cleaned markup against the allow-list.

    Inspects every tag left in *markup*: tag name, attribute names and the
    scheme of ``href`` values after entity decoding.
    """
    if attributes is None:
        attributes = ALLOWED_ATTRIBUTES

    for match in _TAG_RE.finditer(markup):
        closing, name, attrs = match.groups()
        name = name.lower()
        if name not in tags:
            return False
        if closing:
            continue
        allowed = attributes.get(name, [])
        for attr in _ATTR_RE.finditer(attrs):
            attr_name = attr.group(1).lower()
            if attr_name not in allowed:
                return False
            if attr_name == "href" and attr.group(2) is not None:
                if not _href_is_safe(_unquote(attr.group(2)), protocols):
                    return False
    return True


def fail_closed(raw: str) -> str:
    """Escape the whole input so nothing in it can be interpreted as markup."""
    return html.escape(raw, quote=False)


class BleachSanitizer:
    """Allow-list sanitizer backed by bleach."""

    def __init__(
        self,
        tags: Sequence[str] = ALLOWED_TAGS,
        attributes: Optional[Dict[str, List[str]]] = None,
        protocols: Sequence[str] = ALLOWED_PROTOCOLS,
    ) -> None:
        self.tags = list(tags)
        self.attributes = dict(attributes if attributes is not None else ALLOWED_ATTRIBUTES)
        self.protocols = list(protocols)

    def _allow_attribute(self, tag: str, name: str, value: str) -> bool:
        if name not in self.attributes.get(tag, []):
            return False
        if name == "href" and _URI_BREAKOUT_RE.search(value):
            return False
        return True

    def sanitize(self, markup: str) -> str:
        if not isinstance(markup, str) or not markup:
            return ""

        stripped = strip_forbidden_blocks(markup)

        try:
            cleaned = bleach.clean(
                stripped,
                tags=self.tags,
                attributes=self._allow_attribute,
                protocols=self.protocols,
                strip=True,
                strip_comments=True,
            )
        except Exception as e:
            logger.error("Sanitizer parser error on %s: %s", body_preview(markup), e)
            record_fail_closed("parser_error")
            return fail_closed(markup)

        if not is_allow_listed(cleaned, self.tags, self.attributes, self.protocols):
            logger.warning(
                "Sanitized output failed allow-list re-check, escaping %s",
                body_preview(markup),
            )
            record_fail_closed("allow_list_violation")
            return fail_closed(markup)

        return cleaned


default_sanitizer = BleachSanitizer()


def sanitize(raw_html: str, sanitizer: Optional[Sanitizer] = None) -> str:
    """
    Sanitize an untrusted email body for direct display.

    Args:
        raw_html: Email body, HTML or plain text. None/non-string yields "".
        sanitizer: Alternative Sanitizer implementation. Its output goes
                   through the same allow-list re-check as the default.

    Returns:
        HTML containing only allow-listed tags and attributes.
    """
    if not isinstance(raw_html, str) or not raw_html:
        return ""

    if sanitizer is None or sanitizer is default_sanitizer:
        return default_sanitizer.sanitize(raw_html)

    try:
        cleaned = sanitizer.sanitize(raw_html)
    except Exception as e:
        logger.error("Sanitizer %s raised: %s", type(sanitizer).__name__, e)
        record_fail_closed("parser_error")
        return fail_closed(raw_html)

    if not isinstance(cleaned, str) or not is_allow_listed(cleaned):
        record_fail_closed("allow_list_violation")
        return fail_closed(raw_html)
    return cleaned
