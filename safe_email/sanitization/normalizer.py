"""
Plain-Text Normalizer — HTML body to pattern-matchable text.

The output is only ever used as extraction input, never displayed, so it
keeps a few structural hints as lightweight inline markup:

    <strong>/<b>  → **text**
    <em>/<i>      → *text*
    <a href=u>t   → t (u)
    </p>          → blank line
    <br>, </div>  → line break

Whitespace is then collapsed: no run of 3+ newlines, no run of spaces or
tabs, each line trimmed.
"""
import logging
import re
from typing import Callable, List, Optional, Pattern, Tuple

from safe_email.config.constants import HTML_ENTITIES

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE

# Applied in order. Tag names are word-bounded so <img> never reads as <i>,
# <pre> never as <p>, <br> never as <b>.
_BLOCK_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"<br\b\s*/?>", _FLAGS), "\n"),
    (re.compile(r"</p\s*>", _FLAGS), "\n\n"),
    (re.compile(r"<p\b[^>]*>", _FLAGS), ""),
    (re.compile(r"</div\s*>", _FLAGS), "\n"),
    (re.compile(r"<div\b[^>]*>", _FLAGS), ""),
]

_HREF_RE = re.compile(r"href=[\"']([^\"']*)[\"']", _FLAGS)


def _emphasis(marker: str) -> Callable[[str, str], Optional[str]]:
    return lambda tag, inner: f"{marker}{inner}{marker}"


def _link(tag: str, inner: str) -> Optional[str]:
    href = _HREF_RE.search(tag)
    if href is None:
        return None
    return f"{inner} ({href.group(1)})"


# Opener, closer, rendering. Content never spans a line break.
_INLINE_RULES = [
    (re.compile(r"<strong\b", _FLAGS), re.compile(r"</strong\s*>", _FLAGS), _emphasis("**")),
    (re.compile(r"<b\b", _FLAGS), re.compile(r"</b\s*>", _FLAGS), _emphasis("**")),
    (re.compile(r"<em\b", _FLAGS), re.compile(r"</em\s*>", _FLAGS), _emphasis("*")),
    (re.compile(r"<i\b", _FLAGS), re.compile(r"</i\s*>", _FLAGS), _emphasis("*")),
    (re.compile(r"<a\b", _FLAGS), re.compile(r"</a\s*>", _FLAGS), _link),
]

_ANY_TAG_RE = re.compile(r"<[^>]+>")

_ENTITY_RE = re.compile("|".join(re.escape(e) for e in HTML_ENTITIES), _FLAGS)

_BLANK_LINES_RE = re.compile(r"\n[ \t]*\n\s*\n+")
_INLINE_SPACE_RE = re.compile(r"[ \t]+")
_LINE_EDGES_RE = re.compile(r"^[ \t]+|[ \t]+$", re.MULTILINE)


def _replace_inline(
    text: str,
    opener: Pattern[str],
    closer: Pattern[str],
    render: Callable[[str, str], Optional[str]],
) -> str:
    """
    Replace each opener...closer pair on one line with its rendering.

    Linear in the length of *text*: a line known to hold no closer past a
    point is not searched again, and the last closer found is reused.
    """
    parts: List[str] = []
    pos = scan = 0
    dead_line = -1
    close = None
    while True:
        match = opener.search(text, scan)
        if match is None:
            break
        tag_end = text.find(">", match.end())
        if tag_end == -1:
            break
        line_end = text.find("\n", tag_end + 1)
        if line_end == -1:
            line_end = len(text)

        if close is None or close.start() <= tag_end or close.end() > line_end:
            close = None
            if line_end != dead_line:
                close = closer.search(text, tag_end + 1, line_end)
                if close is None:
                    dead_line = line_end

        replacement = None
        if close is not None:
            replacement = render(text[match.start():tag_end + 1], text[tag_end + 1:close.start()])
        if replacement is None:
            scan = tag_end + 1
            continue

        parts.append(text[pos:match.start()])
        parts.append(replacement)
        pos = scan = close.end()
        close = None
    parts.append(text[pos:])
    return "".join(parts)


def _decode_entities(text: str) -> str:
    return _ENTITY_RE.sub(lambda m: HTML_ENTITIES[m.group(0).lower()], text)


def collapse_whitespace(text: str) -> str:
    """Collapse blank-line runs and inline spaces, trim every line."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _INLINE_SPACE_RE.sub(" ", text)
    text = _LINE_EDGES_RE.sub("", text)
    text = _BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()


def normalize(html: str) -> str:
    """
    Convert sanitized (or raw) HTML into normalized plain text.

    Never raises: malformed markup is handled by the tag-stripping pass, and
    any unexpected failure returns the input unchanged so extraction can
    still run on something.

    Args:
        html: Email body markup. None/non-string yields "".

    Returns:
        Tag-free text with collapsed whitespace.
    """
    if not isinstance(html, str) or not html:
        return ""

    try:
        # Every tag match ends in '>', nothing after the last one can match.
        head_end = html.rfind(">") + 1
        text, tail = html[:head_end], html[head_end:]
        for pattern, replacement in _BLOCK_RULES:
            text = pattern.sub(replacement, text)
        for opener, closer, render in _INLINE_RULES:
            text = _replace_inline(text, opener, closer, render)
        text = _ANY_TAG_RE.sub(" ", text) + tail
        text = _decode_entities(text)
        return collapse_whitespace(text)
    except Exception as e:
        logger.error("Error normalizing email content: %s", e)
        return html
