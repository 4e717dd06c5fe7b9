"""
Log-safe renderings of email content.

Email bodies and copied values carry customer PII (names, phones, booking
codes), so nothing from an email is logged verbatim.
"""
from safe_email.config import settings


def mask_sensitive(value: str, visible_chars: int = 4) -> str:
    """Mask all but the last *visible_chars* characters."""
    if not settings.PII_REDACTION_ENABLED:
        return value
    if not value or len(value) <= visible_chars:
        return "***"
    return "*" * (len(value) - visible_chars) + value[-visible_chars:]


def body_preview(body: str) -> str:
    """Short, single-line description of a body for debug logs."""
    if not isinstance(body, str) or not body:
        return "<empty>"
    if settings.PII_REDACTION_ENABLED:
        return f"<{len(body)} chars redacted>"
    preview = " ".join(body.split())
    if len(preview) > settings.MAX_BODY_LOG_CHARS:
        preview = preview[: settings.MAX_BODY_LOG_CHARS] + "…"
    return preview
