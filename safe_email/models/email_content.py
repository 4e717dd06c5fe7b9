"""
EmailContent — transient input handed to the renderer per view.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class EmailContent:
    """Email body (HTML or plain text, untrusted) plus optional subject."""

    email_body: str
    subject: str = ""

    def __repr__(self) -> str:
        return f"EmailContent(subject={self.subject!r}, body_chars={len(self.email_body or '')})"
