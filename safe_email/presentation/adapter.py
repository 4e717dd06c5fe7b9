"""
Presentation Adapter — one read-only view per email body.

``EmailViewAdapter.render()`` sanitizes and extracts once per distinct body
(LRU-memoized), so re-renders and raw/enhanced toggles reuse the same
EmailView. Display mode and section collapse state live in ViewState, owned
by the caller and passed in as plain data.
"""
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, Optional, Tuple

from safe_email.config import settings
from safe_email.config.constants import SECTIONS
from safe_email.extraction.pipeline import extract_email_data
from safe_email.models.email_content import EmailContent
from safe_email.models.extracted import ExtractedData
from safe_email.models.view_io import DisplayMode, RenderRequest
from safe_email.presentation.clipboard import (
    Clipboard,
    LoggingNotifier,
    MemoryClipboard,
    Notifier,
    copy_to_clipboard,
)
from safe_email.presentation.output_builder import build_presentation
from safe_email.sanitization.sanitizer import Sanitizer, sanitize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmailView:
    """Sanitized HTML for display plus the structured extraction result."""

    sanitized_html: str
    extracted: ExtractedData
    subject: str = ""

    def to_dict(self) -> dict:
        return {
            "sanitizedHtml": self.sanitized_html,
            "subject": self.subject,
            "extracted": self.extracted.to_dict(),
        }


@dataclass
class ViewState:
    """UI state: display mode and per-section expanded flags."""

    display_mode: DisplayMode = DisplayMode.ENHANCED
    expanded: Dict[str, bool] = field(default_factory=lambda: {s: True for s in SECTIONS})

    def toggle_display_mode(self) -> DisplayMode:
        self.display_mode = (
            DisplayMode.ENHANCED if self.display_mode == DisplayMode.RAW else DisplayMode.RAW
        )
        return self.display_mode

    def toggle_section(self, section: str) -> bool:
        if section not in SECTIONS:
            raise ValueError(f"Unknown section '{section}', expected one of {SECTIONS}")
        self.expanded[section] = not self.expanded.get(section, True)
        return self.expanded[section]

    def is_expanded(self, section: str) -> bool:
        return self.expanded.get(section, True)


class EmailViewAdapter:
    """Builds EmailViews and performs copy actions for the email panel."""

    def __init__(
        self,
        sanitizer: Optional[Sanitizer] = None,
        clipboard: Optional[Clipboard] = None,
        notifier: Optional[Notifier] = None,
        cache_size: Optional[int] = None,
    ) -> None:
        self.sanitizer = sanitizer
        self.clipboard = clipboard if clipboard is not None else MemoryClipboard()
        self.notifier = notifier if notifier is not None else LoggingNotifier()
        if cache_size is None:
            cache_size = settings.VIEW_CACHE_SIZE
        self._analyse = lru_cache(maxsize=cache_size)(self._compute)

    def _compute(self, email_body: str) -> Tuple[str, ExtractedData]:
        sanitized = sanitize(email_body, self.sanitizer)
        extracted = extract_email_data(email_body, self.sanitizer, sanitized_html=sanitized)
        return sanitized, extracted

    def render(self, email: EmailContent | str, subject: str = "") -> EmailView:
        """
        Sanitized HTML + extracted data for an email body.

        Args:
            email: EmailContent, or the raw body string.
            subject: Subject when *email* is a plain string.
        """
        if isinstance(email, EmailContent):
            body, subject = email.email_body, email.subject
        else:
            body = email
        if not isinstance(body, str):
            body = ""

        sanitized, extracted = self._analyse(body)
        return EmailView(sanitized_html=sanitized, extracted=extracted, subject=subject or "")

    def present(self, request: RenderRequest | dict, state: Optional[ViewState] = None) -> dict:
        """
        Presentation payload for a render request.

        Raises:
            pydantic.ValidationError: if *request* is a dict with an invalid
                display mode.
        """
        if not isinstance(request, RenderRequest):
            request = RenderRequest.model_validate(request)
        if state is None:
            state = ViewState(display_mode=request.display_mode)

        view = self.render(request.to_content())
        return build_presentation(view, state)

    def copy(self, value: str, label: str) -> bool:
        """Copy an extracted value, notifying success or failure."""
        return copy_to_clipboard(value, label, self.clipboard, self.notifier)

    def cache_info(self):
        return self._analyse.cache_info()

    def clear_cache(self) -> None:
        self._analyse.cache_clear()
