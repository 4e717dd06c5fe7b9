"""
Extraction Pipeline — orchestrates Sanitize + Normalize + Extractors.

Pipeline:
    1. Sanitize the raw body (allow-list)
    2. Normalize sanitized HTML to plain text
    3. Financial / booking / contact / signature extractors on the text
    4. Image extractor on the original raw body
    5. Output contract validation

Every stage runs inside its own failure boundary: an exception is logged,
counted, and the stage falls back to its empty result, so one broken
extractor never blanks out the rest of the view.
"""
import logging
from typing import Callable, Optional, TypeVar

from safe_email.extraction.booking import extract_booking_references
from safe_email.extraction.contacts import extract_contact_info
from safe_email.extraction.financial import extract_financial_data
from safe_email.extraction.images import extract_images
from safe_email.extraction.signature import extract_business_signature
from safe_email.extraction.validation import validate_extracted_data
from safe_email.logging_utils import body_preview
from safe_email.metrics import (
    record_contract_violation,
    record_items_extracted,
    record_stage_failure,
    timed_stage,
)
from safe_email.models.extracted import ExtractedData
from safe_email.sanitization.normalizer import normalize
from safe_email.sanitization.sanitizer import Sanitizer, sanitize

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_stage(stage: str, func: Callable[[str], T], arg: str, default: T) -> T:
    """Run one stage, returning *default* if it raises."""
    try:
        with timed_stage(stage):
            return func(arg)
    except Exception:
        logger.exception("Extraction stage '%s' failed, using default", stage)
        record_stage_failure(stage)
        return default


def normalized_text(
    content: str,
    sanitizer: Optional[Sanitizer] = None,
    sanitized_html: Optional[str] = None,
) -> str:
    """Normalized plain-text view of *content* used as extraction input."""
    sanitized = sanitized_html
    if sanitized is None:
        sanitized = run_stage("sanitize", lambda c: sanitize(c, sanitizer), content, "")
    return run_stage("normalize", normalize, sanitized, "")


def extract_email_data(
    content: str,
    sanitizer: Optional[Sanitizer] = None,
    sanitized_html: Optional[str] = None,
) -> ExtractedData:
    """
    Full extraction pipeline for one email body.

    Args:
        content: Raw email body (HTML or plain text, untrusted).
        sanitizer: Optional Sanitizer used to produce the normalizer input.
        sanitized_html: Already sanitized body, skips the sanitize stage.

    Returns:
        ExtractedData; ExtractedData.empty() for None/empty input.
    """
    if not isinstance(content, str) or not content:
        return ExtractedData.empty()

    text = normalized_text(content, sanitizer, sanitized_html)

    data = ExtractedData(
        financial_data=run_stage("financial", extract_financial_data, text, ()),
        booking_refs=run_stage("booking", extract_booking_references, text, ()),
        contact_info=run_stage("contacts", extract_contact_info, text, ()),
        business_info=run_stage("signature", extract_business_signature, text, None),
        images=run_stage("images", extract_images, content, ()),
    )

    record_items_extracted("financial", len(data.financial_data))
    record_items_extracted("booking", len(data.booking_refs))
    record_items_extracted("contacts", len(data.contact_info))
    record_items_extracted("signature", 1 if data.business_info else 0)
    record_items_extracted("images", len(data.images))

    result = validate_extracted_data(data)
    if not result.valid:
        logger.warning("Extraction output violates contract: %s", result.errors)
        record_contract_violation()
    for warning in result.warnings:
        logger.debug("Extraction warning: %s", warning)

    logger.debug(
        "Extracted %d items from %s", data.item_count, body_preview(content)
    )
    return data
