"""
Presentation payload builder.

Converts an EmailView plus the UI-owned ViewState into the dict the email
panel renders: raw mode carries only the sanitized HTML, enhanced mode adds
one section per non-empty extraction result with display values and the
value/label pair each copy button sends.
"""
from typing import List, Optional

from safe_email.config.constants import SECTION_TITLES
from safe_email.models.extracted import BusinessInfo, ExtractedData
from safe_email.models.view_io import DisplayMode
from safe_email.presentation.formatting import (
    amount_text,
    format_currency,
    format_phone_number,
    image_alt,
    website_href,
)


def _copy(value: str, label: str) -> dict:
    return {"value": value, "label": label}


def _signature_items(info: BusinessInfo) -> dict:
    body: dict = {
        "name": info.name,
        "title": info.title,
        "company": info.company,
        "phones": [
            {"display": format_phone_number(p), "copy": _copy(p, "Phone number")}
            for p in info.phone
        ],
        "email": None,
        "website": None,
        "address": info.address,
    }
    if info.email:
        body["email"] = {"display": info.email, "copy": _copy(info.email, "Email")}
    if info.website:
        body["website"] = {"display": info.website, "href": website_href(info.website)}
    return body


def build_sections(extracted: ExtractedData, expanded: dict) -> List[dict]:
    """
    Enhanced-mode sections, in display order, omitting empty ones.

    Args:
        extracted: Extraction result.
        expanded: section name → expanded flag (from ViewState).
    """
    sections: List[dict] = []

    def add(key: str, items, title: Optional[str] = None) -> None:
        sections.append({
            "key": key,
            "title": title or SECTION_TITLES[key],
            "expanded": expanded.get(key, True),
            "items": items,
        })

    if extracted.business_info and not extracted.business_info.is_empty():
        add("signature", _signature_items(extracted.business_info))

    if extracted.financial_data:
        add("financial", [
            {
                "kind": f.kind,
                "display": format_currency(f.amount, f.currency),
                "label": f.label,
                "copy": _copy(amount_text(f.amount), f"{f.kind} amount"),
            }
            for f in extracted.financial_data
        ])

    if extracted.booking_refs:
        add("booking", [
            {"display": ref, "copy": _copy(ref, "Booking reference")}
            for ref in extracted.booking_refs
        ])

    if extracted.images:
        add(
            "images",
            [
                {
                    "src": img.src,
                    "alt": image_alt(img.alt, i),
                    "role": img.role,
                    "width": img.width,
                    "height": img.height,
                    "copy": _copy(img.src, "Image URL"),
                }
                for i, img in enumerate(extracted.images)
            ],
            title=f"{SECTION_TITLES['images']} ({len(extracted.images)})",
        )

    return sections


def build_presentation(view, state) -> dict:
    """
    Build the payload for the current display mode.

    Args:
        view: EmailView (sanitized HTML + extracted data).
        state: ViewState owned by the UI.

    Returns:
        Presentation dict; ``sanitizedHtml`` is present in both modes.
    """
    if state.display_mode == DisplayMode.RAW:
        return {
            "displayMode": DisplayMode.RAW.value,
            "badge": "Raw Content",
            "toggleLabel": "Show Rich View",
            "subject": view.subject,
            "sanitizedHtml": view.sanitized_html,
        }

    return {
        "displayMode": DisplayMode.ENHANCED.value,
        "badge": "Enhanced Email View",
        "toggleLabel": "Show Raw Content",
        "subject": view.subject,
        "itemCount": view.extracted.item_count,
        "sanitizedHtml": view.sanitized_html,
        "sections": build_sections(view.extracted, state.expanded),
    }
