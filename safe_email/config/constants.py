"""
Constants used across the rendering and extraction pipeline.
Pinned so extraction stays deterministic across releases.
"""
from typing import Dict, List, Tuple

# =============================================================================
# Sanitizer allow-list
# =============================================================================
ALLOWED_TAGS: List[str] = ["p", "div", "br", "span", "strong", "b", "em", "i", "a"]

ALLOWED_ATTRIBUTES: Dict[str, List[str]] = {
    "a": ["href"],
}

ALLOWED_PROTOCOLS: List[str] = ["http", "https", "mailto", "tel"]

# Removed together with their content before the allow-list pass.
FORBIDDEN_BLOCK_TAGS: List[str] = ["script", "style", "iframe", "object", "embed"]

# =============================================================================
# Normalizer
# =============================================================================
HTML_ENTITIES: Dict[str, str] = {
    "&nbsp;": " ",
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
}

# =============================================================================
# Financial extraction
# =============================================================================
DEFAULT_CURRENCY: str = "USD"
CURRENCY_CODES: List[str] = ["USD", "EUR", "GBP", "JPY"]
CURRENCY_SYMBOLS: str = "$€£¥"

# Longest label first inside each group, the alternation is ordered.
PROFIT_LABELS: List[str] = ["Clean Profit", "Profit After", "Profit"]
PRICE_LABELS: List[str] = ["Net Price", "Selling Price", "Total", "Amount", "Price"]
FEE_LABELS: List[str] = ["Service Fee", "IF", "CK", "Tips", "TP", "CFAR", "FT"]

# en-US display symbols and fraction digits
CURRENCY_DISPLAY: Dict[str, Tuple[str, int]] = {
    "USD": ("$", 2),
    "EUR": ("€", 2),
    "GBP": ("£", 2),
    "JPY": ("¥", 0),
}

# =============================================================================
# Booking references
# =============================================================================
BOOKING_KEYWORDS: List[str] = ["EK #", "Booking", "PNR", "Reference"]

# =============================================================================
# Signature block heuristics
# =============================================================================
SIGNATURE_WINDOW_LINES: int = 15
NAME_MIN_LENGTH: int = 3
NAME_MAX_LENGTH: int = 49
TITLE_KEYWORDS: List[str] = ["expert", "agent", "manager"]
ADDRESS_KEYWORDS: List[str] = ["avenue", "street", "miami"]

# =============================================================================
# Image roles (checked in order, first match wins)
# =============================================================================
SIGNATURE_SRC_KEYWORDS: List[str] = ["signature", "logo"]
SIGNATURE_MESSAGE_KEYWORD: str = "signature"
HEADER_SRC_KEYWORDS: List[str] = ["header", "banner"]
ATTACHMENT_SRC_KEYWORDS: List[str] = ["attachment", "upload"]

# =============================================================================
# Presentation
# =============================================================================
SECTIONS: List[str] = ["signature", "financial", "booking", "images"]

SECTION_TITLES: Dict[str, str] = {
    "signature": "Business Contact",
    "financial": "Financial Information",
    "booking": "Booking References",
    "images": "Images",
}
