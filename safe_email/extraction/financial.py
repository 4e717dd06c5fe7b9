"""
Financial-data extractor — labelled amounts in normalized email text.

Three independent case-insensitive passes (profit, price, fee). Each label
is followed by ':', an optional currency symbol, an amount with optional
thousands separators and an optional ISO currency code. There is no
cross-pass deduplication: an amount matched by two label sets is reported
twice.
"""
import logging
import math
import re
from typing import Dict, List, Pattern, Tuple

from safe_email.config.constants import (
    CURRENCY_CODES,
    CURRENCY_SYMBOLS,
    DEFAULT_CURRENCY,
    FEE_LABELS,
    PRICE_LABELS,
    PROFIT_LABELS,
)
from safe_email.models.extracted import FinancialItem

logger = logging.getLogger(__name__)


def _build_pattern(labels: List[str], emphasis: bool = False) -> Pattern[str]:
    label_alt = "|".join(re.escape(label) for label in labels)
    currency_alt = "|".join(CURRENCY_CODES)
    star = r"\*?" if emphasis else ""
    pattern = (
        rf"(?:{label_alt}):\s*{star}[{re.escape(CURRENCY_SYMBOLS)}]?"
        rf"([\d,]+\.?\d*)\s*({currency_alt})?"
    )
    if emphasis:
        pattern += r"\s*\*?"
    return re.compile(pattern, re.IGNORECASE)


# Profit lines are often bolded by agents, so the value may sit inside '*'.
FINANCIAL_PATTERNS: Dict[str, Pattern[str]] = {
    "profit": _build_pattern(PROFIT_LABELS, emphasis=True),
    "price": _build_pattern(PRICE_LABELS),
    "fee": _build_pattern(FEE_LABELS),
}


def parse_amount(raw: str) -> float | None:
    """Parse '1,234.56' → 1234.56. None when not a finite number."""
    try:
        amount = float(raw.replace(",", ""))
    except ValueError:
        return None
    if not math.isfinite(amount):
        return None
    return amount


def extract_financial_data(text: str) -> Tuple[FinancialItem, ...]:
    """
    Extract profit, price and fee amounts.

    Args:
        text: Normalized email text.

    Returns:
        FinancialItems in pass order (profit, price, fee), then text order.
    """
    if not isinstance(text, str) or not text:
        return ()

    items: List[FinancialItem] = []
    for kind, pattern in FINANCIAL_PATTERNS.items():
        for match in pattern.finditer(text):
            amount = parse_amount(match.group(1))
            if amount is None:
                logger.debug("Discarded non-numeric %s amount %r", kind, match.group(1))
                continue
            currency = (match.group(2) or DEFAULT_CURRENCY).upper()
            items.append(
                FinancialItem(
                    kind=kind,
                    amount=amount,
                    currency=currency,
                    label=match.group(0).strip(),
                )
            )

    return tuple(items)
