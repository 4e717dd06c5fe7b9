"""
Display formatting for extracted values (en-US conventions).
"""
import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

from safe_email.config.constants import CURRENCY_DISPLAY

_NON_DIGIT_RE = re.compile(r"\D")
# Wide enough for every finite float at two decimals.
_MONEY_CONTEXT = Context(prec=400)


def format_currency(amount: float, currency: str) -> str:
    """
    Format an amount the way the dashboard shows money.

    Halves round away from zero, from the shortest decimal form of *amount*.

    >>> format_currency(1234.56, "USD")
    '$1,234.56'
    >>> format_currency(1234.5, "JPY")
    '¥1,235'
    """
    code = (currency or "").upper()
    symbol, digits = CURRENCY_DISPLAY.get(code, (None, 2))
    rounded = Decimal(repr(float(amount))).quantize(
        Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP, context=_MONEY_CONTEXT
    )
    number = f"{rounded:,.{digits}f}"
    if symbol is None:
        return f"{code} {number}".strip()
    return f"{symbol}{number}"


def format_phone_number(phone: str) -> str:
    """(305) 555-0100 for ten-digit numbers, anything else unchanged."""
    digits = _NON_DIGIT_RE.sub("", phone)
    if len(digits) == 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    return phone


def website_href(website: str) -> str:
    if website.startswith("http"):
        return website
    return f"https://{website}"


def image_alt(alt: Optional[str], index: int) -> str:
    return alt or f"Email image {index + 1}"


def amount_text(amount: float) -> str:
    """
    Plain number text for copying, as a browser prints a number.

    1234.56 → '1234.56', 1234.0 → '1234', 1e16 → '10000000000000000',
    1e-7 → '1e-7', 1e21 → '1e+21'.
    """
    value = float(amount)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # Shortest round-trip digits, trailing zeros dropped.
    parts = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in parts.digits)
    k = len(digits)
    n = k + parts.exponent

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        exponent = n - 1
        mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
        text = f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"
    return sign + text
