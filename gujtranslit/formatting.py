"""
Number, currency and date formatting for Indian-locale shop documents.

Currency follows the en-IN convention (lakh/crore digit grouping, rupee
sign, two decimals). Every formatter can switch its digits to Gujarati
numerals for bilingual output.
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

from .mappings import GUJARATI_NUMERALS

Amount = Union[str, int, float, Decimal]
DateLike = Union[str, date, datetime]

RUPEE_SIGN = "₹"

# Common GST rate for India
INDIA_GST_RATE = Decimal("0.18")

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_CENTS = Decimal("0.01")
_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_CURRENCY_NOISE = re.compile(r"[₹,\s]")


def to_gujarati_numerals(text: str) -> str:
    """Convert ASCII digits in text to Gujarati numerals."""
    return re.sub(r"[0-9]", lambda match: GUJARATI_NUMERALS[match.group(0)], text)


def to_decimal(amount: Amount) -> Decimal:
    """
    Convert an amount to Decimal.

    Raises:
        ValueError: If the amount is not a finite number.
    """
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, float):
        value = Decimal(repr(amount))
    else:
        try:
            value = Decimal(str(amount).strip())
        except InvalidOperation:
            raise ValueError(f"Not a valid amount: {amount!r}")

    if not value.is_finite():
        raise ValueError(f"Not a valid amount: {amount!r}")
    return value


def group_indian(digits: str) -> str:
    """Group an integer digit string the Indian way (12,34,567)."""
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency_without_symbol(amount: Amount) -> str:
    """Format an amount as 1,23,456.78 (no currency sign)."""
    value = to_decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer_part, fraction = f"{abs(value):.2f}".split(".")
    return f"{sign}{group_indian(integer_part)}.{fraction}"


def format_currency(amount: Amount) -> str:
    """Format an amount as Indian rupees, e.g. ₹1,23,456.78."""
    formatted = format_currency_without_symbol(amount)
    if formatted.startswith("-"):
        return f"-{RUPEE_SIGN}{formatted[1:]}"
    return f"{RUPEE_SIGN}{formatted}"


def parse_float_prefix(value: str) -> Optional[float]:
    """Parse the leading number of a string, ignoring trailing junk."""
    match = _NUMERIC_PREFIX.match(value or "")
    if not match:
        return None
    return float(match.group(0))


def parse_currency(value: str) -> float:
    """
    Parse a formatted currency string back to a number.

    Rupee signs, commas and whitespace are removed first. Anything that
    still does not start with a number parses as 0.
    """
    cleaned = _CURRENCY_NOISE.sub("", value or "")
    return parse_float_prefix(cleaned) or 0.0


def to_date(value: DateLike) -> date:
    """
    Coerce a date, datetime or ISO-8601 string to a date.

    Raises:
        ValueError: If a string cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise ValueError(f"Cannot parse date: {value}")


def format_invoice_date(value: DateLike) -> str:
    """Short en-IN date without zero padding: 15/1/2025."""
    day = to_date(value)
    return f"{day.day}/{day.month}/{day.year}"


def format_long_date(value: DateLike) -> str:
    """Medium en-IN date: 15 Jan 2025."""
    day = to_date(value)
    return f"{day.day} {MONTH_ABBREVIATIONS[day.month - 1]} {day.year}"


def format_gujarati_currency(amount: Amount, gujarati: bool = True) -> str:
    formatted = format_currency(amount)
    return to_gujarati_numerals(formatted) if gujarati else formatted


def format_gujarati_date(value: DateLike, gujarati: bool = True) -> str:
    formatted = format_long_date(value)
    return to_gujarati_numerals(formatted) if gujarati else formatted


# Spreadsheet helpers


def format_currency_for_excel(amount: Amount) -> str:
    """Plain two-decimal amount for spreadsheet cells; bad input gives 0.00."""
    if isinstance(amount, str):
        number = parse_float_prefix(amount)
        if number is None:
            return "0.00"
        amount = number
    try:
        value = to_decimal(amount)
    except ValueError:
        return "0.00"
    return f"{value.quantize(_CENTS, rounding=ROUND_HALF_UP):.2f}"


def format_date_for_excel(value: Optional[DateLike]) -> str:
    if not value:
        return ""
    return format_invoice_date(value)


def format_status(status: str) -> str:
    """Human label for an enum-style status: in_progress -> In progress."""
    if not status:
        return ""
    return status[0].upper() + status[1:].replace("_", " ", 1)
