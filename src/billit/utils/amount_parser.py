"""Amount parsing and formatting utilities.

Amounts are stored as integer paise. These helpers convert user input in
rupees to paise and render paise the way the en-IN locale shows rupees.
"""

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

PAISE_PER_RUPEE = 100
# Keeps bill totals well inside a 64-bit SQLite INTEGER
MAX_PAISE = 10**15


def parse_amount(amount_str: str) -> Decimal:
    """Parse a rupee amount string into a Decimal.

    Handles various formats:
    - "1200"
    - "₹1,200.50"
    - "Rs. 1,20,000"
    - "INR 500"

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount in rupees

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = amount_str.strip()
    cleaned = re.sub(r"^(₹|rs\.?|inr)\s*", "", cleaned, flags=re.IGNORECASE)
    cleaned = cleaned.replace(",", "").strip()

    try:
        value = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}'") from e

    if not value.is_finite():
        raise ValueError(f"Amount must be a finite number, got '{amount_str}'")
    return value


def to_paise(rupees: Decimal | int | str) -> int:
    """Convert a rupee value to whole paise, rounding half-up.

    Raises:
        ValueError: If the value is not finite or too large to represent
    """
    try:
        value = Decimal(str(rupees)) * PAISE_PER_RUPEE
        paise = int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError, OverflowError) as e:
        raise ValueError(f"Amount out of range: {rupees}") from e

    if abs(paise) > MAX_PAISE:
        raise ValueError(f"Amount out of range: {rupees}")
    return paise


def parse_amount_paise(amount_str: str) -> int:
    """Parse a rupee amount string straight into paise."""
    return to_paise(parse_amount(amount_str))


def _group_indian(digits: str) -> str:
    """Group an integer digit string as 12,34,56,789."""
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


def format_currency(paise: int) -> str:
    """Format paise as whole rupees for the en-IN locale (e.g. ₹1,23,457)."""
    rupees = (Decimal(paise) / PAISE_PER_RUPEE).quantize(
        Decimal("1"), rounding=ROUND_HALF_UP
    )
    sign = "-" if rupees < 0 else ""
    return f"{sign}₹{_group_indian(str(abs(int(rupees))))}"
