"""Attribute validation shared by the restaurant entities."""
import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

Number = Union[int, float, str, Decimal]

PHONE_NUMBER_PATTERN = re.compile(r'^[1-9]\d{8}$')


def require_text(
    value: Optional[str],
    message: str,
    max_length: Optional[int] = None,
    too_long_message: str = "Text is too long.",
) -> str:
    """Reject None/blank text and over-long text; return the stripped value."""
    if value is None or not str(value).strip():
        raise ValueError(message)
    if max_length is not None and len(value) > max_length:
        raise ValueError(too_long_message)
    return str(value).strip()


def optional_text(value: Optional[str], max_length: int, message: str) -> Optional[str]:
    """Blank collapses to None; otherwise enforce max_length and strip."""
    if value is None or not str(value).strip():
        return None
    if len(value) > max_length:
        raise ValueError(message)
    return str(value).strip()


def to_money(value: Number, name: str) -> Decimal:
    """Coerce a finite number to Decimal via its string form."""
    if value is None or isinstance(value, bool):
        raise ValueError(f"{name} must be a number.")
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"{name} must be a number.") from None
    if not amount.is_finite():
        raise ValueError(f"{name} must be a number.")
    return amount


def non_negative_money(value: Number, message: str) -> Decimal:
    amount = to_money(value, "Price")
    if amount < 0:
        raise ValueError(message)
    return amount


def positive_int(value: int, message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(message)
    return value


def int_in_range(value: int, low: int, high: int, low_message: str, high_message: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(low_message)
    if value < low:
        raise ValueError(low_message)
    if value > high:
        raise ValueError(high_message)
    return value


def validate_phone_number(value: int) -> int:
    """A positive integer with exactly nine digits."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError("Phone number must be a positive number.")
    if not PHONE_NUMBER_PATTERN.match(str(value)):
        raise ValueError("Phone number too short or too long.")
    return value
