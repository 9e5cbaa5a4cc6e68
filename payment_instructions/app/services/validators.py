"""Character-level checks for account ids, dates and amounts.

These scan tokens by hand rather than with regular expressions so each rule
stays a plain predicate over the characters of a single token.
"""

from __future__ import annotations

import string
from datetime import UTC, date, datetime, timedelta
from typing import Optional

_ACCOUNT_ID_CHARS = frozenset(string.ascii_letters + string.digits + "-.@")
_DIGITS = frozenset(string.digits)


def _is_digits(value: str) -> bool:
    return all(char in _DIGITS for char in value)


def is_valid_account_id(value: str) -> bool:
    return all(char in _ACCOUNT_ID_CHARS for char in value)


def is_valid_date_format(value: str) -> bool:
    """Check a ``YYYY-MM-DD`` token.

    Month must be 1..12 and day 1..31; month lengths and leap years are not
    checked, so ``2025-02-31`` passes.
    """
    if len(value) != 10:
        return False
    if value[4] != "-" or value[7] != "-":
        return False

    year, month, day = value[0:4], value[5:7], value[8:10]
    if not _is_digits(year + month + day):
        return False

    return 1 <= int(month) <= 12 and 1 <= int(day) <= 31


def utc_today() -> date:
    return datetime.now(UTC).date()


def is_future_date(value: str, today: Optional[date] = None) -> bool:
    """Return True when ``value`` falls strictly after today (UTC).

    ``value`` must already satisfy :func:`is_valid_date_format`. Days beyond
    the end of the month roll into the following month.
    """
    today = today or utc_today()
    year, month, day = int(value[0:4]), int(value[5:7]), int(value[8:10])
    if year < 1:
        return False
    scheduled = date(year, month, 1) + timedelta(days=day - 1)
    return scheduled > today


def parse_amount(token: str) -> Optional[int]:
    """Read the amount slot of an instruction.

    Returns None for decimals, tokens without a leading integer, and values
    that are not strictly positive. A trailing non-digit suffix is ignored.
    """
    if "." in token:
        return None

    sign = 1
    digits = token
    if digits[:1] in ("+", "-"):
        sign = -1 if digits[0] == "-" else 1
        digits = digits[1:]

    end = 0
    while end < len(digits) and digits[end] in _DIGITS:
        end += 1
    if end == 0:
        return None

    amount = sign * int(digits[:end])
    if amount <= 0:
        return None
    return amount
