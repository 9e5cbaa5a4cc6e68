from __future__ import annotations

from typing import Iterable, Optional

from ..core.errors import ErrorCode, Violation

# Lower ranks are reported first.
PRIORITY: dict[ErrorCode, int] = {
    ErrorCode.MALFORMED: 1,
    ErrorCode.MISSING_KEYWORD: 2,
    ErrorCode.INVALID_ORDER: 3,
    ErrorCode.INVALID_AMOUNT: 4,
    ErrorCode.INVALID_ACCOUNT_ID: 5,
    ErrorCode.INVALID_DATE: 6,
    ErrorCode.ACCOUNT_NOT_FOUND: 7,
    ErrorCode.UNSUPPORTED_CURRENCY: 8,
    ErrorCode.CURRENCY_MISMATCH: 9,
    ErrorCode.SAME_ACCOUNT: 10,
    ErrorCode.INSUFFICIENT_FUNDS: 11,
}
UNRANKED = len(PRIORITY) + 1


def rank(violation: Violation) -> int:
    return PRIORITY.get(violation.code, UNRANKED)


def select_primary_error(violations: Iterable[Violation]) -> Optional[Violation]:
    """Pick the most severe violation; the earliest one wins a tie."""
    return min(violations, key=rank, default=None)
