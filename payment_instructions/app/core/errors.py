from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    MALFORMED = "SY03"
    MISSING_KEYWORD = "SY01"
    INVALID_ORDER = "SY02"
    INVALID_AMOUNT = "AM01"
    INVALID_ACCOUNT_ID = "AC04"
    INVALID_DATE = "DT01"
    ACCOUNT_NOT_FOUND = "AC03"
    UNSUPPORTED_CURRENCY = "CU02"
    CURRENCY_MISMATCH = "CU01"
    SAME_ACCOUNT = "AC02"
    INSUFFICIENT_FUNDS = "AC01"


class StatusCode(str, Enum):
    SUCCESSFUL = "AP00"
    PENDING = "AP02"


# Grammar broken badly enough that parsed fields are not echoed back.
UNPARSEABLE_CODES = frozenset(
    {ErrorCode.MALFORMED, ErrorCode.MISSING_KEYWORD, ErrorCode.INVALID_ORDER}
)


@dataclass(frozen=True)
class Violation:
    """A grammar or business-rule breach found while processing an instruction."""

    code: ErrorCode
    message: str


class InstructionError(Exception):
    """Raised when the processing pipeline reaches an inconsistent state."""
