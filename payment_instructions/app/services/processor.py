from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from ..core import messages
from ..core.errors import ErrorCode, Violation
from ..models import Account, InstructionResponse
from .parser import parse_instruction
from .priority import select_primary_error
from .rules import validate_business_rules
from .settlement import build_failure, settle, unparseable_response
from .validators import utc_today


logger = logging.getLogger(__name__)

AccountLike = Union[Account, Mapping[str, Any]]


class InstructionProcessor:
    """Parse, validate and settle payment instructions against supplied balances.

    The processor keeps no state between calls: every call works on the
    accounts it is given and returns a fresh response.
    """

    def __init__(self, clock: Optional[Callable[[], date]] = None) -> None:
        self.clock = clock or utc_today

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _coerce_accounts(self, accounts: Iterable[AccountLike]) -> list[Account]:
        return [
            account if isinstance(account, Account) else Account.model_validate(account)
            for account in accounts
        ]

    def _run(self, accounts: list[Account], instruction: str) -> InstructionResponse:
        parsed = parse_instruction(instruction)
        check = validate_business_rules(parsed, accounts)

        error = select_primary_error(check.violations)
        if error is not None:
            logger.warning(
                "instruction.failed",
                extra={
                    "status_code": error.code.value,
                    "violations": [violation.code.value for violation in check.violations],
                },
            )
            return build_failure(accounts, parsed, error)

        response = settle(accounts, parsed, check, today=self.clock())
        logger.info(
            "instruction.settled",
            extra={
                "status": response.status,
                "debit_account": response.debit_account,
                "credit_account": response.credit_account,
                "amount": response.amount,
            },
        )
        return response

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def process(self, accounts: Iterable[AccountLike], instruction: str) -> InstructionResponse:
        records = self._coerce_accounts(accounts)
        logger.info(
            "instruction.received",
            extra={"instruction": instruction, "accounts": len(records)},
        )

        try:
            return self._run(records, instruction)
        except Exception:
            logger.exception("instruction.error", extra={"instruction": instruction})
            return unparseable_response(
                Violation(ErrorCode.MALFORMED, messages.MALFORMED_INSTRUCTION)
            )


def process_instruction(
    accounts: Iterable[AccountLike],
    instruction: str,
    *,
    today: Optional[date] = None,
) -> InstructionResponse:
    clock = (lambda: today) if today is not None else None
    return InstructionProcessor(clock=clock).process(accounts, instruction)
