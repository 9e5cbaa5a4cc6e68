from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core import messages
from ..core.errors import UNPARSEABLE_CODES, InstructionError, StatusCode, Violation
from ..models import Account, AccountView, InstructionResponse
from .parser import ParseResult
from .rules import RuleCheck
from .validators import is_future_date


def _view(account: Account, balance: int) -> AccountView:
    return AccountView(
        id=account.id,
        balance=balance,
        balance_before=account.balance,
        currency=account.currency.upper(),
    )


def unparseable_response(error: Violation) -> InstructionResponse:
    return InstructionResponse(
        status="failed",
        status_reason=error.message,
        status_code=error.code.value,
        accounts=[],
    )


def build_failure(
    accounts: Sequence[Account], parsed: ParseResult, error: Violation
) -> InstructionResponse:
    """Shape the response for an instruction that cannot be applied.

    Syntax failures null every parsed field. Anything else echoes what was
    parsed, along with the involved accounts at their current balances.
    """
    if error.code in UNPARSEABLE_CODES:
        return unparseable_response(error)

    involved = {parsed.debit_account, parsed.credit_account}
    return InstructionResponse(
        type=parsed.type,
        amount=parsed.amount,
        currency=parsed.currency,
        debit_account=parsed.debit_account,
        credit_account=parsed.credit_account,
        execute_by=parsed.execute_by,
        status="failed",
        status_reason=error.message,
        status_code=error.code.value,
        accounts=[_view(account, account.balance) for account in accounts if account.id in involved],
    )


def settle(
    accounts: Sequence[Account],
    parsed: ParseResult,
    check: RuleCheck,
    today: Optional[date] = None,
) -> InstructionResponse:
    """Apply a validated instruction, or hold it when dated in the future.

    Accounts keep the order they were supplied in. Balances move by exactly
    ``parsed.amount``: down for the debit account, up for the credit account.
    """
    debit, credit = check.debit_account, check.credit_account
    if debit is None or credit is None or parsed.amount is None:
        raise InstructionError("Cannot settle an instruction without both accounts and an amount")

    pending = bool(parsed.execute_by) and is_future_date(parsed.execute_by, today)
    movement = 0 if pending else parsed.amount

    views: list[AccountView] = []
    for account in accounts:
        if account.id == debit.id:
            views.append(_view(account, account.balance - movement))
        elif account.id == credit.id:
            views.append(_view(account, account.balance + movement))

    if pending:
        status, status_code, reason = "pending", StatusCode.PENDING, messages.TRANSACTION_PENDING
    else:
        status, status_code, reason = (
            "successful",
            StatusCode.SUCCESSFUL,
            messages.TRANSACTION_SUCCESSFUL,
        )

    return InstructionResponse(
        type=parsed.type,
        amount=parsed.amount,
        currency=parsed.currency,
        debit_account=parsed.debit_account,
        credit_account=parsed.credit_account,
        execute_by=parsed.execute_by,
        status=status,
        status_reason=reason,
        status_code=status_code.value,
        accounts=views,
    )
