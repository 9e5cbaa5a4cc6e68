from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..core import messages
from ..core.errors import ErrorCode, Violation
from ..models import Account
from .parser import ParseResult
from .validators import is_valid_account_id

SUPPORTED_CURRENCIES = ("NGN", "USD", "GBP", "GHS")


@dataclass
class RuleCheck:
    violations: list[Violation] = field(default_factory=list)
    debit_account: Optional[Account] = None
    credit_account: Optional[Account] = None


def find_account(accounts: Sequence[Account], account_id: Optional[str]) -> Optional[Account]:
    """Return the first account whose id matches exactly, or None."""
    if account_id is None:
        return None
    return next((account for account in accounts if account.id == account_id), None)


def validate_business_rules(parsed: ParseResult, accounts: Sequence[Account]) -> RuleCheck:
    """Collect every rule violation for a parsed instruction.

    Syntax violations from the parser come first, followed by rule
    violations in the order the rules are checked. No rule stops the others
    from running; each one only needs its own inputs to be present.
    """
    check = RuleCheck(violations=list(parsed.syntax_errors))
    violations = check.violations

    for account_id in (parsed.debit_account, parsed.credit_account):
        if account_id and not is_valid_account_id(account_id):
            violations.append(
                Violation(ErrorCode.INVALID_ACCOUNT_ID, messages.invalid_account_id(account_id))
            )

    # Also fires when neither account was parsed.
    if parsed.debit_account == parsed.credit_account:
        violations.append(Violation(ErrorCode.SAME_ACCOUNT, messages.SAME_ACCOUNT))

    if parsed.currency and parsed.currency not in SUPPORTED_CURRENCIES:
        violations.append(
            Violation(ErrorCode.UNSUPPORTED_CURRENCY, messages.UNSUPPORTED_CURRENCY)
        )

    debit = find_account(accounts, parsed.debit_account)
    credit = find_account(accounts, parsed.credit_account)
    check.debit_account, check.credit_account = debit, credit

    for account_id, account in ((parsed.debit_account, debit), (parsed.credit_account, credit)):
        if account_id and account is None:
            violations.append(
                Violation(ErrorCode.ACCOUNT_NOT_FOUND, messages.account_not_found(account_id))
            )

    if debit is None or credit is None:
        return check

    if debit.currency != credit.currency:
        violations.append(Violation(ErrorCode.CURRENCY_MISMATCH, messages.CURRENCY_MISMATCH))

    held = debit.currency.upper()
    if parsed.currency and held != parsed.currency:
        violations.append(
            Violation(
                ErrorCode.CURRENCY_MISMATCH,
                messages.instruction_currency_mismatch(parsed.currency, held),
            )
        )

    if parsed.amount is not None and debit.balance < parsed.amount:
        violations.append(
            Violation(
                ErrorCode.INSUFFICIENT_FUNDS,
                messages.insufficient_funds(debit.balance, debit.currency, parsed.amount),
            )
        )

    return check
