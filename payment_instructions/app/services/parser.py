"""Token-driven state machine for payment instructions.

Recognised grammar (keywords are case-insensitive, account ids are not)::

    DEBIT  <amount> <currency> FROM ACCOUNT <id> FOR CREDIT TO ACCOUNT <id> [ON <date>]
    CREDIT <amount> <currency> TO ACCOUNT <id> FOR DEBIT FROM ACCOUNT <id> [ON <date>]

Each state names the last thing recognised, and its handler consumes the next
token. A handler returns the next state, or None after recording a fatal
violation, which halts the walk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional

from ..core import messages
from ..core.errors import ErrorCode, Violation
from .tokenizer import tokenize
from .validators import is_valid_date_format, parse_amount


class State(str, Enum):
    START = "START"
    TYPE = "TYPE"
    AMOUNT = "AMOUNT"
    CURRENCY = "CURRENCY"
    FIRST_KEYWORD = "FIRST_KEYWORD"
    FIRST_ACCOUNT_KEYWORD = "FIRST_ACCOUNT_KEYWORD"
    FIRST_ACCOUNT = "FIRST_ACCOUNT"
    FOR = "FOR"
    SECOND_TYPE = "SECOND_TYPE"
    SECOND_KEYWORD = "SECOND_KEYWORD"
    SECOND_ACCOUNT_KEYWORD = "SECOND_ACCOUNT_KEYWORD"
    SECOND_ACCOUNT = "SECOND_ACCOUNT"
    ON = "ON"
    DATE = "DATE"
    COMPLETE = "COMPLETE"


DEBIT = "DEBIT"
CREDIT = "CREDIT"

# States in which running out of tokens is a complete instruction.
_ACCEPTING = frozenset({State.SECOND_ACCOUNT, State.DATE})


@dataclass
class ParseResult:
    type: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None
    syntax_errors: list[Violation] = field(default_factory=list)

    @property
    def is_debit(self) -> bool:
        return self.type == DEBIT

    def assign_account(self, account_id: str, *, first: bool) -> None:
        # The keyword before the account decides its role, not its position.
        if first == self.is_debit:
            self.debit_account = account_id
        else:
            self.credit_account = account_id


MISSING_KEYWORD = Violation(ErrorCode.MISSING_KEYWORD, messages.MISSING_KEYWORD)
INVALID_ORDER = Violation(ErrorCode.INVALID_ORDER, messages.INVALID_KEYWORD_ORDER)
MALFORMED = Violation(ErrorCode.MALFORMED, messages.MALFORMED_INSTRUCTION)
INVALID_AMOUNT = Violation(ErrorCode.INVALID_AMOUNT, messages.INVALID_AMOUNT)
INVALID_DATE = Violation(ErrorCode.INVALID_DATE, messages.INVALID_DATE_FORMAT)


def _expect(
    keyword: str, token: str, result: ParseResult, next_state: State, violation: Violation
) -> Optional[State]:
    if token.upper() == keyword:
        return next_state
    result.syntax_errors.append(violation)
    return None


def _on_start(token: str, result: ParseResult) -> Optional[State]:
    keyword = token.upper()
    if keyword in (DEBIT, CREDIT):
        result.type = keyword
        return State.TYPE
    result.syntax_errors.append(MISSING_KEYWORD)
    return None


def _on_type(token: str, result: ParseResult) -> Optional[State]:
    amount = parse_amount(token)
    if amount is None:
        result.syntax_errors.append(INVALID_AMOUNT)
    else:
        result.amount = amount
    return State.AMOUNT


def _on_amount(token: str, result: ParseResult) -> Optional[State]:
    result.currency = token.upper()
    return State.CURRENCY


def _on_currency(token: str, result: ParseResult) -> Optional[State]:
    expected = "FROM" if result.is_debit else "TO"
    return _expect(expected, token, result, State.FIRST_KEYWORD, INVALID_ORDER)


def _on_first_keyword(token: str, result: ParseResult) -> Optional[State]:
    return _expect("ACCOUNT", token, result, State.FIRST_ACCOUNT_KEYWORD, MISSING_KEYWORD)


def _on_first_account_keyword(token: str, result: ParseResult) -> Optional[State]:
    result.assign_account(token, first=True)
    return State.FIRST_ACCOUNT


def _on_first_account(token: str, result: ParseResult) -> Optional[State]:
    return _expect("FOR", token, result, State.FOR, MISSING_KEYWORD)


def _on_for(token: str, result: ParseResult) -> Optional[State]:
    expected = CREDIT if result.is_debit else DEBIT
    return _expect(expected, token, result, State.SECOND_TYPE, INVALID_ORDER)


def _on_second_type(token: str, result: ParseResult) -> Optional[State]:
    expected = "TO" if result.is_debit else "FROM"
    return _expect(expected, token, result, State.SECOND_KEYWORD, INVALID_ORDER)


def _on_second_keyword(token: str, result: ParseResult) -> Optional[State]:
    return _expect("ACCOUNT", token, result, State.SECOND_ACCOUNT_KEYWORD, MISSING_KEYWORD)


def _on_second_account_keyword(token: str, result: ParseResult) -> Optional[State]:
    result.assign_account(token, first=False)
    return State.SECOND_ACCOUNT


def _on_second_account(token: str, result: ParseResult) -> Optional[State]:
    return _expect("ON", token, result, State.ON, MALFORMED)


def _on_on(token: str, result: ParseResult) -> Optional[State]:
    if is_valid_date_format(token):
        result.execute_by = token
    else:
        result.syntax_errors.append(INVALID_DATE)
    return State.DATE


def _on_trailing(token: str, result: ParseResult) -> Optional[State]:
    result.syntax_errors.append(MALFORMED)
    return None


TRANSITIONS: dict[State, Callable[[str, ParseResult], Optional[State]]] = {
    State.START: _on_start,
    State.TYPE: _on_type,
    State.AMOUNT: _on_amount,
    State.CURRENCY: _on_currency,
    State.FIRST_KEYWORD: _on_first_keyword,
    State.FIRST_ACCOUNT_KEYWORD: _on_first_account_keyword,
    State.FIRST_ACCOUNT: _on_first_account,
    State.FOR: _on_for,
    State.SECOND_TYPE: _on_second_type,
    State.SECOND_KEYWORD: _on_second_keyword,
    State.SECOND_ACCOUNT_KEYWORD: _on_second_account_keyword,
    State.SECOND_ACCOUNT: _on_second_account,
    State.ON: _on_on,
    State.DATE: _on_trailing,
    State.COMPLETE: _on_trailing,
}


def step(state: State, token: str, result: ParseResult) -> Optional[State]:
    return TRANSITIONS[state](token, result)


def parse_tokens(tokens: Iterable[str]) -> ParseResult:
    result = ParseResult()
    state = State.START

    for token in tokens:
        next_state = step(state, token, result)
        if next_state is None:
            return result
        state = next_state

    if state not in _ACCEPTING:
        result.syntax_errors.append(MALFORMED)
    return result


def parse_instruction(instruction: str) -> ParseResult:
    return parse_tokens(tokenize(instruction))
