import pytest

from ..core.errors import ErrorCode
from ..services.parser import ParseResult, State, parse_instruction, step


def codes(result: ParseResult) -> list[ErrorCode]:
    return [violation.code for violation in result.syntax_errors]


def test_parses_debit_instruction() -> None:
    result = parse_instruction("DEBIT 30 usd FROM ACCOUNT a FOR CREDIT TO ACCOUNT b ON 2024-01-15")
    assert result.type == "DEBIT"
    assert result.amount == 30
    assert result.currency == "USD"
    assert result.debit_account == "a"
    assert result.credit_account == "b"
    assert result.execute_by == "2024-01-15"
    assert result.syntax_errors == []


def test_credit_instruction_assigns_roles_by_keyword() -> None:
    result = parse_instruction("credit 300 GHS to account dst for debit from account src")
    assert result.type == "CREDIT"
    assert result.credit_account == "dst"
    assert result.debit_account == "src"
    assert result.syntax_errors == []


def test_account_ids_keep_their_case() -> None:
    result = parse_instruction("DEBIT 1 USD FROM ACCOUNT AbC FOR CREDIT TO ACCOUNT xYz")
    assert (result.debit_account, result.credit_account) == ("AbC", "xYz")


def test_unknown_first_keyword_halts() -> None:
    result = parse_instruction("SEND 100 USD TO ACCOUNT b")
    assert codes(result) == [ErrorCode.MISSING_KEYWORD]
    assert result.type is None


def test_empty_instruction_is_malformed() -> None:
    assert codes(parse_instruction("")) == [ErrorCode.MALFORMED]


def test_invalid_amount_does_not_stop_parsing() -> None:
    result = parse_instruction("DEBIT 100.50 USD FROM ACCOUNT a FOR CREDIT TO ACCOUNT b")
    assert codes(result) == [ErrorCode.INVALID_AMOUNT]
    assert result.amount is None
    assert result.debit_account == "a"
    assert result.credit_account == "b"


@pytest.mark.parametrize(
    "instruction",
    [
        "DEBIT 10 USD TO ACCOUNT a FOR CREDIT TO ACCOUNT b",
        "CREDIT 10 USD FROM ACCOUNT a FOR DEBIT FROM ACCOUNT b",
        "DEBIT 10 USD FROM ACCOUNT a FOR DEBIT TO ACCOUNT b",
        "DEBIT 10 USD FROM ACCOUNT a FOR CREDIT FROM ACCOUNT b",
    ],
)
def test_keywords_out_of_order(instruction: str) -> None:
    assert codes(parse_instruction(instruction)) == [ErrorCode.INVALID_ORDER]


@pytest.mark.parametrize(
    "instruction",
    [
        "DEBIT 10 USD FROM a FOR CREDIT TO ACCOUNT b",
        "DEBIT 10 USD FROM ACCOUNT a TO CREDIT TO ACCOUNT b",
        "DEBIT 10 USD FROM ACCOUNT a FOR CREDIT TO b",
        "DEBIT 10 USD FROM TO ACCOUNT a FOR CREDIT TO ACCOUNT b",
    ],
)
def test_missing_keywords(instruction: str) -> None:
    assert codes(parse_instruction(instruction)) == [ErrorCode.MISSING_KEYWORD]


def test_fatal_error_keeps_earlier_fields() -> None:
    result = parse_instruction("DEBIT 10 USD FROM ACCOUNT a TO CREDIT TO ACCOUNT b")
    assert result.type == "DEBIT"
    assert result.amount == 10
    assert result.debit_account == "a"
    assert result.credit_account is None


def test_truncated_instruction_is_malformed() -> None:
    result = parse_instruction("DEBIT 10 USD FROM ACCOUNT a")
    assert codes(result) == [ErrorCode.MALFORMED]


def test_truncated_after_invalid_amount_is_also_malformed() -> None:
    result = parse_instruction("DEBIT 1.5 USD FROM")
    assert codes(result) == [ErrorCode.INVALID_AMOUNT, ErrorCode.MALFORMED]


def test_instruction_ending_at_on_is_malformed() -> None:
    result = parse_instruction("DEBIT 10 USD FROM ACCOUNT a FOR CREDIT TO ACCOUNT b ON")
    assert codes(result) == [ErrorCode.MALFORMED]


def test_unexpected_token_after_second_account() -> None:
    result = parse_instruction("DEBIT 10 USD FROM ACCOUNT a FOR CREDIT TO ACCOUNT b NOW")
    assert codes(result) == [ErrorCode.MALFORMED]
    assert result.credit_account == "b"


def test_invalid_date_is_recorded_and_parsing_continues() -> None:
    result = parse_instruction("DEBIT 10 USD FROM ACCOUNT a FOR CREDIT TO ACCOUNT b ON 2026/12/31")
    assert codes(result) == [ErrorCode.INVALID_DATE]
    assert result.execute_by is None


def test_token_after_date_is_malformed() -> None:
    result = parse_instruction(
        "DEBIT 10 USD FROM ACCOUNT a FOR CREDIT TO ACCOUNT b ON 2024-01-15 extra"
    )
    assert codes(result) == [ErrorCode.MALFORMED]
    assert result.execute_by == "2024-01-15"


def test_step_currency_state_expects_direction_for_type() -> None:
    debit = ParseResult(type="DEBIT")
    assert step(State.CURRENCY, "from", debit) == State.FIRST_KEYWORD

    credit = ParseResult(type="CREDIT")
    assert step(State.CURRENCY, "from", credit) is None
    assert codes(credit) == [ErrorCode.INVALID_ORDER]


def test_step_second_account_accepts_on() -> None:
    result = ParseResult(type="DEBIT")
    assert step(State.SECOND_ACCOUNT, "on", result) == State.ON
    assert step(State.ON, "2024-02-30", result) == State.DATE
    assert result.execute_by == "2024-02-30"
