INVALID_AMOUNT = "Amount must be a positive integer"

CURRENCY_MISMATCH = "Account currency mismatch"
UNSUPPORTED_CURRENCY = "Unsupported currency. Only NGN, USD, GBP, and GHS are supported"

INSUFFICIENT_FUNDS = "Insufficient funds in debit account"
SAME_ACCOUNT = "Debit and credit accounts cannot be the same"
ACCOUNT_NOT_FOUND = "Account not found"
INVALID_ACCOUNT_ID = "Invalid account ID format"

INVALID_DATE_FORMAT = "Invalid date format. Must be YYYY-MM-DD"

MISSING_KEYWORD = "Missing required keyword"
INVALID_KEYWORD_ORDER = "Invalid keyword order"
MALFORMED_INSTRUCTION = "Malformed instruction: unable to parse keywords"

TRANSACTION_SUCCESSFUL = "Transaction executed successfully"
TRANSACTION_PENDING = "Transaction scheduled for future execution"


def account_not_found(account_id: str) -> str:
    return f"{ACCOUNT_NOT_FOUND}: {account_id}"


def invalid_account_id(account_id: str) -> str:
    return f"{INVALID_ACCOUNT_ID}: {account_id}"


def instruction_currency_mismatch(instructed: str, held: str) -> str:
    return f"Currency mismatch: instruction says {instructed} but account has {held}"


def insufficient_funds(balance: int, currency: str, amount: int) -> str:
    return f"{INSUFFICIENT_FUNDS}: has {balance} {currency}, needs {amount}"
