from typing import Literal, Optional

from pydantic import BaseModel, Field


class Account(BaseModel):
    id: str
    balance: int = Field(..., description="Balance in minor units")
    currency: str


class PaymentInstructionRequest(BaseModel):
    accounts: list[Account]
    instruction: str = Field(..., description="e.g. DEBIT 30 USD FROM ACCOUNT a FOR CREDIT TO ACCOUNT b")


class AccountView(BaseModel):
    id: str
    balance: int
    balance_before: int
    currency: str


class InstructionResponse(BaseModel):
    type: Optional[Literal["DEBIT", "CREDIT"]] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = Field(default=None, description="YYYY-MM-DD")
    status: Literal["successful", "pending", "failed"]
    status_reason: str
    status_code: str
    accounts: list[AccountView] = Field(default_factory=list)
