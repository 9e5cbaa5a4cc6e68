from .schemas import (
    Account,
    AccountView,
    InstructionResponse,
    PaymentInstructionRequest,
)

__all__ = [
    "Account",
    "AccountView",
    "InstructionResponse",
    "PaymentInstructionRequest",
]
