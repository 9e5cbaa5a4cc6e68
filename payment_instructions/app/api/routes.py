from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..core.dependencies import get_instruction_processor
from ..models import InstructionResponse, PaymentInstructionRequest
from ..services import InstructionProcessor


router = APIRouter(prefix="/payment-instructions", tags=["payment-instructions"])

@router.post(
    "",
    response_model=InstructionResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": InstructionResponse}},
)
def create_payment_instruction(
    payload: PaymentInstructionRequest,
    processor: InstructionProcessor = Depends(get_instruction_processor),
) -> JSONResponse:
    result = processor.process(payload.accounts, payload.instruction)
    status_code = (
        status.HTTP_400_BAD_REQUEST if result.status == "failed" else status.HTTP_200_OK
    )
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))

__all__ = ["router"]
