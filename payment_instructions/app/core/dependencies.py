from functools import lru_cache

from ..services import InstructionProcessor


@lru_cache()
def get_instruction_processor() -> InstructionProcessor:
    return InstructionProcessor()
