from .processor import InstructionProcessor, process_instruction

__all__ = ["InstructionProcessor", "process_instruction"]
