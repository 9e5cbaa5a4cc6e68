from __future__ import annotations


def tokenize(instruction: str) -> list[str]:
    """Split an instruction into words, ignoring surrounding and repeated whitespace."""
    return instruction.split()
