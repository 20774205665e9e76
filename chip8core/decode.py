"""CHIP-8 instruction decoding."""

from chex import dataclass


@dataclass(frozen=True)
class DecodedInstruction:
    """Operand fields of a 16-bit instruction word ``FXYN``.

    ``opcode`` is the family nibble ``F`` used for dispatch; ``nn`` and
    ``nnn`` are the low byte and low 12 bits. ``raw`` keeps the whole word
    for error reporting.
    """
    raw: int
    opcode: int
    x: int
    y: int
    n: int
    nn: int
    nnn: int


def decode(instruction: int) -> DecodedInstruction:
    word = int(instruction) & 0xFFFF
    return DecodedInstruction(
        raw=word,
        opcode=word >> 12,
        x=(word >> 8) & 0xF,
        y=(word >> 4) & 0xF,
        n=word & 0xF,
        nn=word & 0xFF,
        nnn=word & 0xFFF,
    )
