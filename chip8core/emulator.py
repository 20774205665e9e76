"""Main CHIP-8 emulator execution engine."""

from typing import Optional

import jax.numpy as jnp
from chip8core.state import EmulatorState
from chip8core.decode import decode
from chip8core.constants import ADDRESS_MASK, MEMORY_SIZE
from chip8core.errors import ProgramTooLargeError
from chip8core.peripherals import Devices
from chip8core.instructions.system import execute_system_instruction
from chip8core.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset, execute_skip_if_key
)
from chip8core.instructions.alu import execute_alu_operation
from chip8core.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from chip8core.instructions.display import execute_display
from chip8core.instructions.misc import execute_misc_instruction

INSTRUCTION_FAMILIES = [
    execute_system_instruction,
    execute_jump,
    execute_call,
    execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate,
    execute_skip_if_equal_register,
    execute_set,
    execute_add,
    execute_alu_operation,
    execute_skip_if_not_equal_register,
    execute_set_index,
    execute_jump_with_offset,
    execute_random,
    execute_display,
    execute_skip_if_key,
    execute_misc_instruction,
]


def execute(state: EmulatorState, instruction: int, devices: Optional[Devices] = None) -> EmulatorState:
    """Execute single CHIP-8 instruction.

    PC is not advanced here; :func:`fetch` already moved it past the
    instruction. Raises :class:`InvalidOpcodeError` for unknown opcodes.
    """
    decoded_instruction = decode(instruction)
    return INSTRUCTION_FAMILIES[decoded_instruction.opcode](state, decoded_instruction, devices)


def _pack_u16(high: jnp.uint8, low: jnp.uint8) -> jnp.uint16:
    """Pack two bytes into uint16."""
    return (high.astype(jnp.uint16) << 8) | low.astype(jnp.uint16)


def _unpack_u16(value: int) -> tuple[int, int]:
    """Unpack uint16 into two bytes."""
    return (value >> 8) & 0xFF, value & 0xFF


def fetch(state: EmulatorState) -> tuple[EmulatorState, int]:
    """Fetch next instruction from memory and advance PC by 2."""
    pc = int(state.pc)
    instruction = _pack_u16(state.memory[pc % MEMORY_SIZE], state.memory[(pc + 1) % MEMORY_SIZE])
    return state.replace(pc=(state.pc + 2) & ADDRESS_MASK), int(instruction)


def load_program(state: EmulatorState, program: bytes) -> EmulatorState:
    """Write raw program bytes into memory starting at PC."""
    start = int(state.pc)
    capacity = MEMORY_SIZE - start
    if len(program) > capacity:
        raise ProgramTooLargeError(len(program), capacity)
    if not program:
        return state
    program_array = jnp.array(list(program), dtype=jnp.uint8)
    new_memory = state.memory.at[start:start + len(program)].set(program_array)
    return state.replace(memory=new_memory)


def load_rom(state: EmulatorState, filename: str) -> EmulatorState:
    """Load ROM data into CHIP-8 memory starting at PC."""
    with open(filename, 'rb') as f:
        rom_data = f.read()
    return load_program(state, rom_data)


def assemble(instructions) -> bytes:
    """Encode 16-bit opcodes as a big-endian program image."""
    program = bytearray()
    for instruction in instructions:
        program.extend(_unpack_u16(int(instruction)))
    return bytes(program)
