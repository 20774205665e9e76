"""CHIP-8 control flow instructions."""

from typing import Optional

import jax.numpy as jnp
from chip8core.state import EmulatorState
from chip8core.decode import DecodedInstruction
from chip8core.constants import ADDRESS_MASK
from chip8core.errors import InvalidOpcodeError
from chip8core.peripherals import Devices
from chip8core.stack import push


def execute_jump(state: EmulatorState, instruction: DecodedInstruction,
                 devices: Optional[Devices] = None) -> EmulatorState:
    """1NNN - Jump to address NNN."""
    return state.replace(pc=jnp.asarray(instruction.nnn, dtype=jnp.uint16))


def execute_call(state: EmulatorState, instruction: DecodedInstruction,
                 devices: Optional[Devices] = None) -> EmulatorState:
    """2NNN - Call subroutine at NNN.

    The pushed address is the current PC, which fetch has already moved past
    the call, so the matching return resumes at the next instruction.
    """
    state = state.replace(stack=push(state.stack, state.pc))
    return execute_jump(state, instruction)


def make_skip_instruction(condition_fn):
    """Factory for skip instructions."""
    def skip_instruction(state: EmulatorState, instruction: DecodedInstruction,
                         devices: Optional[Devices] = None) -> EmulatorState:
        condition = condition_fn(state, instruction)
        return state.replace(pc=jnp.where(condition, (state.pc + 2) & ADDRESS_MASK, state.pc))
    return skip_instruction


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, inst: state.V[inst.x] == inst.nn
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, inst: state.V[inst.x] != inst.nn
)

_skip_if_equal_register = make_skip_instruction(
    lambda state, inst: state.V[inst.x] == state.V[inst.y]
)

_skip_if_not_equal_register = make_skip_instruction(
    lambda state, inst: state.V[inst.x] != state.V[inst.y]
)


def execute_skip_if_equal_register(state: EmulatorState, instruction: DecodedInstruction,
                                   devices: Optional[Devices] = None) -> EmulatorState:
    """5XY0 - Skip if VX == VY."""
    if instruction.n != 0:
        raise InvalidOpcodeError(instruction.raw)
    return _skip_if_equal_register(state, instruction)


def execute_skip_if_not_equal_register(state: EmulatorState, instruction: DecodedInstruction,
                                       devices: Optional[Devices] = None) -> EmulatorState:
    """9XY0 - Skip if VX != VY."""
    if instruction.n != 0:
        raise InvalidOpcodeError(instruction.raw)
    return _skip_if_not_equal_register(state, instruction)


def execute_jump_with_offset(state: EmulatorState, instruction: DecodedInstruction,
                             devices: Optional[Devices] = None) -> EmulatorState:
    """BNNN - Jump to address NNN + V0."""
    jump_address = (instruction.nnn + jnp.astype(state.V[0], jnp.uint16)) & ADDRESS_MASK
    return state.replace(pc=jnp.astype(jump_address, jnp.uint16))


def execute_skip_if_key(state: EmulatorState, instruction: DecodedInstruction,
                        devices: Optional[Devices] = None) -> EmulatorState:
    """EX9E/EXA1 - Skip if key pressed/not pressed."""
    if instruction.nn not in (0x9E, 0xA1):
        raise InvalidOpcodeError(instruction.raw)

    key_index = state.V[instruction.x] & 0xF
    key_pressed = state.keypad[key_index]
    is_not_instruction = (instruction.nn == 0xA1)
    condition = key_pressed ^ is_not_instruction

    return state.replace(pc=jnp.where(condition, (state.pc + 2) & ADDRESS_MASK, state.pc))
