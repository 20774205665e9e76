"""CHIP-8 system instructions (0x0xxx)."""

from typing import Optional

import jax.numpy as jnp
from chip8core.state import EmulatorState
from chip8core.decode import DecodedInstruction
from chip8core.errors import InvalidOpcodeError
from chip8core.peripherals import Devices
from chip8core.stack import pop


def execute_clear_screen(state: EmulatorState, instruction: DecodedInstruction,
                         devices: Optional[Devices] = None) -> EmulatorState:
    """00E0 - Clear display."""
    return state.replace(framebuffer=jnp.zeros_like(state.framebuffer))


def execute_return(state: EmulatorState, instruction: DecodedInstruction,
                   devices: Optional[Devices] = None) -> EmulatorState:
    """00EE - Return from subroutine."""
    stack, address = pop(state.stack)
    return state.replace(stack=stack, pc=address)


SYSTEM_INSTRUCTIONS = {
    0x00E0: execute_clear_screen,
    0x00EE: execute_return,
}


def execute_system_instruction(state: EmulatorState, instruction: DecodedInstruction,
                               devices: Optional[Devices] = None) -> EmulatorState:
    """Dispatch system instructions."""
    handler = SYSTEM_INSTRUCTIONS.get(instruction.raw)
    if handler is None:
        raise InvalidOpcodeError(instruction.raw)
    return handler(state, instruction, devices)
