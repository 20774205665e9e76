"""CHIP-8 miscellaneous instructions (Fxxx)."""

from typing import Optional

import jax.numpy as jnp
from chip8core.state import EmulatorState
from chip8core.decode import DecodedInstruction
from chip8core.constants import FONT_START, FONT_GLYPH_SIZE, MEMORY_SIZE, NUM_REGISTERS
from chip8core.errors import InvalidOpcodeError
from chip8core.peripherals import Devices, require_keyboard


def execute_get_delay_timer(state: EmulatorState, instruction: DecodedInstruction,
                            devices: Optional[Devices] = None) -> EmulatorState:
    """FX07 - Set VX to delay timer value."""
    return state.replace(V=state.V.at[instruction.x].set(state.delay_timer))


def execute_wait_for_key(state: EmulatorState, instruction: DecodedInstruction,
                         devices: Optional[Devices] = None) -> EmulatorState:
    """FX0A - Wait for key press (blocking)."""
    pressed_key = require_keyboard(devices).wait_next_key_press()
    return state.replace(V=state.V.at[instruction.x].set(int(pressed_key) & 0xF))


def execute_set_delay_timer(state: EmulatorState, instruction: DecodedInstruction,
                            devices: Optional[Devices] = None) -> EmulatorState:
    """FX15 - Set delay timer to VX."""
    return state.replace(delay_timer=state.V[instruction.x])


def execute_set_sound_timer(state: EmulatorState, instruction: DecodedInstruction,
                            devices: Optional[Devices] = None) -> EmulatorState:
    """FX18 - Set sound timer to VX."""
    return state.replace(sound_timer=state.V[instruction.x])


def execute_add_to_index(state: EmulatorState, instruction: DecodedInstruction,
                         devices: Optional[Devices] = None) -> EmulatorState:
    """FX1E - Add VX to I register, wrapping at 16 bits."""
    new_i = state.I + jnp.astype(state.V[instruction.x], jnp.uint16)
    return state.replace(I=jnp.astype(new_i, jnp.uint16))


def execute_font_character(state: EmulatorState, instruction: DecodedInstruction,
                           devices: Optional[Devices] = None) -> EmulatorState:
    """FX29 - Set I to location of sprite for digit VX."""
    font_address = FONT_START + jnp.astype(state.V[instruction.x], jnp.uint16) * FONT_GLYPH_SIZE
    return state.replace(I=jnp.astype(font_address, jnp.uint16))


def execute_bcd_conversion(state: EmulatorState, instruction: DecodedInstruction,
                           devices: Optional[Devices] = None) -> EmulatorState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2 (wrapping at memory end)."""
    value = state.V[instruction.x]

    digits = jnp.array([
        value // 100,
        (value // 10) % 10,
        value % 10
    ], dtype=jnp.uint8)

    indices = (state.I + jnp.arange(3)) % MEMORY_SIZE
    new_memory = state.memory.at[indices].set(digits)
    return state.replace(memory=new_memory)


def execute_store_registers(state: EmulatorState, instruction: DecodedInstruction,
                            devices: Optional[Devices] = None) -> EmulatorState:
    """FX55 - Store V0 through VX in memory starting at I."""
    register_mask = jnp.arange(NUM_REGISTERS) <= instruction.x
    base_indices = (state.I + jnp.arange(NUM_REGISTERS)) % MEMORY_SIZE
    current_memory_values = state.memory[base_indices]
    new_memory_values = jnp.where(register_mask, state.V, current_memory_values)
    return state.replace(memory=state.memory.at[base_indices].set(new_memory_values))


def execute_load_registers(state: EmulatorState, instruction: DecodedInstruction,
                           devices: Optional[Devices] = None) -> EmulatorState:
    """FX65 - Load V0 through VX from memory starting at I."""
    register_mask = jnp.arange(NUM_REGISTERS) <= instruction.x
    base_indices = (state.I + jnp.arange(NUM_REGISTERS)) % MEMORY_SIZE
    memory_values = state.memory[base_indices]
    return state.replace(V=jnp.where(register_mask, memory_values, state.V))


MISC_INSTRUCTIONS = {
    0x07: execute_get_delay_timer,
    0x0A: execute_wait_for_key,
    0x15: execute_set_delay_timer,
    0x18: execute_set_sound_timer,
    0x1E: execute_add_to_index,
    0x29: execute_font_character,
    0x33: execute_bcd_conversion,
    0x55: execute_store_registers,
    0x65: execute_load_registers,
}


def execute_misc_instruction(state: EmulatorState, instruction: DecodedInstruction,
                             devices: Optional[Devices] = None) -> EmulatorState:
    """Dispatch misc instructions on the low byte."""
    handler = MISC_INSTRUCTIONS.get(instruction.nn)
    if handler is None:
        raise InvalidOpcodeError(instruction.raw)
    return handler(state, instruction, devices)
