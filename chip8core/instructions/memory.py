"""CHIP-8 memory and register operations."""

from typing import Optional

import jax.numpy as jnp
from chip8core.state import EmulatorState
from chip8core.decode import DecodedInstruction
from chip8core.peripherals import Devices, require_number_source


def execute_set(state: EmulatorState, instruction: DecodedInstruction,
                devices: Optional[Devices] = None) -> EmulatorState:
    """6XNN - Set VX = NN."""
    return state.replace(V=state.V.at[instruction.x].set(instruction.nn))


def execute_add(state: EmulatorState, instruction: DecodedInstruction,
                devices: Optional[Devices] = None) -> EmulatorState:
    """7XNN - Add NN to VX, wrapping, VF untouched."""
    total = (jnp.astype(state.V[instruction.x], jnp.int32) + instruction.nn) & 0xFF
    return state.replace(V=state.V.at[instruction.x].set(jnp.astype(total, jnp.uint8)))


def execute_set_index(state: EmulatorState, instruction: DecodedInstruction,
                      devices: Optional[Devices] = None) -> EmulatorState:
    """ANNN - Set I = NNN."""
    return state.replace(I=jnp.asarray(instruction.nnn, dtype=jnp.uint16))


def execute_random(state: EmulatorState, instruction: DecodedInstruction,
                   devices: Optional[Devices] = None) -> EmulatorState:
    """CXNN - Set VX = random & NN."""
    random_value = require_number_source(devices).generate()
    return state.replace(V=state.V.at[instruction.x].set((int(random_value) & instruction.nn)))
