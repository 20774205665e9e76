"""CHIP-8 display operations."""

from typing import Optional

import jax.numpy as jnp
from chip8core.state import EmulatorState
from chip8core.decode import DecodedInstruction
from chip8core.constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, SPRITE_WIDTH, MAX_SPRITE_HEIGHT, MEMORY_SIZE, FLAG_REGISTER,
)
from chip8core.peripherals import Devices

# Pre-computed sprite-local coordinate grids, one entry per (row, column) bit
rows, cols = jnp.meshgrid(jnp.arange(MAX_SPRITE_HEIGHT), jnp.arange(SPRITE_WIDTH), indexing='ij')


def execute_display(state: EmulatorState, instruction: DecodedInstruction,
                    devices: Optional[Devices] = None) -> EmulatorState:
    """DXYN - Draw sprite at (VX, VY) with height N.

    Each sprite bit toggles the cell it lands on, wrapping around both screen
    edges. VF ends up 1 when any set bit hits a lit cell, 0 otherwise.
    """
    origin_x = jnp.astype(state.V[instruction.x], jnp.int32)
    origin_y = jnp.astype(state.V[instruction.y], jnp.int32)

    addresses = (jnp.astype(state.I, jnp.int32) + rows) % MEMORY_SIZE
    sprite_bytes = jnp.astype(state.memory[addresses], jnp.int32)
    bits = (sprite_bytes >> (SPRITE_WIDTH - 1 - cols)) & 1
    bits = jnp.where(rows < instruction.n, bits, 0)

    target_x = (origin_x + cols) % SCREEN_WIDTH
    target_y = (origin_y + rows) % SCREEN_HEIGHT
    targets = target_x + target_y * SCREEN_WIDTH

    current = jnp.astype(state.framebuffer[targets], jnp.int32)
    collision = jnp.any((current & bits) == 1)

    return state.replace(
        framebuffer=state.framebuffer.at[targets].set(jnp.astype(current ^ bits, jnp.uint8)),
        V=state.V.at[FLAG_REGISTER].set(jnp.astype(collision, jnp.uint8))
    )
