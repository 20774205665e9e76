"""CHIP-8 emulator state structures."""

import jax.numpy as jnp
from flax.struct import dataclass, PyTreeNode

from chip8core.constants import (
    MEMORY_SIZE, PROGRAM_START, FONT_START, FONT_DATA, FRAMEBUFFER_SIZE,
    STACK_SIZE, NUM_REGISTERS, NUM_KEYS,
)


@dataclass
class StackState:
    """Stack state for subroutine calls."""
    data: jnp.ndarray
    pointer: jnp.ndarray


class EmulatorState(PyTreeNode):
    """Main CHIP-8 emulator state.

    The framebuffer is flattened row-major: cell (x, y) lives at ``x + y * 64``.
    """
    memory: jnp.ndarray
    pc: jnp.ndarray
    framebuffer: jnp.ndarray
    stack: StackState
    delay_timer: jnp.ndarray
    sound_timer: jnp.ndarray
    keypad: jnp.ndarray
    V: jnp.ndarray
    I: jnp.ndarray


def create_stack() -> StackState:
    """Create an empty call stack."""
    return StackState(
        data=jnp.zeros(STACK_SIZE, dtype=jnp.uint16),
        pointer=jnp.zeros((), dtype=jnp.int32),
    )


def create_state() -> EmulatorState:
    """Create initial emulator state with font data loaded."""
    memory = jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8)
    memory = memory.at[FONT_START:FONT_START + len(FONT_DATA)].set(jnp.array(FONT_DATA, dtype=jnp.uint8))
    return EmulatorState(
        memory=memory,
        pc=jnp.asarray(PROGRAM_START, dtype=jnp.uint16),
        framebuffer=jnp.zeros(FRAMEBUFFER_SIZE, dtype=jnp.uint8),
        stack=create_stack(),
        delay_timer=jnp.zeros((), dtype=jnp.uint8),
        sound_timer=jnp.zeros((), dtype=jnp.uint8),
        keypad=jnp.zeros(NUM_KEYS, dtype=jnp.bool_),
        V=jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8),
        I=jnp.zeros((), dtype=jnp.uint16),
    )
