"""Test configuration and fixtures for CHIP-8 interpreter tests."""

import pytest
import jax.numpy as jnp
from chip8core import create_state, Devices, VM
from chip8core.headless import FrameRecorder, SilentAudio, ScriptedKeyboard, ConstantNumberSource
from chip8core.logging import VMLogger


@pytest.fixture
def fresh_state():
    """Provide a fresh emulator state for each test."""
    return create_state()


@pytest.fixture
def devices():
    """Provide headless devices with a deterministic number source."""
    return Devices(
        graphics=FrameRecorder(),
        audio=SilentAudio(),
        keyboard=ScriptedKeyboard(),
        number_source=ConstantNumberSource(1),
    )


@pytest.fixture
def vm(devices):
    """Provide a VM wired to the headless devices."""
    return VM(
        devices.graphics,
        devices.audio,
        devices.keyboard,
        devices.number_source,
        logger=VMLogger(log_level="CRITICAL"),
    )


def setup_sprite_in_memory(state, address, sprite_bytes):
    """Helper to put sprite data in memory."""
    return state.replace(
        memory=state.memory.at[address:address+len(sprite_bytes)].set(
            jnp.array(sprite_bytes, dtype=jnp.uint8)
        )
    )


def set_registers(state, **registers):
    """Helper to set registers by name, e.g. ``set_registers(state, V1=3, VF=1)``."""
    V = state.V
    for name, value in registers.items():
        V = V.at[int(name[1:], 16)].set(value)
    return state.replace(V=V)


def pixel(state, x, y):
    """Read framebuffer cell (x, y)."""
    return int(state.framebuffer[x + y * 64])
