"""CHIP-8 interpreter package."""

from chip8core.state import EmulatorState, StackState, create_state
from chip8core.emulator import execute, fetch, load_program, load_rom, assemble
from chip8core.decode import DecodedInstruction, decode
from chip8core.timers import tick_timers
from chip8core.errors import (
    Chip8Error, ProgramTooLargeError, InvalidOpcodeError, StackError, StackOverflowError,
    StackUnderflowError, PeripheralError, GraphicsError, AudioError, KeyboardError, NumberSourceError,
)
from chip8core.peripherals import Graphics, Audio, Keyboard, NumberSource, Devices
from chip8core.vm import VM, StepResult
from chip8core.constants import *

__all__ = [
    "EmulatorState",
    "StackState",
    "create_state",
    "fetch",
    "execute",
    "load_program",
    "load_rom",
    "assemble",
    "DecodedInstruction",
    "decode",
    "tick_timers",
    "VM",
    "StepResult",
    "Graphics",
    "Audio",
    "Keyboard",
    "NumberSource",
    "Devices",
    "Chip8Error",
    "ProgramTooLargeError",
    "InvalidOpcodeError",
    "StackError",
    "StackOverflowError",
    "StackUnderflowError",
    "PeripheralError",
    "GraphicsError",
    "AudioError",
    "KeyboardError",
    "NumberSourceError",
    "PROGRAM_START",
    "FONT_START",
    "MEMORY_SIZE",
    "MAX_PROGRAM_SIZE",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
]
