"""CHIP-8 virtual machine driver."""

from enum import Enum
from typing import Optional

import jax.numpy as jnp
import numpy as np

from chip8core.state import EmulatorState, create_state
from chip8core.emulator import fetch, execute, load_program
from chip8core.errors import Chip8Error
from chip8core.logging import VMLogger
from chip8core.peripherals import Audio, Devices, Graphics, Keyboard, NumberSource
from chip8core.timers import tick_timers


class StepResult(Enum):
    """Signal returned to the host after each cycle."""
    CONTINUE = "continue"
    EXIT = "exit"


class VM:
    """CHIP-8 virtual machine driven one cycle at a time by a host loop.

    The machine owns an immutable :class:`EmulatorState` and the four host
    ports. Each call to :meth:`step` fetches and executes exactly one
    instruction, presents the framebuffer, ticks both timers and polls the
    keyboard. The new state is committed only once all of that succeeded, so
    a step that raises leaves the machine exactly as it was.

    Pacing is the host's business: timers tick once per step regardless of
    the instruction rate the host chooses.
    """

    def __init__(
        self,
        graphics: Graphics,
        audio: Audio,
        keyboard: Keyboard,
        number_source: NumberSource,
        logger: Optional[VMLogger] = None,
    ):
        """Create a machine with font loaded and PC at the program start.

        Args:
            graphics: Sink receiving the framebuffer after every cycle
            audio: Beeper triggered when the sound timer runs out
            keyboard: Keypad state source, also used by the key-wait instruction
            number_source: Byte source for the random instruction
            logger: Logger for load, trace and fault messages (WARNING level by default)
        """
        self.devices = Devices(
            graphics=graphics,
            audio=audio,
            keyboard=keyboard,
            number_source=number_source,
        )
        self.logger = logger or VMLogger(log_level="WARNING")
        self._state = create_state()

    @property
    def state(self) -> EmulatorState:
        """Current committed machine state."""
        return self._state

    def load_program(self, program: bytes):
        """Copy a program image into memory at PC.

        Raises:
            ProgramTooLargeError: If the image does not fit, memory is left untouched
        """
        self._state = load_program(self._state, program)
        self.logger.log_program_loaded(len(program), int(self._state.pc))

    def step(self) -> StepResult:
        """Run one full cycle and tell the host whether to keep going."""
        pc = int(self._state.pc)
        try:
            state, instruction = fetch(self._state)
            self.logger.log_instruction(pc, instruction)
            state = execute(state, instruction, self.devices)
            self.devices.graphics.draw(state.framebuffer)
            state = tick_timers(state, self.devices.audio)
            state, exit_requested = self._poll_keyboard(state)
        except Chip8Error as error:
            self.logger.log_fault(pc, error)
            raise

        self._state = state
        return StepResult.EXIT if exit_requested else StepResult.CONTINUE

    def _poll_keyboard(self, state: EmulatorState) -> tuple[EmulatorState, bool]:
        keys = np.array(state.keypad, dtype=np.bool_)
        exit_requested = bool(self.devices.keyboard.update_state(keys))
        return state.replace(keypad=jnp.asarray(keys, dtype=jnp.bool_)), exit_requested
