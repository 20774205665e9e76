"""CHIP-8 delay and sound timers."""

from typing import Optional

import jax.numpy as jnp
from chip8core.state import EmulatorState
from chip8core.peripherals import Audio


def _count_down(timer: jnp.ndarray) -> jnp.ndarray:
    return jnp.astype(jnp.where(timer > 0, timer - 1, timer), jnp.uint8)


def tick_timers(state: EmulatorState, audio: Optional[Audio] = None) -> EmulatorState:
    """Decrement both timers once, beeping as the sound timer runs out.

    The beep is triggered only on the tick that takes the sound timer from 1
    to 0. Errors from the audio device propagate to the caller.
    """
    if int(state.sound_timer) == 1 and audio is not None:
        audio.play()
    return state.replace(
        delay_timer=_count_down(state.delay_timer),
        sound_timer=_count_down(state.sound_timer),
    )
