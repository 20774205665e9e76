"""Window-less implementations of the host ports.

These devices let a program run without a display, speaker or real keyboard:
in tests, in batch runs from ``run.py``, or as a base for richer frontends.
"""

from collections import deque
from typing import Iterable, Optional

import jax
import numpy as np

from chip8core.errors import KeyboardError, NumberSourceError
from chip8core.peripherals import Audio, Graphics, Keyboard, NumberSource
from chip8core.rendering import framebuffer_to_rgb, create_color_scheme


class FrameRecorder(Graphics):
    """Graphics sink that keeps the frames it is given.

    Args:
        history: Number of most recent frames kept in ``frames``, latest included (0 keeps none)
        color_scheme: Scheme used by :meth:`to_rgb`
    """

    def __init__(self, history: int = 0, color_scheme: str = "classic"):
        self.draw_count = 0
        self.last_frame: Optional[np.ndarray] = None
        self.frames = deque(maxlen=history) if history > 0 else None
        self.on_color, self.off_color = create_color_scheme(color_scheme)

    def draw(self, framebuffer) -> None:
        frame = np.array(framebuffer, dtype=np.uint8)
        self.last_frame = frame
        self.draw_count += 1
        if self.frames is not None:
            self.frames.append(frame)

    def to_rgb(self, scale: int = 8) -> np.ndarray:
        """Latest frame as an RGB image."""
        if self.last_frame is None:
            raise ValueError("No frame has been drawn yet")
        return framebuffer_to_rgb(self.last_frame, scale, self.on_color, self.off_color)


class SilentAudio(Audio):
    """Audio device that only records what it was asked to do."""

    def __init__(self):
        self.play_count = 0
        self.stop_count = 0
        self.playing = False

    def play(self) -> None:
        self.play_count += 1
        self.playing = True

    def stop(self) -> None:
        self.stop_count += 1
        self.playing = False


class ScriptedKeyboard(Keyboard):
    """Keyboard replaying a fixed script.

    Args:
        presses: Key codes handed out, in order, to blocking key waits
        held: Keys reported as held down on every poll
        exit_after: Request termination on this poll (1-based), never if None
    """

    def __init__(
        self,
        presses: Iterable[int] = (),
        held: Iterable[int] = (),
        exit_after: Optional[int] = None,
    ):
        self.presses = deque(int(key) & 0xF for key in presses)
        self.held = {int(key) & 0xF for key in held}
        self.exit_after = exit_after
        self.poll_count = 0

    def press(self, key: int):
        """Queue another key for the next blocking wait."""
        self.presses.append(int(key) & 0xF)

    def update_state(self, keys: np.ndarray) -> bool:
        self.poll_count += 1
        keys[:] = False
        for key in self.held:
            keys[key] = True
        return self.exit_after is not None and self.poll_count >= self.exit_after

    def wait_next_key_press(self) -> int:
        if not self.presses:
            raise KeyboardError("Key wait with no scripted key presses left")
        return self.presses.popleft()


class JaxNumberSource(NumberSource):
    """Pseudo-random bytes drawn from a ``jax.random`` key stream."""

    def __init__(self, rng: Optional[jax.Array] = None, seed: int = 0):
        self.rng = rng if rng is not None else jax.random.PRNGKey(seed)

    def generate(self) -> int:
        self.rng, subkey = jax.random.split(self.rng)
        return int(jax.random.randint(subkey, shape=(), minval=0, maxval=256))


class ConstantNumberSource(NumberSource):
    """Number source that always yields the same byte."""

    def __init__(self, value: int = 1):
        if not 0 <= value <= 0xFF:
            raise NumberSourceError(f"Value {value} does not fit in a byte")
        self.value = value

    def generate(self) -> int:
        return self.value
