"""Capability interfaces the interpreter calls out through.

A host plugs one object per port into :class:`Devices`. The interpreter never
inspects the concrete types: it only calls the methods declared here, and any
exception they raise aborts the current cycle and reaches the host untouched.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import numpy as np

from chip8core.errors import KeyboardError, NumberSourceError


class Graphics(ABC):
    """Sink receiving the framebuffer after every cycle."""

    @abstractmethod
    def draw(self, framebuffer) -> None:
        """Render a flat, row-major array of 2048 cells holding 0 or 1.

        Raises:
            GraphicsError: If the backend cannot present the frame.
        """


class Audio(ABC):
    """Beeper driven by the sound timer."""

    @abstractmethod
    def play(self) -> None:
        """Start the tone. May raise :class:`AudioError`."""

    @abstractmethod
    def stop(self) -> None:
        """Stop the tone. May raise :class:`AudioError`."""


class Keyboard(ABC):
    """Source of the 16-key hexadecimal keypad state."""

    @abstractmethod
    def update_state(self, keys: np.ndarray) -> bool:
        """Refresh ``keys`` in place and report whether the host wants to quit.

        Args:
            keys: Writable boolean array of shape (16,), one entry per key

        Returns:
            True if termination was requested, False otherwise
        """

    @abstractmethod
    def wait_next_key_press(self) -> int:
        """Block until a key is pressed and return its code (0-15)."""


class NumberSource(ABC):
    """Entropy used by the random instruction."""

    @abstractmethod
    def generate(self) -> int:
        """Return one pseudo-random byte. May raise :class:`NumberSourceError`."""


@dataclass
class Devices:
    """Handles to the four host ports."""
    graphics: Optional[Graphics] = None
    audio: Optional[Audio] = None
    keyboard: Optional[Keyboard] = None
    number_source: Optional[NumberSource] = None


def require_keyboard(devices: Optional[Devices]) -> Keyboard:
    if devices is None or devices.keyboard is None:
        raise KeyboardError("No keyboard attached")
    return devices.keyboard


def require_number_source(devices: Optional[Devices]) -> NumberSource:
    if devices is None or devices.number_source is None:
        raise NumberSourceError("No number source attached")
    return devices.number_source
