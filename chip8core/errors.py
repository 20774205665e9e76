"""Exceptions raised by the CHIP-8 interpreter."""


class Chip8Error(Exception):
    """Base class for every interpreter failure."""


class ProgramTooLargeError(Chip8Error):
    """Program does not fit between the load address and the end of memory."""

    def __init__(self, size: int, capacity: int):
        self.size = size
        self.capacity = capacity
        super().__init__(f"Unable to load program: {size} bytes exceeds the {capacity} bytes available")


class InvalidOpcodeError(Chip8Error):
    """No instruction matches the fetched opcode."""

    def __init__(self, opcode: int):
        self.opcode = opcode
        super().__init__(f"Invalid opcode: 0x{opcode:04X}")


class StackError(Chip8Error):
    """Call stack misuse."""


class StackOverflowError(StackError):
    """Subroutine call with all stack slots in use."""

    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(f"Stack exhausted: cannot call beyond {depth} nested subroutines")


class StackUnderflowError(StackError):
    """Return executed with an empty call stack."""

    def __init__(self):
        super().__init__("Stack underflow: return with no active subroutine")


class PeripheralError(Chip8Error):
    """Failure reported by one of the host devices."""


class GraphicsError(PeripheralError):
    """Graphics sink could not draw the framebuffer."""

    def __init__(self, message: str):
        super().__init__(f"Error while drawing graphics: {message}")


class AudioError(PeripheralError):
    """Audio device could not start or stop playback."""


class KeyboardError(PeripheralError):
    """Keyboard source failed or is missing."""


class NumberSourceError(PeripheralError):
    """Number source could not produce a byte."""
