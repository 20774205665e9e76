"""CHIP-8 framebuffer conversion utilities for visualization."""

from typing import Tuple

import numpy as np

from chip8core.constants import SCREEN_WIDTH, SCREEN_HEIGHT, FRAMEBUFFER_SIZE


def framebuffer_to_pixels(framebuffer) -> np.ndarray:
    """Reshape a flat framebuffer into a boolean (32 height, 64 width) grid."""
    pixels = np.asarray(framebuffer)
    if pixels.size != FRAMEBUFFER_SIZE:
        raise ValueError(f"Expected {FRAMEBUFFER_SIZE} cells, got {pixels.size}")
    return pixels.reshape(SCREEN_HEIGHT, SCREEN_WIDTH).astype(np.bool_)


def framebuffer_to_rgb(
    framebuffer,
    scale: int = 8,
    on_color: Tuple[int, int, int] = (0, 255, 0),
    off_color: Tuple[int, int, int] = (0, 0, 0),
) -> np.ndarray:
    """Convert a flat CHIP-8 framebuffer to an RGB array with optional upscaling.

    Args:
        framebuffer: Array of 2048 cells (row-major, 0 or 1)
        scale: Upscaling factor for better visibility (default: 8x)
        on_color: RGB color for "on" pixels (default: green)
        off_color: RGB color for "off" pixels (default: black)

    Returns:
        RGB array of shape (32*scale, 64*scale, 3) with uint8 values
    """
    pixels = framebuffer_to_pixels(framebuffer)
    height, width = pixels.shape

    rgb_frame = np.zeros((height, width, 3), dtype=np.uint8)

    rgb_frame[pixels] = on_color
    rgb_frame[~pixels] = off_color

    # Nearest neighbor upscaling
    if scale > 1:
        rgb_frame = np.repeat(np.repeat(rgb_frame, scale, axis=0), scale, axis=1)

    return rgb_frame


def framebuffer_to_text(framebuffer, on: str = "#", off: str = ".") -> str:
    """Render a framebuffer as 32 lines of 64 characters."""
    pixels = framebuffer_to_pixels(framebuffer)
    return "\n".join("".join(on if cell else off for cell in row) for row in pixels)


def create_color_scheme(
    scheme: str = "classic",
) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
    """Get predefined color schemes for CHIP-8 rendering.

    Args:
        scheme: Color scheme name ("classic", "amber", "white", "blue", "retro")

    Returns:
        Tuple of (on_color, off_color) as RGB tuples
    """
    schemes = {
        "classic": ((0, 255, 0), (0, 0, 0)),  # Green on black
        "amber": ((255, 176, 0), (0, 0, 0)),  # Amber on black
        "white": ((255, 255, 255), (0, 0, 0)),  # White on black
        "blue": ((0, 255, 255), (0, 0, 64)),  # Cyan on dark blue
        "retro": ((255, 255, 0), (64, 0, 64)),  # Yellow on purple
    }

    if scheme not in schemes:
        raise ValueError(
            f"Unknown color scheme '{scheme}'. Available: {list(schemes.keys())}"
        )

    return schemes[scheme]
