"""Tests for framebuffer conversion helpers."""

import numpy as np
import pytest
from chip8core.rendering import (
    framebuffer_to_pixels, framebuffer_to_rgb, framebuffer_to_text, create_color_scheme,
)


def test_pixels_are_row_major():
    framebuffer = np.zeros(2048, dtype=np.uint8)
    framebuffer[5 + 3 * 64] = 1

    pixels = framebuffer_to_pixels(framebuffer)

    assert pixels.shape == (32, 64)
    assert pixels[3, 5]
    assert pixels.sum() == 1


def test_wrong_size_rejected():
    with pytest.raises(ValueError):
        framebuffer_to_pixels(np.zeros(100))


def test_rgb_colors():
    framebuffer = np.zeros(2048, dtype=np.uint8)
    framebuffer[0] = 1
    on_color, off_color = create_color_scheme("amber")

    rgb = framebuffer_to_rgb(framebuffer, scale=1, on_color=on_color, off_color=off_color)

    assert rgb.shape == (32, 64, 3)
    assert tuple(rgb[0, 0]) == on_color
    assert tuple(rgb[0, 1]) == off_color


def test_text_rendering():
    framebuffer = np.zeros(2048, dtype=np.uint8)
    framebuffer[63] = 1

    lines = framebuffer_to_text(framebuffer).splitlines()

    assert len(lines) == 32
    assert lines[0] == "." * 63 + "#"
    assert lines[1] == "." * 64


def test_unknown_color_scheme():
    with pytest.raises(ValueError, match="Unknown color scheme"):
        create_color_scheme("octarine")
