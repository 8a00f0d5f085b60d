"""
Color helpers - parsing, interpolation, blending and gradients

Channels are stored 0-255. Interpolation and blending work in the 16-bit
domain (c * 257), truncate, and shift back down by 8 bits, so the endpoints
of a gradient come back out exactly.
"""

import numpy as np
from typing import List, Sequence, Tuple, Union


Color = Tuple[int, int, int, int]     # RGBA 0-255


# =============================================================================
# Parsing
# =============================================================================

def parse_color(value: Union[str, Sequence[int]]) -> Color:
    """
    Parse a color into an RGBA tuple.

    Accepts '#RRGGBB', '#RRGGBBAA', 'r,g,b', 'r,g,b,a' or a 3/4-tuple.
    Missing alpha defaults to 255.
    """
    if isinstance(value, str):
        text = value.strip()
        if text.startswith('#'):
            hex_digits = text[1:]
            if len(hex_digits) not in (6, 8):
                raise ValueError(f"Invalid hex color: {value!r}")
            try:
                channels = [int(hex_digits[i:i + 2], 16) for i in range(0, len(hex_digits), 2)]
            except ValueError:
                raise ValueError(f"Invalid hex color: {value!r}") from None
        else:
            try:
                channels = [int(part) for part in text.split(',')]
            except ValueError:
                raise ValueError(f"Invalid color: {value!r}") from None
    else:
        channels = [int(c) for c in value]

    if len(channels) == 3:
        channels.append(255)
    if len(channels) != 4:
        raise ValueError(f"Color must have 3 or 4 channels: {value!r}")
    if any(c < 0 or c > 255 for c in channels):
        raise ValueError(f"Color channels must be 0-255: {value!r}")

    return tuple(channels)


def to_hex(color: Color) -> str:
    """Format an RGBA color as '#RRGGBBAA'"""
    return '#' + ''.join(f'{c:02X}' for c in color)


# =============================================================================
# Interpolation
# =============================================================================

def _to_16bit(color: Color) -> List[int]:
    return [c * 257 for c in color]


def interpolate_color(color_a: Color, color_b: Color, t: float) -> Color:
    """Color between color_a and color_b at t (0.0 - 1.0)"""
    a16 = _to_16bit(color_a)
    b16 = _to_16bit(color_b)
    return tuple(int(a + t * (b - a)) >> 8 for a, b in zip(a16, b16))


def blend_colors(color_a: Color, color_b: Color, intensity: float) -> Color:
    """Blend color_b over color_a with the given intensity (0.0 - 1.0)"""
    a16 = _to_16bit(color_a)
    b16 = _to_16bit(color_b)
    return tuple(int(a * (1.0 - intensity) + b * intensity) >> 8 for a, b in zip(a16, b16))


def build_gradient(color_a: Color, color_b: Color, count: int) -> List[Color]:
    """
    Build an ordered gradient of `count` colors from color_a to color_b.

    Entry i is the interpolation at i / (count - 1), so entry 0 is color_a
    and entry count - 1 is color_b.
    """
    if count < 2:
        raise ValueError(f"Gradient needs at least 2 colors, got {count}")

    return [interpolate_color(color_a, color_b, i / (count - 1)) for i in range(count)]


# =============================================================================
# Pixel operations
# =============================================================================

def replace_color(pixels: np.ndarray, from_color: Color, to_color: Color) -> np.ndarray:
    """Copy of an RGBA array with every exact match of from_color replaced"""
    result = pixels.copy()
    match = np.all(pixels == np.array(from_color, dtype=pixels.dtype), axis=2)
    result[match] = to_color
    return result
