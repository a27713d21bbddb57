"""
Module: colors

Purpose:
    Convert packed 0xRRGGBB integers into reportlab colors with channels
    in the unit interval.

Dependencies:
    - reportlab: Color type
"""

from __future__ import annotations

from reportlab.lib.colors import Color


def hex_to_rgb(value: int) -> Color:
    """
    Convert a packed hex color to an RGB color.

    Args:
        value: Integer like 0xFF0000

    Returns:
        reportlab Color with red/green/blue in [0, 1]

    Raises:
        ValueError: If value is outside 0x000000..0xFFFFFF

    Example:
        >>> c = hex_to_rgb(0xFFFFFF)
        >>> (c.red, c.green, c.blue)
        (1.0, 1.0, 1.0)
    """
    if isinstance(value, bool) or not 0 <= value <= 0xFFFFFF:
        raise ValueError(f"color must be in 0x000000..0xFFFFFF: {value!r}")

    r = (value >> 16) & 0xFF
    g = (value >> 8) & 0xFF
    b = value & 0xFF
    return Color(r / 255, g / 255, b / 255)
