# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Color space utilities.

Conversion chain: hex text ↔ sRGB uint8 channels, plus per-channel linear
interpolation in sRGB space.

Rounding rule: channels are rounded half-up (``floor(x + 0.5)``), so the
midpoint between black and white is #808080. Malformed hex never raises;
parsing returns None and interpolation hands back the first color.
"""

from __future__ import annotations

import re
from typing import Optional

import numpy as np
from numpy.typing import NDArray


_HEX_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


# =============================================================================
# Hex ↔ RGB
# =============================================================================


def hex_to_rgb(hex_color: str) -> Optional[tuple[int, int, int]]:
    """
    Convert a hex color string to RGB channels.

    Args:
        hex_color: Hex string like "#3941c8" or "3941C8"

    Returns:
        Tuple of (r, g, b) in [0, 255], or None for malformed input
    """
    if not isinstance(hex_color, str):
        return None
    m = _HEX_RE.match(hex_color)
    if not m:
        return None
    return int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16)


def round_half_up(values: NDArray[np.float64]) -> NDArray[np.int64]:
    """Round to nearest integer, ties toward +inf."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5).astype(np.int64)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """
    Convert RGB channels to a lowercase hex color string.

    Channels are rounded half-up and clamped to [0, 255].

    Returns:
        Hex string like "#3941c8"
    """
    channels = np.clip(round_half_up(np.array([r, g, b])), 0, 255)
    red, green, blue = (int(c) for c in channels)
    return f"#{red:02x}{green:02x}{blue:02x}"


# =============================================================================
# Interpolation
# =============================================================================


def interpolate_color(color1: str, color2: str, factor: float) -> str:
    """
    Linearly interpolate between two hex colors.

    Each channel is ``round_half_up(c1 + (c2 - c1) * factor)``.

    Args:
        color1: Color at factor 0
        color2: Color at factor 1
        factor: Interpolation factor, normally 0-1

    Returns:
        Interpolated hex color, or ``color1`` unchanged if either
        input cannot be parsed
    """
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)
    if rgb1 is None or rgb2 is None:
        return color1

    start = np.array(rgb1, dtype=np.float64)
    end = np.array(rgb2, dtype=np.float64)
    r, g, b = round_half_up(start + (end - start) * factor)
    return rgb_to_hex(r, g, b)
