# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""Human-readable break labels for legends."""

from __future__ import annotations

import math
from typing import Sequence

# En dash between class bounds
LABEL_SEPARATOR = " – "


def format_break(value: float) -> str:
    """
    Format a break value for display.

    Magnitude decides the precision:
    - >= 1000: rounded, comma-grouped integer ("12,346")
    - >= 1: 2 decimals ("3.14")
    - >= 0.01: 4 decimals ("0.0123")
    - smaller: exponential with 2 mantissa decimals ("1.23e-5")
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    magnitude = abs(value)
    if magnitude >= 1000:
        return f"{math.floor(value + 0.5):,}"
    if magnitude >= 1:
        return f"{value:.2f}"
    if magnitude >= 0.01:
        return f"{value:.4f}"

    # Python pads the exponent to two digits ("e-05"); keep it unpadded
    mantissa, exponent = f"{value:.2e}".split("e")
    return f"{mantissa}e{int(exponent):+d}"


def legend_labels(breaks: Sequence[float]) -> tuple[str, ...]:
    """One "lo – hi" label per class."""
    return tuple(
        f"{format_break(breaks[i])}{LABEL_SEPARATOR}{format_break(breaks[i + 1])}"
        for i in range(len(breaks) - 1)
    )
