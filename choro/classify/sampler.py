# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Colormap sampling.

Turns a colormap (ordered color stops over [0, 1]) into concrete colors:
one color at an arbitrary position, or one color per class at evenly
spaced positions with both endpoints included.
"""

from __future__ import annotations

from typing import Sequence, Union

from choro.colormaps import get_colormap
from choro.schema import Colormap, ColorStop
from choro.classify.colorspace import interpolate_color


StopsLike = Union[Colormap, Sequence[ColorStop]]


def get_color_at_position(stops: StopsLike, position: float) -> str:
    """
    Sample a colormap at a normalized position.

    The position is clamped to [0, 1]. The first pair of adjacent stops
    that brackets it is used; at or beyond a bracket endpoint that stop's
    color is returned as-is, otherwise the two colors are interpolated
    in RGB space.

    Args:
        stops: Colormap or sequence of ColorStop ordered by position
        position: Position to sample (values outside 0-1 are clamped)

    Returns:
        Hex color string
    """
    pos = max(0.0, min(1.0, float(position)))

    lower = stops[0]
    upper = stops[len(stops) - 1]
    for i in range(len(stops) - 1):
        if stops[i].position <= pos <= stops[i + 1].position:
            lower = stops[i]
            upper = stops[i + 1]
            break

    if pos <= lower.position:
        return lower.color
    if pos >= upper.position:
        return upper.color

    span = upper.position - lower.position
    factor = 0.0 if span == 0 else (pos - lower.position) / span
    return interpolate_color(lower.color, upper.color, factor)


def generate_colors(colormap: Union[str, StopsLike], num_colors: int) -> tuple[str, ...]:
    """
    Sample ``num_colors`` evenly spaced colors from a colormap.

    A single color is taken from the middle of the gradient (position 0.5);
    otherwise positions are ``i / (num_colors - 1)``, endpoints included.

    Args:
        colormap: Registry name (unknown names resolve to viridis) or stops
        num_colors: Number of colors, normally the class count

    Returns:
        Tuple of hex colors, lowest class first
    """
    stops = get_colormap(colormap) if isinstance(colormap, str) else colormap
    colors = []
    for i in range(num_colors):
        position = 0.5 if num_colors == 1 else i / (num_colors - 1)
        colors.append(get_color_at_position(stops, position))
    return tuple(colors)


def generate_gradient_css(stops: Union[str, StopsLike], direction: str = "to right") -> str:
    """
    Build a CSS ``linear-gradient`` from color stops.

    Used by colorbar widgets to paint the continuous gradient behind
    class ticks.

    Example::

        >>> generate_gradient_css("gray")
        'linear-gradient(to right, #000000 0%, #ffffff 100%)'
    """
    if isinstance(stops, str):
        stops = get_colormap(stops)
    parts = ", ".join(f"{s.color} {s.position * 100:g}%" for s in stops)
    return f"linear-gradient({direction}, {parts})"
