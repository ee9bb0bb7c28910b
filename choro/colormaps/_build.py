# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""Construction helper for the built-in colormap tables."""

from __future__ import annotations

from choro.schema import Colormap, ColorStop


def build(name: str, stops: list[tuple[float, str]], kind: str = "sequential") -> Colormap:
    """Build a validated Colormap from (position, hex) pairs."""
    return Colormap(
        name=name,
        stops=tuple(ColorStop(position=p, color=c) for p, c in stops),
        kind=kind,
    )
