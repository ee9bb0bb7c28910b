# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Built-in colormap registry.

The registry is built once at import and exposed through a read-only
mapping. Lookups never mutate it, so it is safe to share across callers.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from choro.schema import Colormap
from choro.colormaps.sequential import viridis, plasma, inferno, magma, cividis
from choro.colormaps.diverging import (
    coolwarm,
    bwr,
    seismic,
    RdBu,
    RdYlBu,
    RdYlGn,
    spectral,
)
from choro.colormaps.misc import (
    jet,
    rainbow,
    turbo,
    terrain,
    ocean,
    hot,
    cool,
    gray,
    bone,
)

DEFAULT_COLORMAP = "viridis"

COLORMAPS: Mapping[str, Colormap] = MappingProxyType({
    cmap.name: cmap
    for cmap in (
        # Sequential
        viridis, plasma, inferno, magma, cividis,
        # Diverging
        coolwarm, bwr, seismic, RdBu, RdYlBu, RdYlGn, spectral,
        # Miscellaneous
        jet, rainbow, turbo, terrain, ocean, hot, cool, gray, bone,
    )
})


def get_colormap(name: str) -> Colormap:
    """
    Get a colormap by name.

    Unknown names resolve to viridis rather than raising.
    """
    return COLORMAPS.get(name, COLORMAPS[DEFAULT_COLORMAP])


def is_valid_colormap(name: str) -> bool:
    """True if ``name`` is a registered colormap (case-sensitive)."""
    return name in COLORMAPS


def get_colormap_names() -> tuple[str, ...]:
    """All registered colormap names, in registry order."""
    return tuple(COLORMAPS)


__all__ = [
    "COLORMAPS",
    "DEFAULT_COLORMAP",
    "get_colormap",
    "is_valid_colormap",
    "get_colormap_names",
    # Individual colormaps
    "viridis", "plasma", "inferno", "magma", "cividis",
    "coolwarm", "bwr", "seismic", "RdBu", "RdYlBu", "RdYlGn", "spectral",
    "jet", "rainbow", "turbo", "terrain", "ocean", "hot", "cool", "gray", "bone",
]
