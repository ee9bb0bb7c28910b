# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Choro -- Choropleth classification and color schemes.

Assigns each numeric sample to one of k ordered classes using a statistical
partitioning rule, then colors each class from a continuous colormap.

Quick start::

    from choro import choropleth

    result = choropleth(values, scheme="natural_breaks", k=5, colormap="viridis")
    result.breaks          # Class boundaries
    result.bins            # Class index per value
    result.colors          # One hex color per class
    result.labels          # "lo – hi" legend labels
"""

from __future__ import annotations

__version__ = "1.0.0"

from choro.classify import ChoroplethConfig, choropleth, classify, generate_colors
from choro.colormaps import get_colormap, get_colormap_names, is_valid_colormap
from choro.schema import (
    Classification,
    ClassificationScheme,
    ChoroplethScheme,
    Colormap,
    ColorStop,
    LegendEntry,
)

__all__ = [
    # Core API
    "choropleth",
    "classify",
    "generate_colors",
    "ChoroplethConfig",
    "ChoroplethScheme",
    # Colormap registry
    "get_colormap",
    "is_valid_colormap",
    "get_colormap_names",
    # Types (commonly needed)
    "ClassificationScheme",
    "Classification",
    "Colormap",
    "ColorStop",
    "LegendEntry",
    # Version
    "__version__",
]
