# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Schema definitions for choropleth classification.

All types in this module are immutable (frozen dataclasses).
A classification is computed fresh per request and never altered afterwards.
"""

from choro.schema.choropleth import (
    Classification,
    ClassificationScheme,
    ChoroplethScheme,
    Colormap,
    ColorStop,
    LegendEntry,
)

__all__ = [
    # Color types
    "ColorStop",
    "Colormap",
    # Classification
    "ClassificationScheme",
    "Classification",
    # Legend and top-level container
    "LegendEntry",
    "ChoroplethScheme",
]
