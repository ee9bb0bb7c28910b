# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Classification and color core for Choro.

This module provides deterministic class breaks and class colors from a
flat numeric sample. All operations are pure and attribute-based; feature
geometry is never inspected.
"""

from choro.classify.pipeline import ChoroplethConfig, choropleth
from choro.classify.schemes import assign_bins, classify
from choro.classify.sampler import (
    generate_colors,
    generate_gradient_css,
    get_color_at_position,
)
from choro.classify.colorspace import hex_to_rgb, interpolate_color, rgb_to_hex
from choro.classify.labels import format_break, legend_labels

__all__ = [
    "choropleth",
    "ChoroplethConfig",
    "classify",
    "assign_bins",
    "generate_colors",
    "generate_gradient_css",
    "get_color_at_position",
    "hex_to_rgb",
    "rgb_to_hex",
    "interpolate_color",
    "format_break",
    "legend_labels",
]
