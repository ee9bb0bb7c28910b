# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Choro.

Hands classification results to the collaborators that render them:

1. Feature values -- Pull one numeric attribute out of feature property dicts
2. Feature annotation -- Attach per-feature color and bin properties
3. Legend block -- Class colors and labels as JSON, Markdown or XML

The delivery layer never modifies classification content.
"""

from choro.runtime.serializers import (
    LegendFormat,
    annotate_features,
    extract_values,
    to_legend_block,
)

__all__ = [
    "extract_values",
    "annotate_features",
    "to_legend_block",
    "LegendFormat",
]
