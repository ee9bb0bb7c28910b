# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Serializers for ChoroplethScheme delivery to legend and style collaborators.

All serializers preserve the scheme exactly; nothing is reclassified.
"""

from choro.runtime.serializers.base import LegendFormat
from choro.runtime.serializers.legend import to_legend_block
from choro.runtime.serializers.features import annotate_features, extract_values

__all__ = [
    "LegendFormat",
    "to_legend_block",
    "annotate_features",
    "extract_values",
]
