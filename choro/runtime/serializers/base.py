# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""Base types for serializers."""

from enum import Enum


class LegendFormat(Enum):
    """Output format for legend blocks."""

    JSON = "json"
    MARKDOWN = "markdown"
    XML = "xml"
