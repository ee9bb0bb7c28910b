# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Legend block serializer.

Formats a ChoroplethScheme's legend as a structured block (JSON, Markdown
or XML) that a legend widget can render without recomputing anything.
"""

from __future__ import annotations

import json
from typing import Optional
from xml.sax.saxutils import quoteattr

from choro.runtime.serializers.base import LegendFormat
from choro.schema import ChoroplethScheme


def to_legend_block(
    scheme: ChoroplethScheme,
    *,
    format: LegendFormat = LegendFormat.JSON,
    title: Optional[str] = None,
    include_counts: bool = True,
) -> str:
    """Serialize a ChoroplethScheme's legend.

    Args:
        scheme: The ChoroplethScheme to serialize.
        format: Block format (JSON, MARKDOWN or XML).
        title: Optional legend title, usually the attribute column name.
        include_counts: Include the number of features per class.

    Returns:
        Formatted block string.

    Example (XML)::

        <legend scheme="quantile" colormap="viridis" classes="2">
          <class index="0" color="#440154" label="1.00 – 5.00" count="3"/>
          <class index="1" color="#fde725" label="5.00 – 9.00" count="2"/>
        </legend>
    """
    if format == LegendFormat.XML:
        return _to_xml(scheme, title, include_counts)
    elif format == LegendFormat.MARKDOWN:
        return _to_markdown(scheme, title, include_counts)
    else:
        return _to_json(scheme, title, include_counts)


def _entries(scheme: ChoroplethScheme, include_counts: bool) -> list[dict]:
    entries = []
    for entry in scheme.legend:
        d = entry.to_dict()
        if not include_counts:
            d.pop("count")
        entries.append(d)
    return entries


def _to_json(scheme: ChoroplethScheme, title: Optional[str], include_counts: bool) -> str:
    """Generate JSON block."""
    classification = scheme.classification
    data = {
        "scheme": classification.scheme.value,
        "colormap": scheme.colormap,
        "classes": classification.class_count,
        "breaks": list(classification.breaks),
        "entries": _entries(scheme, include_counts),
    }
    if title is not None:
        data = {"title": title, **data}
    return json.dumps(data, indent=2)


def _to_markdown(scheme: ChoroplethScheme, title: Optional[str], include_counts: bool) -> str:
    """Generate a Markdown table."""
    classification = scheme.classification
    lines = []
    if title is not None:
        lines.append(f"**{title}** ({classification.scheme.label}, {scheme.colormap})")
        lines.append("")

    header = "| Class | Color | Range |"
    rule = "|---|---|---|"
    if include_counts:
        header += " Count |"
        rule += "---|"
    lines.extend([header, rule])

    for entry in scheme.legend:
        row = f"| {entry.index} | `{entry.color}` | {entry.label} |"
        if include_counts:
            row += f" {entry.count} |"
        lines.append(row)
    return "\n".join(lines)


def _to_xml(scheme: ChoroplethScheme, title: Optional[str], include_counts: bool) -> str:
    """Generate XML block."""
    classification = scheme.classification
    title_attr = f" title={quoteattr(title)}" if title is not None else ""
    lines = [
        f'<legend{title_attr} scheme="{classification.scheme.value}" '
        f'colormap="{scheme.colormap}" classes="{classification.class_count}">'
    ]
    for entry in scheme.legend:
        count_attr = f' count="{entry.count}"' if include_counts else ""
        lines.append(
            f'  <class index="{entry.index}" color="{entry.color}" '
            f'label={quoteattr(entry.label)}{count_attr}/>'
        )
    lines.append("</legend>")
    return "\n".join(lines)
