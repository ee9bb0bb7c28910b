# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Main choropleth API.

This is the primary entry point: values in, breaks + bins + colors +
legend out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from choro.colormaps import DEFAULT_COLORMAP, get_colormap, is_valid_colormap
from choro.schema import (
    ChoroplethScheme,
    ClassificationScheme,
    LegendEntry,
)
from choro.classify.labels import legend_labels
from choro.classify.sampler import generate_colors
from choro.classify.schemes import classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChoroplethConfig:
    """Defaults and caps for choropleth runs."""

    colormap: str = DEFAULT_COLORMAP
    scheme: ClassificationScheme = ClassificationScheme.QUANTILE
    k: int = 5

    # Requested k is clamped to [2, max_classes]
    max_classes: int = 20

    # Natural breaks is O(n²k); above this many valid samples a warning
    # is logged. Advisory only, nothing is truncated.
    natural_breaks_warn_size: int = 4000

    # Bin for missing (NaN or ±inf) samples. 0 mixes them into the lowest class.
    nodata_bin: int = 0


def choropleth(
    values: Union[Sequence[float], NDArray[np.float64]],
    *,
    scheme: Union[ClassificationScheme, str, None] = None,
    k: Optional[int] = None,
    colormap: Optional[str] = None,
    config: Optional[ChoroplethConfig] = None,
) -> ChoroplethScheme:
    """
    Build a complete choropleth scheme for one attribute column.

    Args:
        values: One number per feature, in feature order (NaN, ±inf = missing)
        scheme: Classification scheme (default from config: quantile)
        k: Requested number of classes (default from config: 5),
            clamped to [2, config.max_classes]
        colormap: Registry name (default from config: viridis). Unknown
            names resolve to viridis.
        config: Defaults and caps (default: ChoroplethConfig())

    Returns:
        ChoroplethScheme with classification, one color per actual class,
        and legend entries

    Example:
        >>> from choro import choropleth
        >>> result = choropleth([3, 8, 1, 42, 7], scheme="natural_breaks", k=3)
        >>> result.colors[result.bins[3]]
        '#fde725'
    """
    config = config or ChoroplethConfig()
    scheme = config.scheme if scheme is None else scheme
    colormap = config.colormap if colormap is None else colormap
    requested = config.k if k is None else k
    k = max(2, min(int(requested), config.max_classes))

    if not is_valid_colormap(colormap):
        logger.warning("Unknown colormap %r, using %s", colormap, DEFAULT_COLORMAP)
        colormap = DEFAULT_COLORMAP

    data = np.asarray(values, dtype=np.float64).ravel()
    if ClassificationScheme.parse(scheme) == ClassificationScheme.NATURAL_BREAKS:
        n_valid = int(np.count_nonzero(np.isfinite(data)))
        if n_valid > config.natural_breaks_warn_size:
            logger.warning(
                "Natural breaks on %d values is O(n²k) and may be slow (k=%d)",
                n_valid, k,
            )

    classification = classify(data, scheme, k, nodata_bin=config.nodata_bin)

    # Colors follow the real class count, not the requested k
    colors = generate_colors(get_colormap(colormap), classification.class_count)
    labels = legend_labels(classification.breaks)
    counts = classification.counts

    legend = tuple(
        LegendEntry(
            index=i,
            color=colors[i],
            lower=classification.breaks[i],
            upper=classification.breaks[i + 1],
            label=labels[i],
            count=counts[i],
        )
        for i in range(classification.class_count)
    )

    return ChoroplethScheme(
        classification=classification,
        colormap=colormap,
        colors=colors,
        legend=legend,
    )
