# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Feature property helpers.

Works on GeoJSON-style feature dicts but only ever touches ``properties``;
geometry is passed through untouched and never read.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Iterable, Mapping

import numpy as np
from numpy.typing import NDArray

from choro.schema import ChoroplethScheme

COLOR_PROPERTY = "_choropleth_color"
BIN_PROPERTY = "_choropleth_bin"


def extract_values(features: Iterable[Mapping[str, Any]], column: str) -> NDArray[np.float64]:
    """
    Pull one numeric attribute out of each feature, in feature order.

    Real numbers become floats. Missing properties, booleans, strings and
    anything else non-numeric become NaN, so the output always lines up
    1:1 with the features.

    Args:
        features: Feature dicts with an optional "properties" mapping
        column: Property name to read

    Returns:
        float64 array, one entry per feature
    """
    out = []
    for feature in features:
        props = feature.get("properties") or {}
        value = props.get(column)
        if isinstance(value, Real) and not isinstance(value, bool):
            out.append(float(value))
        else:
            out.append(np.nan)
    return np.asarray(out, dtype=np.float64)


def annotate_features(
    features: Iterable[Mapping[str, Any]],
    scheme: ChoroplethScheme,
) -> list[dict]:
    """
    Copy features with their class color and bin added to the properties.

    The input features are not modified. Feature ``i`` is matched with
    ``scheme.bins[i]``; renderers can then style by ``["get",
    "_choropleth_color"]``.

    Raises:
        ValueError: If the feature count differs from the classified sample count
    """
    features = list(features)
    bins = scheme.bins
    if len(features) != len(bins):
        raise ValueError(
            f"Feature count ({len(features)}) does not match "
            f"classified sample count ({len(bins)})"
        )

    annotated = []
    for feature, bin_index in zip(features, bins):
        props = dict(feature.get("properties") or {})
        props[COLOR_PROPERTY] = scheme.color_of(bin_index)
        props[BIN_PROPERTY] = bin_index
        annotated.append({**feature, "properties": props})
    return annotated
