# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Classification of numeric samples into ordered classes.

Five schemes:
1. Equal interval: k classes of equal width between min and max
2. Quantile: boundaries at sorted ranks floor(i·n/k)
3. Natural breaks: Fisher-Jenks optimal partition (see jenks.py)
4. Standard deviation: boundaries at mean ± 1, 2 std inside (min, max)
5. Head/tail: repeated tail means, for heavy-tailed distributions

Non-finite samples (NaN, ±inf) are treated as missing: they are skipped
when computing breaks but keep their position in the bin output. Nothing
here raises for numeric input: empty input, all-missing input and constant
input each resolve to a valid single-class result.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from choro.schema import Classification, ClassificationScheme
from choro.classify.jenks import dedupe_sorted, jenks_breaks

logger = logging.getLogger(__name__)

# Multiples of the standard deviation used by the STD_MEAN scheme
_STD_MULTIPLES = (-2, -1, 0, 1, 2)


def classify(
    values: Union[Sequence[float], NDArray[np.float64]],
    scheme: Union[ClassificationScheme, str] = ClassificationScheme.QUANTILE,
    k: int = 5,
    *,
    nodata_bin: int = 0,
) -> Classification:
    """
    Partition samples into at most k ordered classes.

    Args:
        values: One number per feature, in feature order. NaN and ±inf
            mark missing samples.
        scheme: ClassificationScheme or its string value. Unknown names
            fall back to equal interval.
        k: Requested class count (values below 2 are raised to 2).
            Callers cap the upper end; natural breaks is O(n²k).
        nodata_bin: Bin assigned to missing samples (default 0, the lowest
            class).

    Returns:
        Classification with breaks and per-sample bins. Read
        ``class_count`` for the real number of classes.

    Example:
        >>> breaks, bins = classify([0, 100], "equal_interval", 4)
        >>> breaks
        (0.0, 25.0, 50.0, 75.0, 100.0)
    """
    data = np.asarray(values, dtype=np.float64).ravel()
    k = max(int(k), 2)

    resolved = ClassificationScheme.parse(scheme)
    if resolved is None:
        logger.warning("Unknown classification scheme %r, using equal interval", scheme)
        resolved = ClassificationScheme.EQUAL_INTERVAL

    finite = np.isfinite(data)
    missing = int(data.size - finite.sum())
    valid = np.sort(data[finite])

    if valid.size == 0:
        logger.debug("No valid values to classify (%d samples)", data.size)
        return Classification(
            breaks=(0.0, 1.0),
            bins=(0,) * data.size,
            scheme=resolved,
            requested_k=k,
            missing=missing,
        )

    breaks = _compute_breaks(valid, resolved, k)
    if len(breaks) < 2:
        # All valid samples are equal; keep one class
        logger.debug("Breaks collapsed to %r, widening to a single class", breaks)
        breaks = [breaks[0], breaks[0]]

    bins = assign_bins(data, breaks, nodata_bin=nodata_bin)
    return Classification(
        breaks=tuple(float(b) for b in breaks),
        bins=tuple(int(b) for b in bins),
        scheme=resolved,
        requested_k=k,
        missing=missing,
    )


def _compute_breaks(
    sorted_values: NDArray[np.float64],
    scheme: ClassificationScheme,
    k: int,
) -> list[float]:
    """Dispatch to the scheme's break computation."""
    if scheme == ClassificationScheme.EQUAL_INTERVAL:
        return equal_interval_breaks(sorted_values, k)
    elif scheme == ClassificationScheme.QUANTILE:
        return quantile_breaks(sorted_values, k)
    elif scheme == ClassificationScheme.NATURAL_BREAKS:
        return jenks_breaks(sorted_values, k)
    elif scheme == ClassificationScheme.STD_MEAN:
        return std_mean_breaks(sorted_values)
    else:
        return head_tail_breaks(sorted_values, k)


# =============================================================================
# Schemes (all take ascending, finite, non-empty arrays)
# =============================================================================


def equal_interval_breaks(sorted_values: NDArray[np.float64], k: int) -> list[float]:
    """k classes of equal width; exactly k + 1 breaks, no dedupe."""
    lo = float(sorted_values[0])
    hi = float(sorted_values[-1])
    step = (hi - lo) / k
    return [lo] + [lo + step * i for i in range(1, k)] + [hi]


def quantile_breaks(sorted_values: NDArray[np.float64], k: int) -> list[float]:
    """
    Boundaries at sorted ranks floor(i·n/k) for i = 1..k-1.

    Repeated values can make neighbouring ranks share a boundary; those
    are merged, so fewer than k classes may come back.
    """
    n = len(sorted_values)
    breaks = [float(sorted_values[0])]
    for i in range(1, k):
        idx = min((i * n) // k, n - 1)
        breaks.append(float(sorted_values[idx]))
    breaks.append(float(sorted_values[-1]))
    return dedupe_sorted(breaks)


def std_mean_breaks(sorted_values: NDArray[np.float64]) -> list[float]:
    """
    Boundaries at mean + m·std for m in -2..2, kept only strictly inside
    (min, max). Uses the population standard deviation.

    Produces up to 6 classes regardless of the requested k.
    """
    lo = float(sorted_values[0])
    hi = float(sorted_values[-1])
    mean = float(np.mean(sorted_values))
    std = float(np.std(sorted_values))

    breaks = [lo]
    for m in _STD_MULTIPLES:
        b = mean + m * std
        if lo < b < hi:
            breaks.append(b)
    breaks.append(hi)
    return dedupe_sorted(breaks)


def head_tail_breaks(sorted_values: NDArray[np.float64], k: int) -> list[float]:
    """
    Head/tail breaks for heavy-tailed data.

    Repeatedly takes the mean of the current tail (initially everything)
    as a boundary and keeps only values strictly above it. Stops when k
    boundaries are collected, the tail has at most one value, or the mean
    no longer rises above the previous boundary.
    """
    breaks = [float(sorted_values[0])]
    tail = sorted_values
    while len(breaks) < k and len(tail) > 1:
        mean = float(np.mean(tail))
        if mean <= breaks[-1]:
            break
        breaks.append(mean)
        tail = tail[tail > mean]
    breaks.append(float(sorted_values[-1]))
    return dedupe_sorted(breaks)


# =============================================================================
# Bin Assignment
# =============================================================================


def assign_bins(
    values: NDArray[np.float64],
    breaks: Sequence[float],
    *,
    nodata_bin: int = 0,
) -> NDArray[np.int64]:
    """
    Class index for each value.

    A value falls in the first class ``i`` with ``v <= breaks[i + 1]``;
    the last class is closed at both ends. Values above the last break are
    clipped into the last class. NaN and ±inf get ``nodata_bin``.

    Args:
        values: Samples in input order
        breaks: Ascending boundaries, at least 2

    Returns:
        Array of int64 class indices parallel to ``values``
    """
    data = np.asarray(values, dtype=np.float64)
    upper = np.asarray(breaks[1:], dtype=np.float64)
    n_classes = len(upper)

    bins = np.searchsorted(upper, data, side="left")
    bins = np.minimum(bins, n_classes - 1).astype(np.int64)
    bins[~np.isfinite(data)] = nodata_bin
    return bins
