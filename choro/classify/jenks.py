# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Fisher-Jenks natural breaks.

Finds the partition of sorted values into k contiguous classes that
minimizes the total within-class sum of squared deviations, using the
classic dynamic programme:

- ``cost[l, j]``: lowest total squared deviation for the first ``l``
  values split into ``j`` classes
- ``start[l, j]``: 1-based index of the first value of the last class in
  that optimal split

Both are dense ``(n + 1, k + 1)`` arrays allocated once per call.
Complexity is O(n²k) time and O(nk) space; the loop over candidate class
starts is vectorized, leaving O(nk) Python-level iterations.

References:
- https://en.wikipedia.org/wiki/Jenks_natural_breaks_optimization
- https://www.macwright.org/2013/02/18/literate-jenks.html
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)


def jenks_matrices(
    data: NDArray[np.float64],
    n_classes: int,
) -> tuple[NDArray[np.float64], NDArray[np.int64]]:
    """
    Compute the cost and back-pointer matrices.

    Args:
        data: Sorted 1-D array of n values (n > n_classes)
        n_classes: Number of classes k

    Returns:
        (cost, start) arrays of shape (n + 1, k + 1)
    """
    n = len(data)
    cost = np.full((n + 1, n_classes + 1), np.inf, dtype=np.float64)
    start = np.zeros((n + 1, n_classes + 1), dtype=np.int64)

    # One value fits any number of classes at zero cost
    cost[1, 1:] = 0.0
    start[1, 1:] = 1

    for l in range(2, n + 1):
        # Squared deviation of the last class when it spans data[i4-1 : l],
        # for i4 = l, l-1, ..., 1 (m = 1..l values). Deviations are taken
        # from data[l-1], which every such class contains.
        tail = data[l - 1::-1] - data[l - 1]
        sums = np.cumsum(tail)
        sums_sq = np.cumsum(tail * tail)
        counts = np.arange(1, l + 1, dtype=np.float64)
        # Clip float noise below zero for runs of identical values
        ssd = np.maximum(sums_sq - sums * sums / counts, 0.0)

        cost[l, 1] = ssd[l - 1]
        start[l, 1] = 1

        if n_classes < 2:
            continue

        # Candidate starts for the last class, ascending: i4 = 2..l
        starts = np.arange(2, l + 1)
        last_class = ssd[l - starts]
        for j in range(2, n_classes + 1):
            total = last_class + cost[starts - 1, j - 1]
            # Ties go to the earliest start
            best = int(np.argmin(total))
            cost[l, j] = total[best]
            start[l, j] = starts[best]

    return cost, start


def jenks_breaks(values: NDArray[np.float64], n_classes: int) -> list[float]:
    """
    Natural breaks of sorted values.

    The result starts with the minimum, followed by the upper bound (largest
    member) of each class in ascending order, with repeated bounds removed.
    With ``v <= breaks[i + 1]`` bin assignment this reproduces the optimal
    partition exactly, including a first class made only of the minimum.

    When there are no more values than classes, every distinct value becomes
    its own class.

    Args:
        values: Sorted 1-D array of finite values, at least one
        n_classes: Requested class count k (>= 2)

    Returns:
        Break list; first is min(values), last is max(values)
    """
    data = np.asarray(values, dtype=np.float64)
    n = len(data)

    if n <= n_classes:
        logger.debug("natural breaks: %d values for %d classes, using distinct values", n, n_classes)
        return [float(data[0])] + dedupe_sorted(data)

    _, start = jenks_matrices(data, n_classes)

    # kclass[i] = number of values in classes 1..i
    kclass = [0] * (n_classes + 1)
    kclass[n_classes] = n
    for kk in range(n_classes, 1, -1):
        kclass[kk - 1] = int(start[kclass[kk], kk]) - 1

    uppers = [data[kclass[i] - 1] for i in range(1, n_classes + 1) if kclass[i] >= 1]
    return [float(data[0])] + dedupe_sorted(uppers)


def dedupe_sorted(values) -> list[float]:
    """Sort ascending and drop adjacent duplicates."""
    arr = np.sort(np.asarray(values, dtype=np.float64))
    if arr.size == 0:
        return []
    keep = np.concatenate(([True], arr[1:] != arr[:-1]))
    return [float(v) for v in arr[keep]]
