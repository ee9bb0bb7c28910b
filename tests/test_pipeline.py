# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""Tests for the end-to-end choropleth API."""

import logging

import numpy as np
import pytest

from choro import ChoroplethConfig, ChoroplethScheme, choropleth
from choro.schema import ClassificationScheme


class TestChoropleth:

    def test_equal_interval_gray(self):
        result = choropleth([0, 100], scheme="equal_interval", k=4, colormap="gray")
        assert result.breaks == (0.0, 25.0, 50.0, 75.0, 100.0)
        assert result.colors == ("#000000", "#555555", "#aaaaaa", "#ffffff")
        assert result.feature_colors == ("#000000", "#ffffff")
        assert result.labels == (
            "0.00e+0 – 25.00",
            "25.00 – 50.00",
            "50.00 – 75.00",
            "75.00 – 100.00",
        )

    def test_defaults(self):
        result = choropleth(list(range(1, 101)))
        assert result.colormap == "viridis"
        assert result.classification.scheme == ClassificationScheme.QUANTILE
        assert result.classification.class_count == 5
        assert result.colors[0] == "#440154"
        assert result.colors[-1] == "#fde725"

    def test_colors_follow_actual_class_count(self):
        result = choropleth([1] * 8 + [2], scheme="quantile", k=4)
        assert result.classification.class_count == 1
        assert result.colors == ("#1f9e89",)

    def test_legend_entries(self):
        result = choropleth(
            [1, 1, 1, 10, 10, 10, 100, 100, 100],
            scheme=ClassificationScheme.NATURAL_BREAKS,
            k=3,
            colormap="gray",
        )
        assert [e.count for e in result.legend] == [3, 3, 3]
        assert [e.color for e in result.legend] == list(result.colors)
        assert result.legend[1].lower == 1.0
        assert result.legend[1].upper == 10.0
        assert result.legend[2].label == "10.00 – 100.00"

    def test_k_clamped_to_max_classes(self):
        result = choropleth(np.arange(100.0), scheme="equal_interval", k=50)
        assert result.classification.requested_k == 20
        assert result.classification.class_count == 20
        assert len(result.colors) == 20

    def test_k_clamped_from_below(self):
        result = choropleth([0, 10], scheme="equal_interval", k=0)
        assert result.classification.class_count == 2

    def test_custom_config(self):
        config = ChoroplethConfig(colormap="gray", scheme=ClassificationScheme.EQUAL_INTERVAL, k=2, max_classes=3)
        result = choropleth([0, 10], config=config)
        assert result.colors == ("#000000", "#ffffff")
        assert choropleth([0, 10], k=10, config=config).classification.class_count == 3

    def test_nodata_bin_from_config(self):
        config = ChoroplethConfig(nodata_bin=-1)
        result = choropleth([np.nan, 1, 2, 3], scheme="equal_interval", k=2, config=config)
        assert result.bins[0] == -1
        assert result.feature_colors[0] == result.colors[0]

    def test_unknown_colormap_warns_and_uses_viridis(self, caplog):
        with caplog.at_level(logging.WARNING, logger="choro.classify.pipeline"):
            result = choropleth([0, 1], k=2, colormap="nope")
        assert result.colormap == "viridis"
        assert "nope" in caplog.text

    def test_natural_breaks_size_warning(self, caplog):
        config = ChoroplethConfig(natural_breaks_warn_size=5)
        with caplog.at_level(logging.WARNING, logger="choro.classify.pipeline"):
            choropleth(np.arange(10.0), scheme="natural_breaks", k=3, config=config)
        assert "Natural breaks" in caplog.text

    def test_all_missing(self):
        result = choropleth([np.nan, np.nan], k=5)
        assert result.breaks == (0.0, 1.0)
        assert result.colors == ("#1f9e89",)

    def test_infinite_values_are_missing(self):
        result = choropleth([1, np.inf, 2, -np.inf, 3], scheme="equal_interval", k=2)
        assert result.breaks == (1.0, 2.0, 3.0)
        assert result.classification.missing == 2
        assert "Infinity" not in result.to_json()

    def test_json_roundtrip(self):
        result = choropleth([3.2, 8.1, 1.7, 42.0, 7.5], scheme="natural_breaks", k=3)
        assert ChoroplethScheme.from_json(result.to_json()) == result

    def test_deterministic(self):
        values = np.random.default_rng(5).gamma(2.0, size=120)
        assert choropleth(values, scheme="head_tail", k=6) == choropleth(values, scheme="head_tail", k=6)
