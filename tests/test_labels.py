# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""Tests for break formatting and legend labels."""

import pytest

from choro.classify.labels import format_break, legend_labels


class TestFormatBreak:

    @pytest.mark.parametrize("value, expected", [
        (12345.6, "12,346"),
        (1234.5, "1,235"),
        (1000, "1,000"),
        (-1500.2, "-1,500"),
        (3.14159, "3.14"),
        (1, "1.00"),
        (-2.5, "-2.50"),
        (0.0123456, "0.0123"),
        (0.01, "0.0100"),
        (0.0000123, "1.23e-5"),
        (0.0, "0.00e+0"),
        (-0.005, "-5.00e-3"),
    ])
    def test_magnitude_rules(self, value, expected):
        assert format_break(value) == expected

    def test_nan(self):
        assert format_break(float("nan")) == "NaN"

    def test_infinity(self):
        assert format_break(float("inf")) == "Infinity"
        assert format_break(float("-inf")) == "-Infinity"


class TestLegendLabels:

    def test_one_label_per_class(self):
        assert legend_labels([1, 25, 50]) == ("1.00 – 25.00", "25.00 – 50.00")

    def test_large_values(self):
        assert legend_labels([1000, 25000.4]) == ("1,000 – 25,000",)

    def test_single_break_has_no_labels(self):
        assert legend_labels([5]) == ()
