# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""Tests for colormap sampling."""

import pytest

from choro.colormaps import get_colormap, viridis
from choro.schema import ColorStop
from choro.classify.sampler import (
    generate_colors,
    generate_gradient_css,
    get_color_at_position,
)


GRAY_STOPS = [ColorStop(0.0, "#000000"), ColorStop(1.0, "#ffffff")]


class TestGetColorAtPosition:

    def test_midpoint_gray(self):
        assert get_color_at_position(GRAY_STOPS, 0.5) == "#808080"

    def test_quarter(self):
        # 255 * 0.25 = 63.75 -> 64
        assert get_color_at_position(GRAY_STOPS, 0.25) == "#404040"

    def test_clamps_below(self):
        assert get_color_at_position(GRAY_STOPS, -1.0) == "#000000"

    def test_clamps_above(self):
        assert get_color_at_position(GRAY_STOPS, 2.0) == "#ffffff"

    def test_exact_stop_returns_stop_color(self):
        assert get_color_at_position(viridis, 0.5) == "#1f9e89"
        assert get_color_at_position(viridis, 0.0) == "#440154"
        assert get_color_at_position(viridis, 1.0) == "#fde725"

    def test_first_bracket_wins_on_shared_position(self):
        stops = [
            ColorStop(0.0, "#000000"),
            ColorStop(0.5, "#ff0000"),
            ColorStop(0.5, "#00ff00"),
            ColorStop(1.0, "#0000ff"),
        ]
        assert get_color_at_position(stops, 0.5) == "#ff0000"

    def test_accepts_colormap(self):
        assert get_color_at_position(get_colormap("gray"), 0.5) == "#808080"

    def test_three_stop_interpolation(self):
        # bwr: blue at 0, white at 0.5; 0.25 is halfway blue -> white
        assert get_color_at_position(get_colormap("bwr"), 0.25) == "#8080ff"


class TestGenerateColors:

    def test_single_color_is_midpoint(self):
        assert generate_colors("gray", 1) == ("#808080",)
        assert generate_colors("viridis", 1) == (get_color_at_position(viridis, 0.5),)

    @pytest.mark.parametrize("name", ["viridis", "jet", "bwr", "terrain", "hot"])
    def test_single_color_matches_position_half(self, name):
        cmap = get_colormap(name)
        assert generate_colors(cmap, 1) == (get_color_at_position(cmap, 0.5),)

    def test_endpoints_included(self):
        colors = generate_colors("gray", 3)
        assert colors == ("#000000", "#808080", "#ffffff")

    def test_even_spacing(self):
        assert generate_colors("gray", 5) == (
            "#000000", "#404040", "#808080", "#bfbfbf", "#ffffff",
        )

    def test_unknown_name_uses_viridis(self):
        assert generate_colors("no-such-map", 2) == ("#440154", "#fde725")

    def test_zero_colors(self):
        assert generate_colors("gray", 0) == ()

    def test_accepts_stop_list(self):
        assert generate_colors(GRAY_STOPS, 2) == ("#000000", "#ffffff")


class TestGradientCSS:

    def test_two_stops(self):
        assert generate_gradient_css("gray") == (
            "linear-gradient(to right, #000000 0%, #ffffff 100%)"
        )

    def test_direction_and_midpoint(self):
        assert generate_gradient_css(get_colormap("bwr"), "to top") == (
            "linear-gradient(to top, #0000ff 0%, #ffffff 50%, #ff0000 100%)"
        )

    def test_fractional_percent(self):
        css = generate_gradient_css("jet")
        assert "#0000ff 12.5%" in css
