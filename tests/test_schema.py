# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""Tests for schema types and serialization roundtrips."""

import json

import pytest

from choro.schema import (
    Classification,
    ClassificationScheme,
    ChoroplethScheme,
    Colormap,
    ColorStop,
    LegendEntry,
)


def _stops(*pairs):
    return tuple(ColorStop(p, c) for p, c in pairs)


class TestColorStop:

    def test_valid(self):
        stop = ColorStop(0.25, "#abcdef")
        assert stop.position == 0.25
        assert stop.color == "#abcdef"

    def test_invalid_position(self):
        with pytest.raises(ValueError, match="Position"):
            ColorStop(1.5, "#000000")

    def test_to_dict_roundtrip(self):
        stop = ColorStop(0.5, "#123456")
        assert ColorStop.from_dict(stop.to_dict()) == stop


class TestColormap:

    def test_valid(self):
        cmap = Colormap("bw", _stops((0.0, "#000000"), (1.0, "#ffffff")))
        assert len(cmap) == 2
        assert cmap[1].color == "#ffffff"
        assert [s.position for s in cmap] == [0.0, 1.0]

    def test_too_few_stops(self):
        with pytest.raises(ValueError, match="at least 2"):
            Colormap("one", _stops((0.0, "#000000")))

    def test_must_start_at_zero(self):
        with pytest.raises(ValueError, match="start"):
            Colormap("x", _stops((0.1, "#000000"), (1.0, "#ffffff")))

    def test_must_end_at_one(self):
        with pytest.raises(ValueError, match="end"):
            Colormap("x", _stops((0.0, "#000000"), (0.9, "#ffffff")))

    def test_must_be_ordered(self):
        with pytest.raises(ValueError, match="ordered"):
            Colormap("x", _stops((0.0, "#000000"), (0.7, "#ff0000"), (0.3, "#00ff00"), (1.0, "#ffffff")))

    def test_invalid_color(self):
        with pytest.raises(ValueError, match="invalid color"):
            Colormap("x", _stops((0.0, "black"), (1.0, "#ffffff")))

    def test_to_dict_roundtrip(self):
        cmap = Colormap("bw", _stops((0.0, "#000000"), (1.0, "#ffffff")), kind="misc")
        assert Colormap.from_dict(cmap.to_dict()) == cmap


class TestClassificationScheme:

    def test_parse_member(self):
        assert ClassificationScheme.parse(ClassificationScheme.HEAD_TAIL) is ClassificationScheme.HEAD_TAIL

    def test_parse_string(self):
        assert ClassificationScheme.parse("natural_breaks") is ClassificationScheme.NATURAL_BREAKS
        assert ClassificationScheme.parse("STD_MEAN") is ClassificationScheme.STD_MEAN

    def test_parse_unknown(self):
        assert ClassificationScheme.parse("jenks") is None
        assert ClassificationScheme.parse(3) is None

    def test_labels(self):
        assert ClassificationScheme.NATURAL_BREAKS.label == "Natural Breaks (Jenks)"
        assert ClassificationScheme.HEAD_TAIL.label == "Head/Tail Breaks"
        assert all(s.label for s in ClassificationScheme)


class TestClassification:

    def test_class_count_and_counts(self):
        c = Classification(breaks=(0.0, 5.0, 10.0), bins=(0, 1, 1, 0, 1))
        assert c.class_count == 2
        assert c.counts == (2, 3)

    def test_counts_skip_sentinel_bins(self):
        c = Classification(breaks=(0.0, 10.0), bins=(0, -1))
        assert c.counts == (1,)

    def test_requires_two_breaks(self):
        with pytest.raises(ValueError, match="at least 2 breaks"):
            Classification(breaks=(1.0,), bins=())

    def test_to_dict_roundtrip(self):
        c = Classification(
            breaks=(0.0, 1.5, 3.0),
            bins=(0, 1),
            scheme=ClassificationScheme.QUANTILE,
            requested_k=4,
            missing=1,
        )
        d = c.to_dict()
        assert d["class_count"] == 2
        assert Classification.from_dict(json.loads(json.dumps(d))) == c


class TestChoroplethScheme:

    @pytest.fixture
    def scheme(self):
        classification = Classification(breaks=(0.0, 5.0, 10.0), bins=(0, 1, 1))
        legend = (
            LegendEntry(0, "#000000", 0.0, 5.0, "0 – 5", 1),
            LegendEntry(1, "#ffffff", 5.0, 10.0, "5 – 10", 2),
        )
        return ChoroplethScheme(classification, "gray", ("#000000", "#ffffff"), legend)

    def test_color_count_must_match_classes(self):
        classification = Classification(breaks=(0.0, 5.0, 10.0), bins=())
        with pytest.raises(ValueError, match="Expected 2 colors"):
            ChoroplethScheme(classification, "gray", ("#000000",))

    def test_feature_colors(self, scheme):
        assert scheme.feature_colors == ("#000000", "#ffffff", "#ffffff")

    def test_color_of_falls_back_to_first(self, scheme):
        assert scheme.color_of(5) == "#000000"
        assert scheme.color_of(-1) == "#000000"

    def test_labels(self, scheme):
        assert scheme.labels == ("0 – 5", "5 – 10")

    def test_json_roundtrip(self, scheme):
        assert ChoroplethScheme.from_json(scheme.to_json()) == scheme
