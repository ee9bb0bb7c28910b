# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""Diverging colormaps (two hues meeting at a neutral midpoint)."""

from choro.colormaps._build import build

coolwarm = build("coolwarm", [
    (0.0, "#3b4cc0"),
    (0.1, "#5977e3"),
    (0.2, "#7b9ff9"),
    (0.3, "#9ebeff"),
    (0.4, "#c0d4f5"),
    (0.5, "#dddcdc"),
    (0.6, "#f2cbb7"),
    (0.7, "#f7ac8e"),
    (0.8, "#ee8468"),
    (0.9, "#d65244"),
    (1.0, "#b40426"),
], kind="diverging")

# Blue-white-red
bwr = build("bwr", [
    (0.0, "#0000ff"),
    (0.5, "#ffffff"),
    (1.0, "#ff0000"),
], kind="diverging")

seismic = build("seismic", [
    (0.0, "#00004d"),
    (0.25, "#0000ff"),
    (0.5, "#ffffff"),
    (0.75, "#ff0000"),
    (1.0, "#4d0000"),
], kind="diverging")

RdBu = build("RdBu", [
    (0.0, "#67001f"),
    (0.1, "#b2182b"),
    (0.2, "#d6604d"),
    (0.3, "#f4a582"),
    (0.4, "#fddbc7"),
    (0.5, "#f7f7f7"),
    (0.6, "#d1e5f0"),
    (0.7, "#92c5de"),
    (0.8, "#4393c3"),
    (0.9, "#2166ac"),
    (1.0, "#053061"),
], kind="diverging")

RdYlBu = build("RdYlBu", [
    (0.0, "#a50026"),
    (0.1, "#d73027"),
    (0.2, "#f46d43"),
    (0.3, "#fdae61"),
    (0.4, "#fee090"),
    (0.5, "#ffffbf"),
    (0.6, "#e0f3f8"),
    (0.7, "#abd9e9"),
    (0.8, "#74add1"),
    (0.9, "#4575b4"),
    (1.0, "#313695"),
], kind="diverging")

RdYlGn = build("RdYlGn", [
    (0.0, "#a50026"),
    (0.1, "#d73027"),
    (0.2, "#f46d43"),
    (0.3, "#fdae61"),
    (0.4, "#fee08b"),
    (0.5, "#ffffbf"),
    (0.6, "#d9ef8b"),
    (0.7, "#a6d96a"),
    (0.8, "#66bd63"),
    (0.9, "#1a9850"),
    (1.0, "#006837"),
], kind="diverging")

spectral = build("spectral", [
    (0.0, "#9e0142"),
    (0.1, "#d53e4f"),
    (0.2, "#f46d43"),
    (0.3, "#fdae61"),
    (0.4, "#fee08b"),
    (0.5, "#ffffbf"),
    (0.6, "#e6f598"),
    (0.7, "#abdda4"),
    (0.8, "#66c2a5"),
    (0.9, "#3288bd"),
    (1.0, "#5e4fa2"),
], kind="diverging")
