# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""Miscellaneous colormaps (rainbow-like, terrain, grayscale)."""

from choro.colormaps._build import build

jet = build("jet", [
    (0.0, "#00007f"),
    (0.125, "#0000ff"),
    (0.25, "#007fff"),
    (0.375, "#00ffff"),
    (0.5, "#7fff7f"),
    (0.625, "#ffff00"),
    (0.75, "#ff7f00"),
    (0.875, "#ff0000"),
    (1.0, "#7f0000"),
], kind="misc")

rainbow = build("rainbow", [
    (0.0, "#ff0000"),
    (0.17, "#ff8000"),
    (0.33, "#ffff00"),
    (0.5, "#00ff00"),
    (0.67, "#00ffff"),
    (0.83, "#0000ff"),
    (1.0, "#8000ff"),
], kind="misc")

# Improved rainbow
turbo = build("turbo", [
    (0.0, "#30123b"),
    (0.1, "#4662d7"),
    (0.2, "#36aaf9"),
    (0.3, "#1ae4b6"),
    (0.4, "#72fe5e"),
    (0.5, "#c8ef34"),
    (0.6, "#faba39"),
    (0.7, "#f66b19"),
    (0.8, "#ca2a04"),
    (0.9, "#7a0403"),
    (1.0, "#7a0403"),
], kind="misc")

terrain = build("terrain", [
    (0.0, "#333399"),
    (0.15, "#0099cc"),
    (0.25, "#00cc99"),
    (0.35, "#99cc00"),
    (0.5, "#ffcc00"),
    (0.65, "#cc6600"),
    (0.75, "#993300"),
    (0.85, "#996633"),
    (1.0, "#ffffff"),
], kind="misc")

ocean = build("ocean", [
    (0.0, "#007f00"),
    (0.25, "#00007f"),
    (0.5, "#0000ff"),
    (0.75, "#7fffff"),
    (1.0, "#ffffff"),
], kind="misc")

# Black → red → yellow → white
hot = build("hot", [
    (0.0, "#000000"),
    (0.33, "#ff0000"),
    (0.67, "#ffff00"),
    (1.0, "#ffffff"),
], kind="misc")

cool = build("cool", [
    (0.0, "#00ffff"),
    (1.0, "#ff00ff"),
], kind="misc")

gray = build("gray", [
    (0.0, "#000000"),
    (1.0, "#ffffff"),
], kind="misc")

bone = build("bone", [
    (0.0, "#000000"),
    (0.375, "#545474"),
    (0.75, "#a9c8c8"),
    (1.0, "#ffffff"),
], kind="misc")
