# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""Perceptually uniform sequential colormaps."""

from choro.colormaps._build import build

# Perceptually uniform, colorblind-friendly.
viridis = build("viridis", [
    (0.0, "#440154"),
    (0.1, "#482878"),
    (0.2, "#3e4a89"),
    (0.3, "#31688e"),
    (0.4, "#26838f"),
    (0.5, "#1f9e89"),
    (0.6, "#35b779"),
    (0.7, "#6ece58"),
    (0.8, "#b5de2b"),
    (0.9, "#fde725"),
    (1.0, "#fde725"),
])

plasma = build("plasma", [
    (0.0, "#0d0887"),
    (0.1, "#41049d"),
    (0.2, "#6a00a8"),
    (0.3, "#8f0da4"),
    (0.4, "#b12a90"),
    (0.5, "#cc4778"),
    (0.6, "#e16462"),
    (0.7, "#f2844b"),
    (0.8, "#fca636"),
    (0.9, "#fcce25"),
    (1.0, "#f0f921"),
])

inferno = build("inferno", [
    (0.0, "#000004"),
    (0.1, "#1b0c41"),
    (0.2, "#4a0c6b"),
    (0.3, "#781c6d"),
    (0.4, "#a52c60"),
    (0.5, "#cf4446"),
    (0.6, "#ed6925"),
    (0.7, "#fb9b06"),
    (0.8, "#f7d13d"),
    (0.9, "#fcffa4"),
    (1.0, "#fcffa4"),
])

magma = build("magma", [
    (0.0, "#000004"),
    (0.1, "#180f3d"),
    (0.2, "#440f76"),
    (0.3, "#721f81"),
    (0.4, "#9e2f7f"),
    (0.5, "#cd4071"),
    (0.6, "#f1605d"),
    (0.7, "#fd9668"),
    (0.8, "#fec98d"),
    (0.9, "#fcfdbf"),
    (1.0, "#fcfdbf"),
])

# Colorblind-friendly.
cividis = build("cividis", [
    (0.0, "#00204d"),
    (0.1, "#00306f"),
    (0.2, "#2a406c"),
    (0.3, "#4a5068"),
    (0.4, "#636166"),
    (0.5, "#7b7362"),
    (0.6, "#94865c"),
    (0.7, "#af9b51"),
    (0.8, "#cab040"),
    (0.9, "#e6c628"),
    (1.0, "#ffdd00"),
])
