# Copyright (c) 2026 Choro
# SPDX-License-Identifier: MIT

"""
Choropleth schema — value types shared by the classifier, sampler and runtime.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same input → same classification
- Serializable: JSON-ready for legend and style collaborators

Breaks and Bins:
    A classification produces ``breaks`` (class boundaries, ascending, first
    equal to the minimum and last equal to the maximum of the valid samples)
    and ``bins`` (one class index per input sample, in input order).

    The number of classes is ``len(breaks) - 1``. Some schemes collapse
    duplicate boundaries, so this can be smaller than the requested k.
    Consumers must read ``class_count`` instead of assuming k.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


# =============================================================================
# Parsing Helpers
# =============================================================================

_HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


# =============================================================================
# Classification Schemes
# =============================================================================


class ClassificationScheme(Enum):
    """
    Supported partitioning rules.

    This is a closed set; the classifier dispatches on every member.
    """
    QUANTILE = "quantile"
    EQUAL_INTERVAL = "equal_interval"
    NATURAL_BREAKS = "natural_breaks"
    STD_MEAN = "std_mean"
    HEAD_TAIL = "head_tail"

    @property
    def label(self) -> str:
        """Human-readable name for scheme pickers and legends."""
        return _SCHEME_LABELS[self]

    @classmethod
    def parse(cls, value: object) -> Optional[ClassificationScheme]:
        """Resolve a scheme from a member or its string value.

        Returns None for anything unrecognised.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


_SCHEME_LABELS = {
    ClassificationScheme.QUANTILE: "Quantile",
    ClassificationScheme.EQUAL_INTERVAL: "Equal Interval",
    ClassificationScheme.NATURAL_BREAKS: "Natural Breaks (Jenks)",
    ClassificationScheme.STD_MEAN: "Standard Deviation",
    ClassificationScheme.HEAD_TAIL: "Head/Tail Breaks",
}


# =============================================================================
# Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class ColorStop:
    """
    A single stop in a colormap.

    Attributes:
        position: Normalized position along the gradient (0.0-1.0)
        color: Hex color string like "#440154"
    """
    position: float
    color: str

    def __post_init__(self) -> None:
        """Validate position is in range."""
        if not 0.0 <= self.position <= 1.0:
            raise ValueError(f"Position must be 0-1, got {self.position}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"position": self.position, "color": self.color}

    @classmethod
    def from_dict(cls, data: dict) -> ColorStop:
        """Deserialize from dictionary."""
        return cls(position=data["position"], color=data["color"])


@dataclass(frozen=True, slots=True)
class Colormap:
    """
    A named, ordered sequence of color stops spanning [0, 1].

    Colormaps live in a read-only registry (see ``choro.colormaps``) and are
    never mutated after construction. A Colormap behaves like a read-only
    sequence of its stops, so it can be passed anywhere stops are expected.

    Attributes:
        name: Registry name (e.g., "viridis")
        stops: Tuple of ColorStop ordered by position, first at 0, last at 1
        kind: "sequential", "diverging" or "misc"
    """
    name: str
    stops: tuple[ColorStop, ...]
    kind: str = "sequential"

    def __post_init__(self) -> None:
        """Validate colormap structure."""
        if len(self.stops) < 2:
            raise ValueError(f"Colormap '{self.name}' must have at least 2 stops")
        if self.stops[0].position != 0.0:
            raise ValueError(f"Colormap '{self.name}' must start at position 0")
        if self.stops[-1].position != 1.0:
            raise ValueError(f"Colormap '{self.name}' must end at position 1")
        positions = [s.position for s in self.stops]
        if positions != sorted(positions):
            raise ValueError(f"Colormap '{self.name}' stops must be ordered by position")
        for stop in self.stops:
            if not _HEX_RE.match(stop.color):
                raise ValueError(
                    f"Colormap '{self.name}' has invalid color {stop.color!r}"
                )

    def __len__(self) -> int:
        return len(self.stops)

    def __iter__(self) -> Iterator[ColorStop]:
        return iter(self.stops)

    def __getitem__(self, index: int) -> ColorStop:
        return self.stops[index]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "kind": self.kind,
            "stops": [s.to_dict() for s in self.stops],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Colormap:
        """Deserialize from dictionary."""
        return cls(
            name=data["name"],
            stops=tuple(ColorStop.from_dict(s) for s in data["stops"]),
            kind=data.get("kind", "sequential"),
        )


# =============================================================================
# Classification Result
# =============================================================================


@dataclass(frozen=True, slots=True)
class Classification:
    """
    Result of partitioning a sample sequence into ordered classes.

    Unpacks as ``(breaks, bins)``::

        breaks, bins = classify(values, "quantile", 5)

    Attributes:
        breaks: Class boundaries, non-decreasing, length class_count + 1
        bins: Class index per input sample, parallel to the input
        scheme: Scheme that actually produced the breaks (after fallback)
        requested_k: Class count the caller asked for
        missing: Number of NaN or infinite samples (placed in the no-data bin)
    """
    breaks: tuple[float, ...]
    bins: tuple[int, ...]
    scheme: ClassificationScheme = ClassificationScheme.EQUAL_INTERVAL
    requested_k: int = 0
    missing: int = 0

    def __post_init__(self) -> None:
        """Validate break structure."""
        if len(self.breaks) < 2:
            raise ValueError(f"Need at least 2 breaks, got {len(self.breaks)}")

    def __iter__(self) -> Iterator:
        yield self.breaks
        yield self.bins

    @property
    def class_count(self) -> int:
        """Number of classes actually produced (may be below requested_k)."""
        return len(self.breaks) - 1

    @property
    def counts(self) -> tuple[int, ...]:
        """Number of samples per class, including no-data samples in their bin."""
        totals = [0] * self.class_count
        for b in self.bins:
            if 0 <= b < self.class_count:
                totals[b] += 1
        return tuple(totals)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "scheme": self.scheme.value,
            "requested_k": self.requested_k,
            "class_count": self.class_count,
            "breaks": list(self.breaks),
            "bins": list(self.bins),
            "missing": self.missing,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Classification:
        """Deserialize from dictionary."""
        return cls(
            breaks=tuple(float(b) for b in data["breaks"]),
            bins=tuple(int(b) for b in data["bins"]),
            scheme=ClassificationScheme(data.get("scheme", "equal_interval")),
            requested_k=data.get("requested_k", 0),
            missing=data.get("missing", 0),
        )


# =============================================================================
# Legend and Top-Level Container
# =============================================================================


@dataclass(frozen=True, slots=True)
class LegendEntry:
    """
    One class of a choropleth legend.

    Attributes:
        index: Class index (matches bin values)
        color: Hex color assigned to the class
        lower: Lower class boundary
        upper: Upper class boundary
        label: Formatted "lo – hi" text
        count: Number of samples in the class
    """
    index: int
    color: str
    lower: float
    upper: float
    label: str
    count: int = 0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "index": self.index,
            "color": self.color,
            "lower": self.lower,
            "upper": self.upper,
            "label": self.label,
            "count": self.count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> LegendEntry:
        """Deserialize from dictionary."""
        return cls(
            index=data["index"],
            color=data["color"],
            lower=data["lower"],
            upper=data["upper"],
            label=data["label"],
            count=data.get("count", 0),
        )


@dataclass(frozen=True, slots=True)
class ChoroplethScheme:
    """
    Complete choropleth scheme for one attribute column.

    This is the top-level container produced by ``choro.choropleth``.
    Renderers look up ``colors[bins[i]]`` for feature ``i``; legend widgets
    read ``legend``.

    Attributes:
        classification: Breaks and per-sample bins
        colormap: Name of the colormap the colors were sampled from
        colors: One hex color per class
        legend: One LegendEntry per class
    """
    classification: Classification
    colormap: str
    colors: tuple[str, ...]
    legend: tuple[LegendEntry, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate that colors cover every class."""
        if len(self.colors) != self.classification.class_count:
            raise ValueError(
                f"Expected {self.classification.class_count} colors, "
                f"got {len(self.colors)}"
            )

    @property
    def breaks(self) -> tuple[float, ...]:
        return self.classification.breaks

    @property
    def bins(self) -> tuple[int, ...]:
        return self.classification.bins

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(entry.label for entry in self.legend)

    def color_of(self, bin_index: int) -> str:
        """Color for a class index, falling back to the first class color."""
        if 0 <= bin_index < len(self.colors):
            return self.colors[bin_index]
        return self.colors[0]

    @property
    def feature_colors(self) -> tuple[str, ...]:
        """Color per input sample, parallel to the input values."""
        return tuple(self.color_of(b) for b in self.classification.bins)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        return {
            "colormap": self.colormap,
            "classification": self.classification.to_dict(),
            "colors": list(self.colors),
            "legend": [entry.to_dict() for entry in self.legend],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> ChoroplethScheme:
        """Deserialize from dictionary."""
        return cls(
            classification=Classification.from_dict(data["classification"]),
            colormap=data["colormap"],
            colors=tuple(data["colors"]),
            legend=tuple(LegendEntry.from_dict(e) for e in data.get("legend", ())),
        )

    @classmethod
    def from_json(cls, json_str: str) -> ChoroplethScheme:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
