"""Plain shape records with a computed area.

Areas are evaluated on every call against the current field values, so
reassigning ``width`` or ``height`` changes later results.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width/height record. No range checks are applied."""

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


@dataclass
class Circle:
    """Single-field shape, the usual target for JSON decoding."""

    radius: float

    def get_area(self) -> float:
        return math.pi * self.radius**2


def make_rectangle(width: float, height: float) -> Rectangle:
    """Return a :class:`Rectangle` with the given dimensions."""
    return Rectangle(width, height)
