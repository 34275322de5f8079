"""
traffic/waypoint.py
===================
The target a car steers toward.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Waypoint:
    """A location plus the speed at which to approach it.

    ``speed`` doubles as the arrival radius: a car counts as arrived once
    it is closer than ``speed`` units to ``location``.
    """

    location: Tuple[float, float]
    speed: float

    @classmethod
    def from_xy(cls, x: float, y: float, speed: float) -> "Waypoint":
        return cls((float(x), float(y)), float(speed))

    @property
    def x(self) -> float:
        return self.location[0]

    @property
    def y(self) -> float:
        return self.location[1]
