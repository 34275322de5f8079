"""
ui/types.py
===========
Lightweight data containers used across every UI module.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

ColorRGB = Tuple[int, int, int]
ColorRGBA = Tuple[int, int, int, int]


@dataclass
class Camera:
    """Viewport mapping world coordinates to screen pixels.

    World and screen share orientation (``+y`` is down on screen).
    ``(world_x, world_y)`` is the world point shown at the window centre.
    """
    screen_w: int
    screen_h: int
    world_x: float = 500.0
    world_y: float = 500.0
    zoom: float = 1.0

    def world_to_screen(self, wx: float, wy: float) -> Tuple[float, float]:
        cx = self.screen_w / 2
        cy = self.screen_h / 2
        sx = cx + (wx - self.world_x) * self.zoom
        sy = cy + (wy - self.world_y) * self.zoom
        return sx, sy

    def screen_to_world(self, sx: float, sy: float) -> Tuple[float, float]:
        cx = self.screen_w / 2
        cy = self.screen_h / 2
        wx = (sx - cx) / self.zoom + self.world_x
        wy = (sy - cy) / self.zoom + self.world_y
        return wx, wy

    def zoom_by(self, factor: float, lo: float = 0.05, hi: float = 20.0) -> None:
        """Scale the visible world extent by *factor* (< 1 zooms in)."""
        self.zoom = min(hi, max(lo, self.zoom / factor))

    def pan(self, dx_screen: float, dy_screen: float) -> None:
        """Drag the world by a screen-space offset."""
        self.world_x -= dx_screen / self.zoom
        self.world_y -= dy_screen / self.zoom
