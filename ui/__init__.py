#!/usr/bin/env python3

from .types import Camera, ColorRGB, ColorRGBA
from .constants import ViewConstants
from .draw_cars import CarRenderer
from .hud import HudRenderer
from .pygame_view import PygameScenarioView, run_pygame_view

__all__ = [
    "Camera",
    "ColorRGB",
    "ColorRGBA",
    "ViewConstants",
    "CarRenderer",
    "HudRenderer",
    "PygameScenarioView",
    "run_pygame_view",
]
