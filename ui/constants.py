#!/usr/bin/env python3
"""Visual constants shared across all renderers."""

from __future__ import annotations

from typing import Sequence, Tuple

from .types import ColorRGB


class ViewConstants:
    """Mixin providing every visual / layout constant."""

    BG_COLOR: ColorRGB = (0, 0, 0)
    HUD_BG_COLOR: ColorRGB = (22, 22, 22)
    HUD_BORDER_COLOR: ColorRGB = (42, 42, 42)
    HUD_TEXT_COLOR: ColorRGB = (200, 200, 200)
    DEBUG_TEXT_COLOR: ColorRGB = (0, 255, 127)

    # Car sprite geometry in world units: (width, height) and the local
    # origin the shape rotates about.
    BODY_SIZE: Tuple[float, float] = (10.0, 20.0)
    BODY_ORIGIN: Tuple[float, float] = (5.0, 10.0)
    INDICATOR_SIZE: Tuple[float, float] = (1.0, 50.0)
    INDICATOR_ORIGIN: Tuple[float, float] = (0.5, 10.0)
    DESTINATION_RADIUS = 5.0

    # Mouse wheel: fraction of the visible extent kept per notch.
    ZOOM_IN_FACTOR = 0.9
    ZOOM_OUT_FACTOR = 1.1
    MIN_ZOOM = 0.05
    MAX_ZOOM = 20.0

    HELP_LINES: Sequence[str] = (
        "WHEEL  Zoom",
        "DRAG   Pan",
        "SPACE  Pause/Resume",
        "S      Shuffle order",
        "R      Reset view",
        "H      Toggle help",
        "F3     Debug overlay",
        "F12    Screenshot",
    )

    SCREENSHOT_DIR = "screenshots"
