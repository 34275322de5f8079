"""
ui/helpers.py
=============
Pure utility functions shared across UI modules:
shape rotation, camera projection of point arrays, and text drawing.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame

from .types import Camera


# ── Shape geometry ───────────────────────────────────────────────────────────

def rotation_matrix(angle_deg: float) -> np.ndarray:
    """2x2 rotation for a y-down plane (positive angles turn clockwise on screen)."""
    th = np.radians(angle_deg)
    c, s = np.cos(th), np.sin(th)
    return np.array([[c, -s], [s, c]])


def rotated_rect(
    position: Tuple[float, float],
    size: Tuple[float, float],
    origin: Tuple[float, float],
    angle_deg: float,
) -> np.ndarray:
    """World-space corners of a ``size`` rectangle rotated about ``origin``.

    Mirrors how a sprite is placed: the local point *origin* lands on
    *position* and the shape is turned by *angle_deg* around it.  Returns a
    ``(4, 2)`` array, corners in order.
    """
    w, h = size
    corners = np.array([[0.0, 0.0], [w, 0.0], [w, h], [0.0, h]]) - np.asarray(origin)
    return corners @ rotation_matrix(angle_deg).T + np.asarray(position)


def rotated_segment(
    position: Tuple[float, float],
    size: Tuple[float, float],
    origin: Tuple[float, float],
    angle_deg: float,
) -> np.ndarray:
    """Centre line of a thin rectangle, as a ``(2, 2)`` array of end points."""
    corners = rotated_rect(position, size, origin, angle_deg)
    return np.array([
        (corners[0] + corners[1]) / 2.0,
        (corners[2] + corners[3]) / 2.0,
    ])


def project(camera: Camera, points: np.ndarray) -> np.ndarray:
    """Vectorised :meth:`Camera.world_to_screen` for an ``(n, 2)`` array."""
    centre = np.array([camera.screen_w / 2, camera.screen_h / 2])
    return (points - np.array([camera.world_x, camera.world_y])) * camera.zoom + centre


# ── Text helper ──────────────────────────────────────────────────────────────

def render_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: Tuple[int, int],
    color: Tuple[int, ...] = (230, 230, 235),
    anchor: str = "topleft",
) -> pygame.Rect:
    """Render text with flexible *anchor* ('topleft', 'center', 'midright' …)."""
    img = font.render(text, True, color)
    rect = img.get_rect(**{anchor: pos})
    surface.blit(img, rect)
    return rect
