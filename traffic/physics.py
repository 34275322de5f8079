#!/usr/bin/env python3
"""
traffic/physics.py
==================
Low-level angle and unit helpers used by :mod:`traffic.car` and
:mod:`traffic.drivers`.

Heading convention
------------------
Headings are in degrees.  ``0`` faces ``+y`` and positive angles sweep
towards ``-x``, i.e. the unit vector for heading ``h`` is
``(-sin h, cos h)``.  :func:`heading_to` is the inverse: it returns the
heading that points along ``(-dx, -dy)`` using ``atan2(dx, -dy)``, which
is what a car at ``p`` uses with ``(dx, dy) = p - target``.
"""

from __future__ import annotations

import math
from typing import Tuple


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* into ``[lo, hi]``."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def normalize_angle(angle: float) -> float:
    """Map *angle* (degrees) into ``(-180, 180]``."""
    result = (angle + 180.0) % 360.0 - 180.0
    if result <= -180.0:
        result += 360.0
    return result


def wrap_heading(heading: float) -> float:
    """Map *heading* (degrees) into ``[0, 360)``."""
    result = heading % 360.0
    # -tiny % 360 rounds up to exactly 360.0
    if result >= 360.0:
        result -= 360.0
    return result


def heading_vector(heading: float) -> Tuple[float, float]:
    """Unit vector ``(x, y)`` a car with *heading* drives along."""
    th = math.radians(heading)
    return -math.sin(th), math.cos(th)


def heading_to(dx: float, dy: float) -> float:
    """Heading (degrees, ``(-180, 180]``) for the offset ``(dx, dy) = here - target``."""
    return math.degrees(math.atan2(dx, -dy))


def yaw_step(speed: float, wheel_angle: float) -> float:
    """Degrees of heading change produced in one substep.

    Equivalent to ``speed / (360 / wheel_angle)`` but defined for a
    straight wheel, where it is ``0``.
    """
    return speed * wheel_angle / 360.0


def kmh_to_pixels_per_tick(
    speed_kmh: float,
    pixels_per_meter: float = 10.0,
    millis_per_tick: float = 17.0,
) -> float:
    """Distance in pixels covered during one substep.

    One km/h is one metre per 3600 ms, so the result is
    ``speed * px_per_m * ms_per_tick / 3600``.

    Parameters
    ----------
    speed_kmh : float
        Current speed in km/h.
    pixels_per_meter : float
        World scale.
    millis_per_tick : float
        Simulated duration of one substep.
    """
    seconds_per_hour = 60.0 * 60.0
    return speed_kmh * pixels_per_meter * millis_per_tick / seconds_per_hour


def point_behind(x: float, y: float, heading: float, dist: float) -> Tuple[float, float]:
    """The point *dist* units behind ``(x, y)`` for a car facing *heading*."""
    vx, vy = heading_vector(heading)
    return x - vx * dist, y - vy * dist
