#!/usr/bin/env python3
"""
traffic/driving_policy.py
=========================
Tunable kinematic, scheduling and destination parameters for the traffic
scenario.  Every constant lives in the frozen :class:`DrivingPolicy`
dataclass so that experiments can swap policies without touching code.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DrivingPolicy:
    """Immutable bag of every tunable simulation parameter.

    Groups: steering, longitudinal control, units, scheduling, spawn
    envelope, destination selection.
    """

    # ── Steering ──────────────────────────────────────────────────────────
    max_wheel_angle: float = 30.0
    """Largest wheel deflection either side of straight (degrees)."""

    turning_rate: float = 5.0
    """Wheel slew limit (degrees per substep) given to new cars."""

    # ── Longitudinal control ──────────────────────────────────────────────
    max_speed: float = 80.0
    """Hard speed ceiling (km/h)."""

    min_speed: float = 0.0
    """Speed floor (km/h); cars never reverse."""

    min_acceleration: float = 1.0
    """Lower bound of the randomized per-car acceleration."""

    max_acceleration: float = 5.0
    """Upper bound (exclusive) of the randomized per-car acceleration."""

    # ── Units ─────────────────────────────────────────────────────────────
    pixels_per_meter: float = 10.0
    """World scale used when integrating position."""

    millis_per_tick: float = 17.0
    """Simulated duration of one substep."""

    # ── Scheduling ────────────────────────────────────────────────────────
    substeps_per_tick: int = 50
    """Substeps run by every :meth:`Scenario.tick` call."""

    # ── Spawn envelope ────────────────────────────────────────────────────
    world_size: float = 1000.0
    """Cars and random destinations are drawn from ``[0, world_size)²``."""

    initial_destination_speed: float = 80.0
    """Approach speed of the destination every car is spawned with."""

    # ── Destination selection ─────────────────────────────────────────────
    follow_distance: float = 20.0
    """How far behind the leader the follow waypoint sits."""

    follow_speed: float = 80.0
    """Approach speed of a follow waypoint."""

    wander_speed: float = 65.0
    """Approach speed of a random fallback waypoint."""

    def __post_init__(self) -> None:
        if self.max_wheel_angle <= 0.0:
            raise ValueError("max_wheel_angle must be positive")
        if self.turning_rate <= 0.0:
            raise ValueError("turning_rate must be positive")
        if not 0.0 <= self.min_speed <= self.max_speed:
            raise ValueError("speed range must satisfy 0 <= min_speed <= max_speed")
        if not 0.0 < self.min_acceleration <= self.max_acceleration:
            raise ValueError(
                "acceleration range must satisfy 0 < min_acceleration <= max_acceleration"
            )
        if self.substeps_per_tick < 0:
            raise ValueError("substeps_per_tick must not be negative")
        if self.world_size <= 0.0:
            raise ValueError("world_size must be positive")
