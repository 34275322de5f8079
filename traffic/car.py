#!/usr/bin/env python3
"""
traffic/car.py
==============
A single autonomous car and its read-only snapshot.

Each :class:`Car`:
  - owns its position / heading / wheel angle / speed
  - asks its :class:`~traffic.drivers.Driver` for a new waypoint on arrival
  - advances itself one substep at a time via :meth:`Car.tick`

A :class:`CarSnapshot` is what other cars and drivers get to see.  It is
an independent frozen value with no ``tick``, so a snapshot can never be
driven.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from traffic.driving_policy import DrivingPolicy
from traffic.physics import (
    clamp,
    heading_to,
    heading_vector,
    kmh_to_pixels_per_tick,
    normalize_angle,
    point_behind,
    wrap_heading,
    yaw_step,
)
from traffic.waypoint import Waypoint

if TYPE_CHECKING:
    from traffic.drivers import Driver

log = logging.getLogger("car")

ColorRGB = Tuple[int, int, int]


class ShellCarError(RuntimeError):
    """Raised when :meth:`Car.tick` runs on a car that has no driver."""


@dataclass(frozen=True)
class CarSnapshot:
    """Frozen copy of one car's state at the start of a substep.

    Attributes
    ----------
    name : str
        Display name, e.g. ``Sedan 3``.
    color : tuple
        ``(r, g, b)``; the red channel is what
        :class:`~traffic.drivers.DriveHomeDriver` ranks cars by.
    x, y : float
        Position in world pixels.
    heading : float
        Degrees in ``[0, 360)``.
    wheel_angle : float
        Degrees, within the policy's wheel limit.
    speed : float
        km/h.
    """

    name: str
    color: ColorRGB
    x: float
    y: float
    heading: float
    wheel_angle: float
    speed: float
    turning_rate: float
    acceleration: float
    destination: Waypoint

    @property
    def location(self) -> Tuple[float, float]:
        return self.x, self.y

    @property
    def red(self) -> int:
        return self.color[0]

    def behind(self, dist: float) -> Tuple[float, float]:
        """Point *dist* units behind the car along its heading."""
        return point_behind(self.x, self.y, self.heading, dist)


@dataclass
class Car:
    """One autonomous car.

    Attributes
    ----------
    name : str
        Display name.
    color : tuple
        ``(r, g, b)``.
    x, y : float
        Position in world pixels.
    destination : Waypoint
        Current target; replaced wholesale on arrival.
    acceleration : float
        Speed changes by ``sqrt(acceleration)`` every substep.
    driver : Driver or None
        Chooses the next waypoint.  A car without one cannot tick.
    heading : float
        Degrees in ``[0, 360)``; ``0`` drives towards ``+y``.
    wheel_angle : float
        Steering deflection in degrees.
    speed : float
        km/h.
    turning_rate : float
        Wheel slew limit in degrees per substep.
    """

    name: str
    color: ColorRGB
    x: float
    y: float
    destination: Waypoint
    acceleration: float
    driver: Optional["Driver"] = field(default=None, repr=False)
    heading: float = 0.0
    wheel_angle: float = 0.0
    speed: float = 0.0
    turning_rate: float = 5.0
    policy: DrivingPolicy = field(default_factory=DrivingPolicy, repr=False)

    @classmethod
    def spawn(
        cls,
        color: ColorRGB,
        name: str,
        driver: "Driver",
        rng: random.Random,
        policy: Optional[DrivingPolicy] = None,
    ) -> "Car":
        """Spawn a car at a random spot heading for a random waypoint."""
        policy = policy or DrivingPolicy()
        size = policy.world_size
        x = rng.uniform(0.0, size)
        y = rng.uniform(0.0, size)
        destination = Waypoint.from_xy(
            rng.uniform(0.0, size),
            rng.uniform(0.0, size),
            policy.initial_destination_speed,
        )
        acceleration = rng.uniform(policy.min_acceleration, policy.max_acceleration)
        return cls(
            name=str(name),
            color=color,
            x=x,
            y=y,
            destination=destination,
            acceleration=acceleration,
            driver=driver,
            turning_rate=policy.turning_rate,
            policy=policy,
        )

    @property
    def location(self) -> Tuple[float, float]:
        return self.x, self.y

    # ── snapshots ─────────────────────────────────────────────────────────
    def shell_copy(self) -> CarSnapshot:
        """Frozen, driver-less copy of the current state."""
        return CarSnapshot(
            name=self.name,
            color=self.color,
            x=self.x,
            y=self.y,
            heading=self.heading,
            wheel_angle=self.wheel_angle,
            speed=self.speed,
            turning_rate=self.turning_rate,
            acceleration=self.acceleration,
            destination=self.destination,
        )

    def behind(self, dist: float) -> Tuple[float, float]:
        """Point *dist* units behind the car along its heading."""
        return point_behind(self.x, self.y, self.heading, dist)

    def pixels_per_tick(self) -> float:
        return kmh_to_pixels_per_tick(
            self.speed, self.policy.pixels_per_meter, self.policy.millis_per_tick
        )

    # ── movement ──────────────────────────────────────────────────────────
    def tick(self, scene: Sequence[CarSnapshot]) -> None:
        """Advance one substep.

        *scene* is the population as it was at the start of the substep;
        it is only consulted when the car arrives and needs a new
        waypoint.
        """
        if self.driver is None:
            raise ShellCarError(f"{self.name}: tick called on a car without a driver")

        dx = self.x - self.destination.x
        dy = self.y - self.destination.y
        if dx * dx + dy * dy < self.destination.speed ** 2:
            self.destination = self.driver.next_destination(self.shell_copy(), scene)
            log.debug("%s → (%.1f, %.1f) @ %.0f", self.name,
                      self.destination.x, self.destination.y, self.destination.speed)
            dx = self.x - self.destination.x
            dy = self.y - self.destination.y

        self._steer(heading_to(dx, dy))

        self.heading = wrap_heading(self.heading + yaw_step(self.speed, self.wheel_angle))

        step = self.pixels_per_tick()
        vx, vy = heading_vector(self.heading)
        self.x += vx * step
        self.y += vy * step

        self._regulate_speed()

    def _steer(self, target_heading: float) -> None:
        """Slew the wheel toward *target_heading*, rate- and range-limited."""
        heading_delta = normalize_angle(target_heading - self.heading - self.wheel_angle)
        if heading_delta > 0.0:
            self.wheel_angle += min(self.turning_rate, heading_delta)
        else:
            self.wheel_angle += max(-self.turning_rate, heading_delta)
        limit = self.policy.max_wheel_angle
        self.wheel_angle = clamp(self.wheel_angle, -limit, limit)

    def _regulate_speed(self) -> None:
        step = math.sqrt(self.acceleration)
        if self.speed < self.destination.speed:
            self.speed += step
        else:
            self.speed -= step
        self.speed = clamp(self.speed, self.policy.min_speed, self.policy.max_speed)
