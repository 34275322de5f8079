#!/usr/bin/env python3
"""
traffic/drivers.py
==================
Destination strategies.  A :class:`Driver` looks at a frozen snapshot of
its own car and of the whole population and returns the next
:class:`~traffic.waypoint.Waypoint`.

* :class:`Driver` — abstract base.
* :class:`DriveHomeDriver` — tail the "nearest" other car, or wander.
"""

from __future__ import annotations

import abc
import logging
import random
from typing import Optional, Sequence

from traffic.car import CarSnapshot
from traffic.driving_policy import DrivingPolicy
from traffic.waypoint import Waypoint

log = logging.getLogger("drivers")


class Driver(abc.ABC):
    """Chooses where a car goes next.

    Implementations must not mutate their arguments.  They may keep state
    between calls and may draw from ``self.rng``.

    Parameters
    ----------
    rng : random.Random or None
        Random source for any randomized choice; a fresh unseeded one when
        *None*.
    policy : DrivingPolicy or None
        Tunable constants; uses defaults when *None*.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        policy: Optional[DrivingPolicy] = None,
    ) -> None:
        self.rng = rng or random.Random()
        self.policy = policy or DrivingPolicy()

    @abc.abstractmethod
    def next_destination(
        self, me: CarSnapshot, others: Sequence[CarSnapshot]
    ) -> Waypoint:
        """Return the next waypoint for *me* given the population *others*."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DriveHomeDriver(Driver):
    """Follow the car ahead, or wander when there is none.

    The "nearest" car is ranked by red colour channel, not by distance:
    the score of a candidate is ``me.red - candidate.red`` and the lowest
    strictly positive score wins, first one in population order on ties.
    Cars sharing ``me``'s exact location are treated as ``me`` and skipped.
    """

    def next_destination(
        self, me: CarSnapshot, others: Sequence[CarSnapshot]
    ) -> Waypoint:
        leader = self.find_leader(me, others)
        if leader is not None:
            log.debug("%s follows %s", me.name, leader.name)
            x, y = leader.behind(self.policy.follow_distance)
            return Waypoint.from_xy(x, y, self.policy.follow_speed)

        log.debug("%s wanders", me.name)
        return self.wander()

    def find_leader(
        self, me: CarSnapshot, others: Sequence[CarSnapshot]
    ) -> Optional[CarSnapshot]:
        best: Optional[CarSnapshot] = None
        best_score = float("inf")
        for car in others:
            if car.location == me.location:
                continue
            score = me.red - car.red
            if 0 < score < best_score:
                best, best_score = car, score
        return best

    def wander(self) -> Waypoint:
        """Random waypoint anywhere in the world square."""
        size = self.policy.world_size
        return Waypoint.from_xy(
            self.rng.uniform(0.0, size),
            self.rng.uniform(0.0, size),
            self.policy.wander_speed,
        )
