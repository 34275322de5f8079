#!/usr/bin/env python3
"""
traffic/scenario.py
===================
Population of cars advanced in fixed substeps.

The :class:`Scenario` owns the car list, the shared random source and the
:class:`~traffic.driving_policy.DrivingPolicy`.  Every substep it freezes
the whole population into :class:`~traffic.car.CarSnapshot` values first
and then ticks the cars one by one against that frozen view, so no car
ever sees another car half-way through a substep.
"""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional, Tuple

from traffic.car import Car, CarSnapshot
from traffic.drivers import DriveHomeDriver
from traffic.driving_policy import DrivingPolicy

log = logging.getLogger("scenario")


class Scenario:
    """Fixed-size population of autonomous cars.

    Parameters
    ----------
    seed : int or None
        Random seed for reproducibility.
    policy : DrivingPolicy or None
        Tunable constants; uses defaults when *None*.
    rng : random.Random or None
        Explicit random source; takes precedence over *seed*.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        policy: Optional[DrivingPolicy] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.policy = policy or DrivingPolicy()
        self._rng = rng or random.Random(seed)
        self._cars: List[Car] = []
        self.ticks = 0
        self.substeps = 0

    @classmethod
    def new(
        cls,
        seed: Optional[int] = None,
        policy: Optional[DrivingPolicy] = None,
    ) -> "Scenario":
        """Empty scenario."""
        return cls(seed=seed, policy=policy)

    def with_cars(self, n: int, name: str) -> "Scenario":
        """Add *n* cars named ``"<name> <i>"`` and return ``self``.

        Every car gets a random red shade, a random start, a random
        destination and a random acceleration.
        """
        if n < 0:
            raise ValueError(f"car count must not be negative, got {n}")
        start = len(self._cars)
        for i in range(n):
            color = (self._rng.randrange(256), 0, 0)
            driver = DriveHomeDriver(rng=self._rng, policy=self.policy)
            self._cars.append(
                Car.spawn(color, f"{name} {i}", driver, self._rng, self.policy)
            )
        log.info("Spawned %d cars '%s' (population %d → %d)",
                 n, name, start, len(self._cars))
        return self

    # ── read-only view ────────────────────────────────────────────────────
    def __len__(self) -> int:
        return len(self._cars)

    def __iter__(self) -> Iterator[CarSnapshot]:
        """Iterate over frozen copies of the cars, in update order."""
        return iter(self.snapshot())

    def snapshot(self) -> Tuple[CarSnapshot, ...]:
        """Freeze every car, in update order."""
        return tuple(car.shell_copy() for car in self._cars)

    # ── simulation ────────────────────────────────────────────────────────
    def tick(self) -> None:
        """Run one frame: ``policy.substeps_per_tick`` substeps."""
        for _ in range(self.policy.substeps_per_tick):
            self.substep()
        self.ticks += 1

    def substep(self) -> None:
        """Advance every car once against a snapshot taken beforehand."""
        scene = self.snapshot()
        for car in self._cars:
            car.tick(scene)
        self.substeps += 1

    def shuffle(self) -> None:
        """Randomly reorder the cars; car state is untouched."""
        self._rng.shuffle(self._cars)
        log.info("Shuffled %d cars", len(self._cars))
