#!/usr/bin/env python3
"""
Scenario-level tests: population construction, substep scheduling,
snapshot consistency and the kinematic invariants over whole runs.
"""

from __future__ import annotations

import copy
import unittest

from traffic.car import CarSnapshot
from traffic.drivers import DriveHomeDriver
from traffic.driving_policy import DrivingPolicy
from traffic.scenario import Scenario
from traffic.waypoint import Waypoint


class RecordingDriveHomeDriver(DriveHomeDriver):
    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.chosen = []

    def next_destination(self, me, others):
        wp = super().next_destination(me, others)
        self.chosen.append(wp)
        return wp


class FixedWanderDriver(DriveHomeDriver):
    """Leader search as usual, but a deterministic fallback."""

    def wander(self) -> Waypoint:
        return Waypoint.from_xy(500.0, 500.0, self.policy.wander_speed)


class ConstructionTests(unittest.TestCase):
    def test_with_cars_builds_named_red_population(self) -> None:
        scenario = Scenario(seed=1)
        self.assertIs(scenario.with_cars(5, "Sedan"), scenario)
        self.assertEqual(len(scenario), 5)

        cars = list(scenario)
        self.assertEqual([c.name for c in cars], [f"Sedan {i}" for i in range(5)])
        for car in cars:
            self.assertIsInstance(car, CarSnapshot)
            r, g, b = car.color
            self.assertTrue(0 <= r <= 255)
            self.assertEqual((g, b), (0, 0))
            self.assertTrue(0.0 <= car.x < 1000.0)
            self.assertTrue(0.0 <= car.y < 1000.0)
            self.assertEqual(car.destination.speed, 80.0)
            self.assertTrue(1.0 <= car.acceleration <= 5.0)

    def test_with_cars_chains(self) -> None:
        scenario = Scenario.new(seed=2).with_cars(2, "Sedan").with_cars(3, "Truck")
        self.assertEqual(len(scenario), 5)
        self.assertEqual(list(scenario)[-1].name, "Truck 2")

    def test_zero_and_negative_counts(self) -> None:
        self.assertEqual(len(Scenario(seed=3).with_cars(0, "Sedan")), 0)
        with self.assertRaises(ValueError):
            Scenario(seed=3).with_cars(-1, "Sedan")

    def test_same_seed_same_population(self) -> None:
        a = Scenario(seed=11).with_cars(10, "Sedan")
        b = Scenario(seed=11).with_cars(10, "Sedan")
        self.assertEqual(a.snapshot(), b.snapshot())
        a.tick()
        b.tick()
        self.assertEqual(a.snapshot(), b.snapshot())

    def test_invalid_policy_rejected(self) -> None:
        with self.assertRaises(ValueError):
            DrivingPolicy(turning_rate=0.0)
        with self.assertRaises(ValueError):
            DrivingPolicy(min_acceleration=6.0, max_acceleration=5.0)


class TickTests(unittest.TestCase):
    def test_tick_runs_fixed_substeps(self) -> None:
        scenario = Scenario(seed=4).with_cars(3, "Sedan")
        scenario.tick()
        self.assertEqual(scenario.ticks, 1)
        self.assertEqual(scenario.substeps, 50)

    def test_substep_count_follows_policy(self) -> None:
        scenario = Scenario(seed=4, policy=DrivingPolicy(substeps_per_tick=3))
        scenario.with_cars(2, "Sedan").tick()
        self.assertEqual(scenario.substeps, 3)

    def test_empty_scenario_ticks(self) -> None:
        scenario = Scenario.new()
        scenario.tick()
        self.assertEqual(scenario.ticks, 1)

    def test_invariants_over_run(self) -> None:
        scenario = Scenario(seed=3).with_cars(20, "Sedan")
        for _ in range(5):
            scenario.tick()
            for car in scenario:
                self.assertGreaterEqual(car.wheel_angle, -30.0)
                self.assertLessEqual(car.wheel_angle, 30.0)
                self.assertGreaterEqual(car.heading, 0.0)
                self.assertLess(car.heading, 360.0)
                self.assertGreaterEqual(car.speed, 0.0)
                self.assertLessEqual(car.speed, 80.0)

    def test_lone_car_always_wanders(self) -> None:
        scenario = Scenario(seed=8).with_cars(1, "Solo")
        car = scenario._cars[0]
        driver = RecordingDriveHomeDriver(rng=car.driver.rng)
        car.driver = driver
        for _ in range(40):
            scenario.tick()

        self.assertGreater(len(driver.chosen), 0)
        for wp in driver.chosen:
            self.assertEqual(wp.speed, 65.0)
            self.assertTrue(0.0 <= wp.x < 1000.0)
            self.assertTrue(0.0 <= wp.y < 1000.0)


class SnapshotConsistencyTests(unittest.TestCase):
    def _scenario(self) -> Scenario:
        scenario = Scenario(seed=21).with_cars(12, "Sedan")
        for car in scenario._cars:
            car.driver = FixedWanderDriver(policy=scenario.policy)
            # Every car arrives this substep and consults the scene.
            car.destination = Waypoint.from_xy(car.x, car.y, 80.0)
            car.speed = 40.0
            car.heading = car.x % 360.0
        return scenario

    def test_sequential_update_matches_all_from_pre_substep_state(self) -> None:
        scenario = self._scenario()
        scene = scenario.snapshot()

        reference = copy.deepcopy(scenario._cars)
        for car in reversed(reference):
            car.tick(scene)

        scenario.substep()
        self.assertEqual(scenario.snapshot(), tuple(c.shell_copy() for c in reference))

    def test_followers_target_leaders_pre_substep_position(self) -> None:
        scenario = self._scenario()
        scene = scenario.snapshot()
        by_name = {snap.name: snap for snap in scene}

        scenario.substep()
        for snap in scene:
            leader = scenario._cars[0].driver.find_leader(snap, scene)
            live = next(c for c in scenario._cars if c.name == snap.name)
            if leader is None:
                self.assertEqual(live.destination.location, (500.0, 500.0))
            else:
                expected = by_name[leader.name].behind(20.0)
                self.assertEqual(live.destination.location, expected)


class ShuffleTests(unittest.TestCase):
    def test_shuffle_permutes_without_touching_state(self) -> None:
        scenario = Scenario(seed=5).with_cars(30, "Sedan")
        scenario.tick()
        before = scenario.snapshot()
        scenario.shuffle()
        after = scenario.snapshot()

        self.assertEqual(sorted(before, key=lambda c: c.name),
                         sorted(after, key=lambda c: c.name))
        self.assertNotEqual([c.name for c in before], [c.name for c in after])


if __name__ == "__main__":
    unittest.main()
