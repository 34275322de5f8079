#!/usr/bin/env python3
"""
Unit tests for the angle and unit helpers.
"""

from __future__ import annotations

import unittest

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


class AngleTests(unittest.TestCase):
    def test_normalize_angle_range(self) -> None:
        self.assertEqual(normalize_angle(190.0), -170.0)
        self.assertEqual(normalize_angle(-190.0), 170.0)
        self.assertEqual(normalize_angle(90.0), 90.0)
        self.assertEqual(normalize_angle(0.0), 0.0)

    def test_normalize_angle_half_turn_is_positive(self) -> None:
        self.assertEqual(normalize_angle(180.0), 180.0)
        self.assertEqual(normalize_angle(-180.0), 180.0)
        self.assertEqual(normalize_angle(540.0), 180.0)

    def test_wrap_heading(self) -> None:
        self.assertEqual(wrap_heading(370.0), 10.0)
        self.assertEqual(wrap_heading(-90.0), 270.0)
        self.assertEqual(wrap_heading(360.0), 0.0)

    def test_wrap_heading_tiny_negative_stays_below_full_turn(self) -> None:
        h = wrap_heading(-1e-20)
        self.assertGreaterEqual(h, 0.0)
        self.assertLess(h, 360.0)

    def test_heading_to_matches_heading_vector(self) -> None:
        # A target straight along +y from the car is heading 0.
        self.assertAlmostEqual(heading_to(0.0, -10.0), 0.0)
        # A target along -x is heading 90.
        self.assertAlmostEqual(heading_to(10.0, 0.0), 90.0)
        self.assertAlmostEqual(heading_to(-10.0, 0.0), -90.0)
        vx, vy = heading_vector(90.0)
        self.assertAlmostEqual(vx, -1.0)
        self.assertAlmostEqual(vy, 0.0)

    def test_clamp(self) -> None:
        self.assertEqual(clamp(45.0, -30.0, 30.0), 30.0)
        self.assertEqual(clamp(-45.0, -30.0, 30.0), -30.0)
        self.assertEqual(clamp(12.5, -30.0, 30.0), 12.5)


class KinematicHelperTests(unittest.TestCase):
    def test_point_behind_heading_zero(self) -> None:
        x, y = point_behind(0.0, 0.0, 0.0, 20.0)
        self.assertAlmostEqual(x, 0.0)
        self.assertAlmostEqual(y, -20.0)

    def test_point_behind_heading_ninety(self) -> None:
        x, y = point_behind(100.0, 50.0, 90.0, 20.0)
        self.assertAlmostEqual(x, 120.0)
        self.assertAlmostEqual(y, 50.0)

    def test_yaw_step_straight_wheel(self) -> None:
        self.assertEqual(yaw_step(80.0, 0.0), 0.0)
        self.assertAlmostEqual(yaw_step(72.0, 30.0), 6.0)
        self.assertAlmostEqual(yaw_step(72.0, -30.0), -6.0)

    def test_pixels_per_tick(self) -> None:
        self.assertAlmostEqual(kmh_to_pixels_per_tick(80.0), 80.0 * 10.0 * 17.0 / 3600.0)
        self.assertAlmostEqual(kmh_to_pixels_per_tick(36.0), 1.7)
        self.assertEqual(kmh_to_pixels_per_tick(0.0), 0.0)


if __name__ == "__main__":
    unittest.main()
