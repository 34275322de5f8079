#!/usr/bin/env python3
"""
test_main.py
============
Startup plumbing: environment overrides, logging setup and scenario
construction.
"""

import logging
import os
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from unittest import mock

import config
import main
from logging_setup import setup_logging


class EnvOverrideTests(unittest.TestCase):
    def test_missing_variable_uses_default(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(main._env("TRAFFIC_CARS", 500, int), 500)

    def test_valid_override(self) -> None:
        with mock.patch.dict(os.environ, {"TRAFFIC_CARS": " 42 "}):
            self.assertEqual(main._env("TRAFFIC_CARS", 500, main._non_negative_int), 42)

    def test_invalid_override_falls_back_with_warning(self) -> None:
        with mock.patch.dict(os.environ, {"TRAFFIC_CARS": "-3"}):
            with self.assertLogs("main", level="WARNING"):
                value = main._env("TRAFFIC_CARS", 500, main._non_negative_int)
        self.assertEqual(value, 500)

    def test_zero_fps_rejected(self) -> None:
        with self.assertRaises(ValueError):
            main._positive_int("0")


class BuildScenarioTests(unittest.TestCase):
    def test_build_scenario_uses_arguments(self) -> None:
        scenario = main.build_scenario(4, "Coupe", seed=3)
        self.assertEqual(len(scenario), 4)
        self.assertEqual(list(scenario)[0].name, "Coupe 0")

    def test_defaults_match_config(self) -> None:
        self.assertEqual(config.DEFAULT_CAR_COUNT, 500)
        self.assertEqual(config.DEFAULT_NAME_PREFIX, "Sedan")


class LoggingSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._saved = (root.level, list(root.handlers))

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in root.handlers:
            handler.close()
        root.setLevel(self._saved[0])
        root.handlers[:] = self._saved[1]

    def test_console_and_rotating_file_handlers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "traffic.log")
            setup_logging(logging.DEBUG, log_file=path)
            root = logging.getLogger()
            self.assertEqual(root.level, logging.DEBUG)
            self.assertEqual(len(root.handlers), 2)
            self.assertTrue(any(isinstance(h, RotatingFileHandler) for h in root.handlers))
            for handler in root.handlers:
                handler.close()
            root.handlers.clear()


if __name__ == "__main__":
    unittest.main()
