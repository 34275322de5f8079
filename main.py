#!/usr/bin/env python3
"""
main.py
=======
Entry point: read configuration overrides from the environment, set up
logging, build the scenario and open the viewer.

Environment
-----------
``TRAFFIC_CARS``       number of cars (default 500)
``TRAFFIC_NAME``       car name prefix (default ``Sedan``)
``TRAFFIC_SEED``       integer random seed (default: unseeded)
``TRAFFIC_FPS``        frame-rate cap (default 60)
``TRAFFIC_LOG_LEVEL``  ``DEBUG`` / ``INFO`` / ``WARNING`` …
"""

import logging
import os
from typing import Callable, Optional, TypeVar

import config
from logging_setup import setup_logging
from traffic.scenario import Scenario

T = TypeVar("T")

log = logging.getLogger("main")


def _env(name: str, default: T, parse: Callable[[str], T]) -> T:
    """Parsed value of environment variable *name*, or *default*."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return parse(raw.strip())
    except ValueError:
        log.warning("Ignoring %s=%r (invalid), using %r", name, raw, default)
        return default


def _non_negative_int(raw: str) -> int:
    value = int(raw)
    if value < 0:
        raise ValueError(raw)
    return value


def _positive_int(raw: str) -> int:
    value = int(raw)
    if value <= 0:
        raise ValueError(raw)
    return value


def build_scenario(
    count: int = config.DEFAULT_CAR_COUNT,
    name: str = config.DEFAULT_NAME_PREFIX,
    seed: Optional[int] = config.DEFAULT_SEED,
) -> Scenario:
    return Scenario.new(seed=seed).with_cars(count, name)


def main() -> None:
    level_name = os.environ.get(config.ENV_LOG_LEVEL, config.DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    unknown_level = not isinstance(level, int)
    setup_logging(logging.INFO if unknown_level else level)
    if unknown_level:
        log.warning("Unknown log level %r, using INFO", level_name)

    count = _env(config.ENV_CAR_COUNT, config.DEFAULT_CAR_COUNT, _non_negative_int)
    name = _env(config.ENV_NAME_PREFIX, config.DEFAULT_NAME_PREFIX, str)
    seed = _env(config.ENV_SEED, config.DEFAULT_SEED, int)
    fps = _env(config.ENV_FPS, config.TARGET_FPS, _positive_int)

    log.info("Starting: %d cars '%s', seed=%s, %d fps", count, name, seed, fps)
    scenario = build_scenario(count, name, seed)

    # Imported late so the core stays usable without a display.
    from ui.pygame_view import run_pygame_view

    try:
        run_pygame_view(
            scenario,
            width=config.WINDOW_WIDTH,
            height=config.WINDOW_HEIGHT,
            fps=fps,
        )
    except KeyboardInterrupt:
        log.info("Shutting down...")


if __name__ == "__main__":
    main()
