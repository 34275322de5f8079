#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via environment variables (see :mod:`main`).
This module is a thin, import-safe leaf — it never imports from
other project packages.
"""

from typing import Optional

# ── Simulation defaults ──────────────────────────────────────────────────────
DEFAULT_CAR_COUNT: int = 500
DEFAULT_NAME_PREFIX: str = "Sedan"
DEFAULT_SEED: Optional[int] = None

# ── UI defaults ──────────────────────────────────────────────────────────────
WINDOW_WIDTH: int = 1000
WINDOW_HEIGHT: int = 1000
TARGET_FPS: int = 60

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_FILE: str = "traffic.log"
DEFAULT_LOG_LEVEL: str = "INFO"

# ── Environment variable names ───────────────────────────────────────────────
ENV_CAR_COUNT = "TRAFFIC_CARS"
ENV_NAME_PREFIX = "TRAFFIC_NAME"
ENV_SEED = "TRAFFIC_SEED"
ENV_FPS = "TRAFFIC_FPS"
ENV_LOG_LEVEL = "TRAFFIC_LOG_LEVEL"
