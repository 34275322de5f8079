#!/usr/bin/env python3
"""
Main view class — combines all UI mixins into one runnable Pygame window.

Module layout
─────────────
    ui/
    ├── types.py           – ColorRGB, ColorRGBA, Camera
    ├── constants.py       – ViewConstants mixin (all class-level constants)
    ├── helpers.py         – shape rotation / projection utilities
    ├── draw_cars.py       – CarRenderer mixin (bodies, indicators, targets)
    ├── hud.py             – HudRenderer mixin  (status, help, debug, pause)
    └── pygame_view.py     – PygameScenarioView (this file – main loop)
"""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Optional, Tuple

import pygame

from traffic.scenario import Scenario

from .constants import ViewConstants
from .draw_cars import CarRenderer
from .hud import HudRenderer
from .types import Camera

log = logging.getLogger("view")


class PygameScenarioView(
    ViewConstants,
    CarRenderer,
    HudRenderer,
):
    """Traffic scenario visualiser powered by Pygame.

    Calls :meth:`Scenario.tick` once per rendered frame and draws the
    population from its read-only snapshots.
    """

    def __init__(self, scenario: Scenario, width: int = 1000, height: int = 1000, fps: int = 60):
        self.scenario = scenario
        self.width = width
        self.height = height
        self.fps = fps

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None
        self.font_small: Optional[pygame.font.Font] = None
        self.font_tiny: Optional[pygame.font.Font] = None
        self.font_title: Optional[pygame.font.Font] = None

        self.camera = Camera(width, height, world_x=width / 2, world_y=height / 2)
        self.time_seconds = 0.0

        # UI state
        self.paused = False
        self.show_debug = False
        self.show_help = False
        self._drag_from: Optional[Tuple[int, int]] = None

    # ------------------------------------------------------------------ #
    #  Setup helpers                                                       #
    # ------------------------------------------------------------------ #
    @staticmethod
    def _load_font(size: int, bold: bool = False) -> pygame.font.Font:
        return pygame.font.SysFont("monospace", size, bold=bold)

    def _handle_resize(self, new_w: int, new_h: int) -> None:
        self.width = max(400, new_w)
        self.height = max(300, new_h)
        self.camera.screen_w = self.width
        self.camera.screen_h = self.height
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )

    def _reset_camera(self) -> None:
        self.camera = Camera(
            self.width, self.height, world_x=self.width / 2, world_y=self.height / 2
        )

    # ------------------------------------------------------------------ #
    #  Screenshot                                                          #
    # ------------------------------------------------------------------ #
    def _take_screenshot(self) -> None:
        if self.screen is None:
            return
        os.makedirs(self.SCREENSHOT_DIR, exist_ok=True)
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = os.path.join(self.SCREENSHOT_DIR, f"traffic_{stamp}.png")
        pygame.image.save(self.screen, path)
        log.info("Saved screenshot %s", path)

    # ------------------------------------------------------------------ #
    #  Events                                                              #
    # ------------------------------------------------------------------ #
    def _handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one event; return False when the window should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.VIDEORESIZE:
            self._handle_resize(event.w, event.h)
        elif event.type == pygame.MOUSEWHEEL:
            factor = self.ZOOM_IN_FACTOR if event.y > 0 else self.ZOOM_OUT_FACTOR
            self.camera.zoom_by(factor, self.MIN_ZOOM, self.MAX_ZOOM)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._drag_from = event.pos
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._drag_from = None
        elif event.type == pygame.MOUSEMOTION and self._drag_from is not None:
            self.camera.pan(event.pos[0] - self._drag_from[0],
                            event.pos[1] - self._drag_from[1])
            self._drag_from = event.pos
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                self.paused = not self.paused
                log.info("Paused" if self.paused else "Resumed")
            elif event.key == pygame.K_s:
                self.scenario.shuffle()
            elif event.key == pygame.K_r:
                self._reset_camera()
            elif event.key == pygame.K_h:
                self.show_help = not self.show_help
            elif event.key == pygame.K_F3:
                self.show_debug = not self.show_debug
            elif event.key == pygame.K_F12:
                self._take_screenshot()
        return True

    # ------------------------------------------------------------------ #
    #  Main loop                                                           #
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption("Simulate Traffic")
        self.screen = pygame.display.set_mode(
            (self.width, self.height), pygame.RESIZABLE
        )
        self.clock = pygame.time.Clock()
        self.font_small = self._load_font(13, bold=False)
        self.font_tiny = self._load_font(11, bold=False)
        self.font_title = self._load_font(28, bold=True)
        log.info("View opened %dx%d @ %d fps, %d cars",
                 self.width, self.height, self.fps, len(self.scenario))

        running = True
        while running:
            delta_time = self.clock.tick(self.fps) / 1000.0
            self.time_seconds += delta_time

            for event in pygame.event.get():
                if not self._handle_event(event):
                    running = False

            if not self.paused:
                self.scenario.tick()

            self.screen.fill(self.BG_COLOR)
            self.draw_cars(self.screen, self.scenario)

            self.draw_hud(self.screen)
            if self.show_help:
                self._draw_help(self.screen)
            if self.show_debug:
                self._draw_debug_overlay(self.screen, delta_time)
            if self.paused:
                self._draw_pause_banner(self.screen)

            pygame.display.flip()

        pygame.quit()
        log.info("View closed after %d frames", self.scenario.ticks)


# ---------------------------------------------------------------------- #
#  Convenience entry point                                                 #
# ---------------------------------------------------------------------- #
def run_pygame_view(
    scenario: Scenario, width: int = 1000, height: int = 1000, fps: int = 60
) -> None:
    view = PygameScenarioView(scenario=scenario, width=width, height=height, fps=fps)
    view.run()


if __name__ == "__main__":
    raise SystemExit(
        "pygame_view.py needs a scenario. Run `python main.py` "
        "or call run_pygame_view(your_scenario)."
    )
