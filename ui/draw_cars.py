#!/usr/bin/env python3
"""Car body, heading / wheel indicators and destination marker (mixin)."""

from __future__ import annotations

from typing import Iterable

import pygame

from traffic.car import CarSnapshot

from .helpers import project, rotated_rect, rotated_segment


class CarRenderer:
    """Mixin that draws every car of a scenario."""

    def draw_cars(self, surface: pygame.Surface, cars: Iterable[CarSnapshot]) -> None:
        for car in cars:
            self.draw_car(surface, car)

    def draw_car(self, surface: pygame.Surface, car: CarSnapshot) -> None:
        color = car.color
        position = car.location

        body = rotated_rect(position, self.BODY_SIZE, self.BODY_ORIGIN, car.heading)
        pygame.draw.polygon(surface, color, project(self.camera, body).tolist())

        heading_line = rotated_segment(
            position, self.INDICATOR_SIZE, self.INDICATOR_ORIGIN, car.heading
        )
        self._draw_indicator(surface, color, heading_line)

        wheel_line = rotated_segment(
            position, self.INDICATOR_SIZE, self.INDICATOR_ORIGIN,
            car.heading + car.wheel_angle,
        )
        self._draw_indicator(surface, color, wheel_line)

        cx, cy = self.camera.world_to_screen(*car.destination.location)
        radius = max(1, int(round(self.DESTINATION_RADIUS * self.camera.zoom)))
        pygame.draw.circle(surface, color, (int(cx), int(cy)), radius)

    def _draw_indicator(self, surface: pygame.Surface, color, segment) -> None:
        start, end = project(self.camera, segment).tolist()
        width = max(1, int(round(self.INDICATOR_SIZE[0] * self.camera.zoom)))
        pygame.draw.line(surface, color, start, end, width)
