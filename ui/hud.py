#!/usr/bin/env python3
"""Status panel, help text, debug overlay and pause banner (mixin)."""

from __future__ import annotations

import pygame

from .helpers import render_text


class HudRenderer:
    """Mixin that draws every overlay / HUD element."""

    # ------------------------------------------------------------------ #
    #  Status panel                                                        #
    # ------------------------------------------------------------------ #

    def draw_hud(self, surface: pygame.Surface) -> None:
        if self.font_small is None or self.font_tiny is None:
            return

        panel_rect = pygame.Rect(16, self.height - 16 - 44, 260, 44)
        pygame.draw.rect(surface, self.HUD_BG_COLOR, panel_rect, border_radius=6)
        pygame.draw.rect(surface, self.HUD_BORDER_COLOR, panel_rect, width=1, border_radius=6)

        render_text(
            surface,
            self.font_small,
            f"CARS {len(self.scenario)}   FRAME {self.scenario.ticks}",
            (panel_rect.x + 10, panel_rect.y + 6),
            self.HUD_TEXT_COLOR,
        )
        render_text(
            surface,
            self.font_tiny,
            "H  help",
            (panel_rect.x + 10, panel_rect.y + 26),
            (120, 120, 120),
        )

    def _draw_help(self, surface: pygame.Surface) -> None:
        if self.font_tiny is None:
            return
        x = self.width - 170
        y = 16
        box = pygame.Rect(x - 8, y - 6, 162, len(self.HELP_LINES) * 16 + 12)
        pygame.draw.rect(surface, self.HUD_BG_COLOR, box, border_radius=4)
        pygame.draw.rect(surface, self.HUD_BORDER_COLOR, box, width=1, border_radius=4)
        for line in self.HELP_LINES:
            text = self.font_tiny.render(line, True, self.HUD_TEXT_COLOR)
            surface.blit(text, (x, y))
            y += 16

    # ------------------------------------------------------------------ #
    #  Debug / FPS overlay                                                 #
    # ------------------------------------------------------------------ #

    def _draw_debug_overlay(self, surface: pygame.Surface, dt: float) -> None:
        if self.font_tiny is None:
            return
        fps = self.clock.get_fps() if self.clock else 0.0
        lines = [
            f"FPS  {fps:.1f}",
            f"DT   {dt * 1000:.1f} ms",
            f"CARS {len(self.scenario)}",
            f"SUB  {self.scenario.substeps}",
            f"ZOOM {self.camera.zoom:.2f}x",
            f"RES  {self.width}x{self.height}",
            f"TIME {self.time_seconds:.1f}s",
        ]
        x, y = 16, 16
        for line in lines:
            text = self.font_tiny.render(line, True, self.DEBUG_TEXT_COLOR)
            surface.blit(text, (x, y))
            y += 14

    # ------------------------------------------------------------------ #
    #  Pause banner                                                        #
    # ------------------------------------------------------------------ #

    def _draw_pause_banner(self, surface: pygame.Surface) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 100))
        surface.blit(overlay, (0, 0))
        if self.font_title:
            text = self.font_title.render("PAUSED", True, (220, 220, 220))
            surface.blit(text, text.get_rect(center=(self.width // 2, self.height // 2)))
