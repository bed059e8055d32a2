"""HUD overlay with scene stats and key hints."""

import pygame

from .constants import HINT_COLOR, HUD_PADDING, TEXT_COLOR
from .scene import LightSource


class HUD:
    """Heads-Up Display in the top-left corner, key hints along the bottom."""

    HINT_TEXT = "[LMB] drag light | [F] fps | [ESC] quit"

    def __init__(self, font: pygame.font.Font, small_font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = small_font

    def lines(self, light: LightSource, hits: int, ray_count: int,
              show_fps: bool = False, fps: float = 0.0) -> list[str]:
        """Text lines shown in the top-left corner."""
        x, y = light.position.to_pixel()
        lines = [
            f"Light: ({x}, {y})",
            f"Rays hit: {hits}/{ray_count}",
        ]
        if light.dragging:
            lines.append("DRAGGING")
        if show_fps:
            lines.append(f"FPS: {fps:.1f}")
        return lines

    def draw(self, surf: pygame.Surface, light: LightSource, hits: int, ray_count: int,
             show_fps: bool = False, fps: float = 0.0) -> None:
        y = HUD_PADDING
        for line in self.lines(light, hits, ray_count, show_fps, fps):
            text_surf = self.font.render(line, True, TEXT_COLOR)
            surf.blit(text_surf, (HUD_PADDING, y))
            y += text_surf.get_height() + 4

        hint = self.small_font.render(self.HINT_TEXT, True, HINT_COLOR)
        hint_rect = hint.get_rect(midbottom=(surf.get_width() // 2, surf.get_height() - HUD_PADDING))
        surf.blit(hint, hint_rect)
