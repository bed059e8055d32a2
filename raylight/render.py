"""Output surface: rasterizes frame draw commands onto a pygame surface."""

from __future__ import annotations

from typing import Iterable

import pygame
import pygame.gfxdraw

from .constants import BG_COLOR
from .models import DrawLine


class SurfaceRenderer:
    """
    Draws line commands with per-line opacity.

    Each line is blended onto the target as it is drawn, so translucent rays
    tint the occluder outline they cross and overlapping rays add up.
    ``pygame.draw.line`` would ignore the alpha channel here.
    """

    def __init__(self, surface: pygame.Surface, flip: bool = True) -> None:
        """
        Parameters
        ----------
        surface : pygame.Surface
            Target surface, usually the one returned by ``pygame.display.set_mode``.
        flip : bool
            Whether ``present()`` also flips the display.
        """
        self.surface = surface
        self.flip = flip

    def clear(self) -> None:
        self.surface.fill(BG_COLOR)

    def draw_line(self, cmd: DrawLine) -> None:
        x1, y1 = cmd.start.to_pixel()
        x2, y2 = cmd.end.to_pixel()
        pygame.gfxdraw.line(self.surface, x1, y1, x2, y2, (*cmd.color, cmd.alpha))

    def draw(self, commands: Iterable[DrawLine]) -> None:
        for cmd in commands:
            self.draw_line(cmd)

    def present(self) -> None:
        if self.flip:
            pygame.display.flip()
