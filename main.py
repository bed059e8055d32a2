"""Interactive raytracer entry point"""

from __future__ import annotations

import pygame

from raylight.constants import *
from raylight.events import ToggleFps, poll_events
from raylight.frame import build_frame, cast_ray_fan, count_hits
from raylight.logger import SessionLogger
from raylight.models import Occluder
from raylight.render import SurfaceRenderer
from raylight.scene import LightSource, drain_events
from raylight.ui import HUD
from raylight.vector import Vec2


class RaycastDemo:
    """
    Main controller: initializes pygame, runs the loop, feeds input into the
    scene state, casts the ray fan, and draws the frame.
    """

    def __init__(self) -> None:
        """Initialize subsystems and set the initial scene state."""
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.renderer = SurfaceRenderer(self.screen)
        self.hud = HUD(pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM),
                       pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL))
        self.logger = SessionLogger(LOG_FILE)

        # Scene state
        self.occluder = Occluder(Vec2.from_tuple(OCCLUDER_CENTER), OCCLUDER_RADIUS)
        self.light = LightSource.initial()
        self.show_fps = False
        self.frames = 0

    def run(self) -> None:
        """Main loop: process events, cast rays, render; exits on quit request."""
        running = True
        while running:
            events = poll_events()
            for event in events:
                if isinstance(event, ToggleFps):
                    self.show_fps = not self.show_fps

            was_dragging = self.light.dragging
            self.light, running = drain_events(self.light, events)

            casts = cast_ray_fan(self.light.position, self.occluder, RAY_COUNT, RAY_LENGTH)
            hits = count_hits(casts)

            if self.light.dragging and not was_dragging:
                self.logger.log_drag_start(self.light.position)
            elif was_dragging and not self.light.dragging:
                self.logger.log_drag_end(self.light.position, hits)

            self.draw(casts, hits)
            self.frames += 1

            # Cap frame rate
            self.clock.tick(FPS)

        self.logger.log_shutdown(self.frames)
        pygame.quit()

    def draw(self, casts, hits: int) -> None:
        """
        Compose the frame: clear → occluder → rays → light → HUD → present.

        Parameters
        ----------
        casts : list[RayCast]
            This frame's ray fan
        hits : int
            Number of rays in the fan that hit the occluder
        """
        self.renderer.clear()
        self.renderer.draw(build_frame(self.light, self.occluder, casts, CIRCLE_SEGMENTS))
        self.hud.draw(self.screen, self.light, hits, len(casts), self.show_fps, self.clock.get_fps())
        self.renderer.present()


if __name__ == "__main__":
    RaycastDemo().run()
