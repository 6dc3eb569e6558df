from __future__ import annotations
import logging
import math
import pygame
from typing import Optional

from .config import (
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
    FPS,
    WINDOW_TITLE,
    BACKGROUND_COLOR,
    ARROW_COLOR,
    TARGET_COLOR,
    ARROW_SIZE,
    TARGET_SIZE,
    TARGET_ORBIT_RADIUS,
    TARGET_ORBIT_SPEED,
)
from .input_handler import InputHandler
from .registry import OrientationRegistry
from .sprite import Sprite
from .surface import SurfaceImage

logger = logging.getLogger(__name__)


def make_arrow_image(size=ARROW_SIZE, color=ARROW_COLOR) -> SurfaceImage:
    """Draw a right-pointing arrow on a transparent surface."""
    w, h = size
    surface = pygame.Surface((w, h), pygame.SRCALPHA)
    shaft = pygame.Rect(0, h // 3, w * 2 // 3, h - 2 * (h // 3))
    pygame.draw.rect(surface, color, shaft)
    pygame.draw.polygon(surface, color, [(w * 2 // 3, 0), (w - 1, h // 2), (w * 2 // 3, h - 1)])
    return SurfaceImage(surface)


def make_target_image(diameter=TARGET_SIZE, color=TARGET_COLOR) -> SurfaceImage:
    surface = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
    pygame.draw.circle(surface, color, (diameter // 2, diameter // 2), diameter // 2)
    return SurfaceImage(surface)


class Demo:
    """Demo loop: an arrow in the middle of the screen keeps facing a moving target."""

    def __init__(
        self,
        clock: Optional[pygame.time.Clock] = None,
        registry: Optional[OrientationRegistry] = None,
    ) -> None:
        pygame.init()
        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
        pygame.display.set_caption(WINDOW_TITLE)
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        # Empty registries are falsy (__len__), so test against None
        self.registry = registry if registry is not None else OrientationRegistry()
        cx, cy = self.screen_width / 2, self.screen_height / 2
        self.arrow = Sprite(cx, cy, make_arrow_image())
        self.target = Sprite(cx + TARGET_ORBIT_RADIUS, cy, make_target_image())
        # Orbit phase of the target around the arrow (radians)
        self.orbit_angle = 0.0
        # Capture the arrow's pristine image before anything rotates it
        self.registry.initialize(self.arrow)
        self.input = InputHandler()
        self.running = True

    def handle_events(self) -> None:
        """Process input events via InputHandler and handle quit."""
        self.input.process_events()
        if self.input.should_quit():
            self.running = False

    def update(self, dt: float) -> None:
        """Move the target, then turn the arrow toward it."""
        if self.input.mouse_moved():
            # Mouse takes over the target; keep the orbit phase in sync
            mx, my = self.input.get_mouse_pos()
            self.target.x, self.target.y = float(mx), float(my)
            self.orbit_angle = math.atan2(
                self.target.y - self.arrow.y, self.target.x - self.arrow.x
            )
        else:
            self.orbit_angle += TARGET_ORBIT_SPEED * dt
            self.target.x = self.arrow.x + math.cos(self.orbit_angle) * TARGET_ORBIT_RADIUS
            self.target.y = self.arrow.y + math.sin(self.orbit_angle) * TARGET_ORBIT_RADIUS
        if self.input.click_pressed():
            # Snap back to the unrotated heading for this frame
            self.registry.rotate_to(self.arrow, 0.0)
        else:
            self.registry.point_towards(self.arrow, self.target)

    def render(self) -> None:
        """Render the entire scene."""
        self.screen.fill(BACKGROUND_COLOR)
        self.target.draw(self.screen)
        self.arrow.draw(self.screen)
        pygame.display.flip()

    def run(self) -> None:
        """Main loop: handle events, update, and render."""
        logger.info("Demo started (%dx%d @ %d fps)", self.screen_width, self.screen_height, self.fps)
        while self.running:
            # Cap the frame rate and compute delta time in seconds
            dt = self.clock.tick(self.fps) / 1000.0
            self.handle_events()
            self.update(dt)
            self.render()
        logger.info("Demo stopped; %d sprite(s) tracked", len(self.registry))
        pygame.quit()
