"""
Pygame-backed image primitive: cloning and in-place rotation of a Surface.
"""

from __future__ import annotations
import numpy as np
import pygame
from typing import Tuple

from .config import CLOCKWISE_ROTATION


class SurfaceImage:
    """
    Wraps a pygame.Surface with the clone/rotate operations sprites need.
    Attributes:
        surface (pygame.Surface): The current pixels.
        clockwise (bool): Whether positive angles turn clockwise on screen.
    """

    def __init__(self, surface: pygame.Surface, clockwise: bool = CLOCKWISE_ROTATION) -> None:
        self.surface = surface
        self.clockwise = clockwise

    @classmethod
    def from_file(cls, path: str, clockwise: bool = CLOCKWISE_ROTATION) -> SurfaceImage:
        """Load an image file into a new SurfaceImage."""
        return cls(pygame.image.load(path), clockwise=clockwise)

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def clone(self) -> SurfaceImage:
        """Return an independent copy of this image."""
        return SurfaceImage(self.surface.copy(), clockwise=self.clockwise)

    def rotated(self, angle: float) -> SurfaceImage:
        """Rotate in place by angle degrees and return self."""
        # pygame.transform.rotate turns counter-clockwise for positive angles
        pygame_angle = -angle if self.clockwise else angle
        self.surface = pygame.transform.rotate(self.surface, pygame_angle)
        return self

    def pixels(self) -> np.ndarray:
        """Return the image as a (width, height, 4) RGBA array."""
        rgb = pygame.surfarray.array3d(self.surface)
        # Fully opaque (255) for surfaces without per-pixel alpha
        alpha = pygame.surfarray.array_alpha(self.surface)
        return np.dstack((rgb, alpha))

    def __repr__(self):
        return f"<SurfaceImage size={self.size} clockwise={self.clockwise}>"
