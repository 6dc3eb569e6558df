"""Positioned sprite with a replaceable image."""

from __future__ import annotations
import itertools
from typing import Optional

import pygame

from .surface import SurfaceImage

_ids = itertools.count(1)


class Sprite:
    """
    Represents a sprite on screen.
    Attributes:
        id (int): Stable identity, unique within the process unless passed in.
        x (float): X position of the image center in screen pixels.
        y (float): Y position of the image center in screen pixels.
        image (SurfaceImage): Current visual representation.
    """
    def __init__(self, x: float, y: float, image: SurfaceImage, sprite_id: Optional[int] = None) -> None:
        self.id = sprite_id if sprite_id is not None else next(_ids)
        self.x = float(x)
        self.y = float(y)
        self.image = image

    def set_image(self, image: SurfaceImage) -> None:
        self.image = image

    def rect(self) -> pygame.Rect:
        """Bounding rect of the current image, centered on (x, y)."""
        return self.image.surface.get_rect(center=(round(self.x), round(self.y)))

    def draw(self, screen: pygame.Surface) -> None:
        screen.blit(self.image.surface, self.rect())

    def __repr__(self):
        return f"<Sprite id={self.id} x={self.x:.2f} y={self.y:.2f}>"
