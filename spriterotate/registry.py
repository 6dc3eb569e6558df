"""
Orientation registry: keeps a pristine copy of each sprite's image and
produces rotated images from it on demand.
"""

from __future__ import annotations
import logging
import math
from typing import Dict, Hashable, Optional, Protocol

from .config import DEFAULT_ANGLE

logger = logging.getLogger(__name__)


class ImageLike(Protocol):
    """Host image primitive consumed by the registry."""

    def clone(self) -> ImageLike: ...

    def rotated(self, angle: float) -> ImageLike: ...


class SpriteLike(Protocol):
    """Host sprite object consumed by the registry."""

    id: Hashable
    x: float
    y: float
    image: ImageLike

    def set_image(self, image: ImageLike) -> None: ...


class OrientationState:
    """
    Per-sprite orientation record.
    Attributes:
        base_image: Copy of the sprite's image taken at registration; never mutated.
        current_angle: Last angle applied to the sprite, in degrees (unnormalized).
    """

    def __init__(self, base_image: ImageLike, current_angle: float = DEFAULT_ANGLE) -> None:
        self.base_image = base_image
        self.current_angle = current_angle

    def __repr__(self):
        return f"<OrientationState angle={self.current_angle:.2f}>"


class OrientationRegistry:
    """
    Maps sprite identity to OrientationState and rotates sprites from their
    pristine base image, so repeated rotation never degrades the picture.

    Entries are created lazily on first use and are never removed implicitly.
    Not safe for concurrent mutation: call it from the game's update thread only.

    Usage:
        registry = OrientationRegistry()
        registry.initialize(ship)
        registry.point_towards(ship, enemy)
    """

    def __init__(self) -> None:
        self._states: Dict[Hashable, OrientationState] = {}

    def __contains__(self, sprite_id: Hashable) -> bool:
        return sprite_id in self._states

    def __len__(self) -> int:
        return len(self._states)

    def ensure(self, sprite: SpriteLike) -> OrientationState:
        """Return the state for sprite, capturing a copy of its image on first call."""
        state = self._states.get(sprite.id)
        if state is None:
            state = OrientationState(sprite.image.clone())
            self._states[sprite.id] = state
            logger.debug("Tracking orientation of sprite %r", sprite.id)
        return state

    def get(self, sprite_id: Hashable) -> Optional[OrientationState]:
        """Return the tracked state for sprite_id, or None."""
        return self._states.get(sprite_id)

    def angle_of(self, sprite: SpriteLike) -> float:
        """Last angle applied to sprite; DEFAULT_ANGLE if it was never tracked."""
        state = self._states.get(sprite.id)
        return state.current_angle if state is not None else DEFAULT_ANGLE

    def clear(self) -> None:
        """Forget every tracked sprite (e.g. when a new session starts)."""
        self._states.clear()

    def initialize(self, sprite: SpriteLike) -> None:
        """Capture sprite's current image as its base without rotating it."""
        self.ensure(sprite)

    def rotate_to(self, sprite: SpriteLike, angle: float) -> None:
        """Set sprite's image to its base image rotated by angle degrees."""
        state = self.ensure(sprite)
        state.current_angle = angle
        sprite.set_image(state.base_image.clone().rotated(angle))

    def point_towards(self, sprite: SpriteLike, target: SpriteLike) -> None:
        """
        Rotate sprite to face target.
        The angle is atan2(dy, dx) in degrees, in whatever screen space the
        host positions use; coincident sprites get atan2(0, 0).
        """
        dx = target.x - sprite.x
        dy = target.y - sprite.y
        angle = math.degrees(math.atan2(dy, dx))
        self.rotate_to(sprite, angle)
