"""
Input handling abstraction to decouple Pygame input from the demo loop.
"""

from __future__ import annotations
import pygame
from typing import Tuple


class InputHandler:
    """
    Abstraction for gathering input state. Processes Pygame events and
    provides mouse position and action queries.
    """

    def __init__(self) -> None:
        self._quit = False
        self._click = False
        self._mouse_moved = False
        self._mouse_pos: Tuple[int, int] = (0, 0)

    def process_events(self) -> None:
        """
        Poll Pygame events, update internal state for quit and click actions,
        and capture the latest mouse position.
        """
        self._quit = False
        self._click = False
        self._mouse_moved = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_x, pygame.K_ESCAPE):
                    self._quit = True
            elif event.type == pygame.MOUSEMOTION:
                self._mouse_moved = True
                self._mouse_pos = event.pos
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._click = True
                self._mouse_pos = event.pos

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def click_pressed(self) -> bool:
        """Return True if the left mouse button was pressed this frame."""
        return self._click

    def mouse_moved(self) -> bool:
        """Return True if the mouse moved this frame."""
        return self._mouse_moved

    def get_mouse_pos(self) -> Tuple[int, int]:
        """Return the last known mouse position in screen pixels."""
        return self._mouse_pos
