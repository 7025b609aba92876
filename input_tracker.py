# input_tracker.py

"""
Tracks the pointer and exposes it to the animation as a cursor position.

States:
- inactive: cursor sits at the off-canvas sentinel, nothing is repelled.
- active:   a mouse button is held; the cursor follows the pointer.

Pointer positions arrive in window (display) pixels and are converted to
canvas-buffer pixels by the ratio of canvas size to displayed size.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

import pygame

import constants

logger = logging.getLogger("particle_rings")


@dataclass
class Cursor:
    x: float = constants.SENTINEL_CURSOR[0]
    y: float = constants.SENTINEL_CURSOR[1]

    @property
    def is_active(self) -> bool:
        return (self.x, self.y) != constants.SENTINEL_CURSOR

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def set(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    def reset(self):
        self.x, self.y = constants.SENTINEL_CURSOR


class InputTracker:
    """
    Routes pygame mouse events into a shared Cursor.

    Data Contract:
    - Inputs:
        - cursor (Cursor): The cursor owned by the particle system.
        - canvas_size (tuple): (width, height) of the canvas buffer.
        - display_size (tuple): (width, height) the canvas is shown at.
    - Side Effects: handle_event mutates the cursor.
    """
    def __init__(self, cursor: Cursor, canvas_size: Tuple[int, int], display_size: Tuple[int, int]):
        self.cursor = cursor
        self.canvas_size = canvas_size
        self.pressed = False
        if display_size[0] <= 0 or display_size[1] <= 0:
            raise ValueError(f"Display size must be positive, got {display_size}")
        self.display_size = tuple(display_size)

    def resize(self, display_size: Tuple[int, int]) -> bool:
        """
        Adopts a new display size. Non-positive sizes (a minimized window)
        are ignored and the previous transform is kept.
        """
        if display_size[0] <= 0 or display_size[1] <= 0:
            logger.debug(f"Ignoring resize to {display_size}")
            return False
        self.display_size = tuple(display_size)
        return True

    def to_canvas(self, pos: Tuple[float, float]) -> Tuple[float, float]:
        """Converts a display-space position to canvas coordinates."""
        return (
            pos[0] / self.display_size[0] * self.canvas_size[0],
            pos[1] / self.display_size[1] * self.canvas_size[1],
        )

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Updates the cursor from a mouse event. Returns True if the event was
        a pointer event this tracker consumed.
        """
        if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP) and getattr(event, 'button', 1) > 3:
            # Wheel scrolls arrive as buttons 4 and up.
            return False
        if event.type == pygame.MOUSEBUTTONDOWN:
            self.pressed = True
            self.cursor.set(*self.to_canvas(event.pos))
            logger.debug(f"Pointer down at canvas {self.cursor.position}")
            return True
        if event.type == pygame.MOUSEMOTION:
            if self.pressed:
                self.cursor.set(*self.to_canvas(event.pos))
                return True
            return False
        if event.type == pygame.MOUSEBUTTONUP:
            self.pressed = False
            self.cursor.reset()
            logger.debug("Pointer up, cursor reset")
            return True
        return False
