"""A missile that flies in a straight line to a target point."""

import math
from typing import Optional, Sequence

import pygame

from battleship.animation import Animation
from battleship.atlas import Atlas


class Bullet:
    """Moves from a start point toward an end point and stops once it passes it."""

    SIZE = (78, 28)

    def __init__(self, atlas: Optional[Atlas] = None) -> None:
        self.animation = Animation(atlas, interval=0.1, loop=True)
        self.x = 0.0
        self.y = 0.0
        self.direction = (0.0, 0.0)
        self.end = (0.0, 0.0)
        self.speed = 0.0
        self.valid = False
        self.angle = 0.0

    def fire(self, start: Sequence[float], end: Sequence[float], speed: float) -> None:
        """Launch from ``start`` toward ``end`` at ``speed`` pixels per second."""
        self.x, self.y = float(start[0]), float(start[1])
        self.end = (float(end[0]), float(end[1]))
        dx = self.end[0] - self.x
        dy = self.end[1] - self.y
        length = math.hypot(dx, dy)
        self.direction = (dx / length, dy / length) if length > 0.0 else (0.0, 0.0)
        self.angle = math.degrees(math.atan2(dy, dx))
        self.speed = speed
        self.valid = True

    def on_update(self, delta: float) -> None:
        if self.valid:
            dir_x, dir_y = self.direction
            self.x += dir_x * self.speed * delta
            self.y += dir_y * self.speed * delta
            to_end_x = self.end[0] - self.x
            to_end_y = self.end[1] - self.y
            if to_end_x * dir_x + to_end_y * dir_y <= 0.0:
                self.valid = False
        self.animation.on_update(delta)

    def on_render(self, surface: pygame.Surface) -> None:
        if not self.valid:
            return
        width, height = self.SIZE
        point = (int(self.x - width // 2), int(self.y - height // 2))
        self.animation.on_render(surface, point, self.angle)