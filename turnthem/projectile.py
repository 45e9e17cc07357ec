"""A shell flying in a straight line."""

from __future__ import annotations

import math
from typing import Sequence

import pygame

from turnthem.render import GameObject, draw_texture_pro

FRAME_DT = 1.0 / 60.0
BOUNDS_MARGIN = 50
_PIVOT_Y = 6.5  # the bullet's length without its trail


class Projectile(GameObject):
    """A sprite moving at ``speed`` pixels per second in direction ``angle`` (degrees)."""

    def __init__(
        self,
        sprite: pygame.Surface,
        pos: Sequence[float],
        frame_dim: Sequence[float],
        speed: float,
        angle: float,
    ) -> None:
        self.sprite = sprite
        self.position = pygame.Vector2(pos)
        self.frame = pygame.Rect(0, 0, int(frame_dim[0]), int(frame_dim[1]))
        self.speed = speed
        self.angle_deg = angle

    def update(self, dt: float = FRAME_DT) -> None:
        rad = math.radians(self.angle_deg)
        self.position.x += self.speed * math.cos(rad) * dt
        self.position.y += self.speed * math.sin(rad) * dt

    def draw(self, surface: pygame.Surface) -> None:
        dest = (self.position.x, self.position.y, self.frame.width, self.frame.height)
        origin = (self.frame.width / 2.0, _PIVOT_Y)
        draw_texture_pro(surface, self.sprite, self.frame, dest, origin, self.angle_deg + 90)

    def is_out_of_bounds(self, screen_width: int, screen_height: int) -> bool:
        """True once the projectile is more than the margin outside the screen."""
        x, y = self.position
        return (
            x < -BOUNDS_MARGIN
            or x > screen_width + BOUNDS_MARGIN
            or y < -BOUNDS_MARGIN
            or y > screen_height + BOUNDS_MARGIN
        )