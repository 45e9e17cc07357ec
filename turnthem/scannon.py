"""A sweeping cannon that swings between -45 and 45 degrees while firing."""

from __future__ import annotations

import enum
from typing import Callable, Sequence

import pygame

from turnthem.render import GameObject, draw_texture_pro

SWEEP_LIMIT = 45
SHELL_SPEED = 500

FireFn = Callable[[pygame.Surface, pygame.Vector2, float, float], None]


class RotationDirection(enum.Enum):
    CW = enum.auto()
    CCW = enum.auto()


class SCannon(GameObject):
    """Rotates one degree per frame and fires after every full animation cycle."""

    def __init__(
        self,
        sprite_sheet: pygame.Surface,
        proj_sprite: pygame.Surface,
        width: float,
        height: float,
        fpu: int,
        sprites: int,
        x: float,
        y: float,
        fire: FireFn,
    ) -> None:
        self.sprite_sheet = sprite_sheet
        self.proj_sprite = proj_sprite
        self.frame_width = int(width)
        self.frame_height = int(height)
        self.frame = pygame.Rect(0, 0, self.frame_width, self.frame_height)
        self.position = pygame.Vector2(x, y)
        self.frames_per_update = fpu
        self.sprites = sprites
        self.fire = fire
        self.frame_counter = 0
        self.current_frame = 0
        self.angle_deg = 0.0
        self.rotation_direction = RotationDirection.CW
        self.animate = True

    def _rotate(self) -> None:
        if self.rotation_direction is RotationDirection.CW and self.angle_deg > -SWEEP_LIMIT:
            self.angle_deg -= 1
            if self.angle_deg == -SWEEP_LIMIT:
                self.rotation_direction = RotationDirection.CCW
        if self.rotation_direction is RotationDirection.CCW and self.angle_deg < SWEEP_LIMIT:
            self.angle_deg += 1
            if self.angle_deg == SWEEP_LIMIT:
                self.rotation_direction = RotationDirection.CW

    def update(self) -> None:
        self._rotate()
        if not self.animate:
            return
        self.frame_counter += 1
        if self.frame_counter % self.frames_per_update == 0:
            self.frame_counter = 0
            self.current_frame += 1
            if self.current_frame % self.sprites == 0:
                tip = pygame.Vector2(self.position)
                self.fire(self.proj_sprite, tip, SHELL_SPEED, self.angle_deg - 90)
            self.frame.x = self.frame_width * (self.current_frame % self.sprites)

    def draw(self, surface: pygame.Surface) -> None:
        dest = (self.position.x, self.position.y, self.frame_width, self.frame_height)
        origin = (self.frame_width / 2.0, self.frame_height / 2.0)
        draw_texture_pro(surface, self.sprite_sheet, self.frame, dest, origin, self.angle_deg)