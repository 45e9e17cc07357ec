"""A fixed cannon that fires straight up at a steady rate."""

from __future__ import annotations

import time
from typing import Callable, Optional, Sequence

import pygame

from turnthem.render import GameObject, draw_texture_rec

FIRE_INTERVAL = 0.5
SHELL_SPEED = 800
SHELL_ANGLE = -90

FireFn = Callable[[pygame.Surface, pygame.Vector2, float, float], None]


def _stopwatch() -> Callable[[], float]:
    start = time.monotonic()
    return lambda: time.monotonic() - start


class Cannon(GameObject):
    """Fires every half second and plays its recoil animation once per shot."""

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
        clock: Optional[Callable[[], float]] = None,
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
        self.clock = clock if clock is not None else _stopwatch()
        self.frame_counter = 0
        self.current_frame = 0
        self.animate = True
        self.last_fire_time = 0.0

    def update(self) -> None:
        now = self.clock()
        if now - self.last_fire_time >= FIRE_INTERVAL:
            muzzle = pygame.Vector2(self.position.x + self.frame_width / 2.0, self.position.y)
            self.fire(self.proj_sprite, muzzle, SHELL_SPEED, SHELL_ANGLE)
            self.last_fire_time = now
            self.animate = True
            self.current_frame = 0
            self.frame.x = 0
            self.frame_counter = 0

        if not self.animate:
            return
        self.frame_counter += 1
        if self.frame_counter >= self.frames_per_update:
            self.frame_counter = 0
            self.current_frame += 1
            if self.current_frame >= self.sprites:
                self.animate = False
                self.current_frame = 0
                self.frame.x = 0
            else:
                self.frame.x = self.frame_width * self.current_frame

    def draw(self, surface: pygame.Surface) -> None:
        draw_texture_rec(surface, self.sprite_sheet, self.frame, self.position)