"""A weapon card that sits in the deck and can be dragged around."""

from __future__ import annotations

from typing import Sequence

import pygame

from turnthem.render import GameObject, draw_texture_rec

CARD_FRAME_X = 150
SILHOUETTE_SIZE = (50, 65)
DRAG_ALPHA = 128


class WeaponCard(GameObject):
    """A card drawn from a sprite sheet; shows the weapon's silhouette while dragged."""

    def __init__(
        self,
        sprite_sheet: pygame.Surface,
        sheet_size: float,
        width: float,
        height: float,
        x: float,
        y: float,
        slot: int,
    ) -> None:
        self.sprite_sheet = sprite_sheet
        self.sheet_size = sheet_size
        self.frame_width = int(width)
        self.frame_height = int(height)
        self.position = pygame.Vector2(x, y)
        self.slot_id = slot
        self.dragging = False
        self.card_frame = pygame.Rect(CARD_FRAME_X, 0, self.frame_width, self.frame_height)
        self.silhouette_frame = pygame.Rect((0, 0), SILHOUETTE_SIZE)

    def set_xy(self, pos: Sequence[float]) -> None:
        """Place the card so that the silhouette is centred on ``pos``."""
        self.position = pygame.Vector2(pos) - pygame.Vector2(self.silhouette_frame.size) / 2.0

    def is_point_inside(self, point: Sequence[float]) -> bool:
        px, py = point
        return (
            self.position.x <= px <= self.position.x + self.frame_width
            and self.position.y <= py <= self.position.y + self.frame_height
        )

    def update(self) -> None:
        """Cards hold no per-frame state."""

    def draw(self, surface: pygame.Surface) -> None:
        if self.dragging:
            draw_texture_rec(surface, self.sprite_sheet, self.silhouette_frame, self.position, DRAG_ALPHA)
        else:
            draw_texture_rec(surface, self.sprite_sheet, self.card_frame, self.position)