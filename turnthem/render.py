"""Drawing primitives and the base class for everything drawn on screen."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

import pygame

OPAQUE = 255


class GameObject(ABC):
    """Something that advances once per frame and draws itself."""

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the object onto ``surface``."""


def _cut(texture: pygame.Surface, source: pygame.Rect | Sequence[float]) -> pygame.Surface:
    """Copy the part of ``texture`` under ``source`` onto a fresh surface with per-pixel alpha."""
    rect = pygame.Rect(source).clip(texture.get_rect())
    piece = pygame.Surface(rect.size, pygame.SRCALPHA)
    piece.blit(texture, (0, 0), rect)
    return piece


def _fade(piece: pygame.Surface, alpha: int) -> pygame.Surface:
    if alpha < OPAQUE:
        piece.fill((255, 255, 255, alpha), special_flags=pygame.BLEND_RGBA_MULT)
    return piece


def draw_texture_rec(
    surface: pygame.Surface,
    texture: pygame.Surface,
    source: pygame.Rect | Sequence[float],
    position: Sequence[float],
    alpha: int = OPAQUE,
) -> pygame.Rect:
    """Draw the ``source`` part of ``texture`` with its top-left corner at ``position``.

    Returns the area of ``surface`` that was touched.
    """
    piece = _fade(_cut(texture, source), alpha)
    x, y = position
    return surface.blit(piece, (int(x), int(y)))


def draw_texture_pro(
    surface: pygame.Surface,
    texture: pygame.Surface,
    source: pygame.Rect | Sequence[float],
    dest: Sequence[float],
    origin: Sequence[float],
    rotation: float,
    alpha: int = OPAQUE,
) -> pygame.Rect:
    """Draw the ``source`` part of ``texture`` scaled into ``dest`` and rotated.

    ``origin`` is the pivot, relative to the scaled piece, that lands on the
    top-left point of ``dest``; ``rotation`` is in degrees, clockwise on screen.
    Returns the area of ``surface`` that was touched.
    """
    x, y, width, height = dest
    piece = _cut(texture, source)
    size = (max(0, round(width)), max(0, round(height)))
    if piece.get_size() != size:
        piece = pygame.transform.scale(piece, size)
    if rotation:
        piece = pygame.transform.rotate(piece, -rotation)
    _fade(piece, alpha)

    offset = pygame.Vector2(width / 2.0, height / 2.0) - pygame.Vector2(origin)
    center = pygame.Vector2(x, y) + offset.rotate(rotation)
    target = piece.get_rect(center=(round(center.x), round(center.y)))
    return surface.blit(piece, target)