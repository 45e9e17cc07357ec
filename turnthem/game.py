"""The playing field: the card deck, mouse handling and the main loop."""

from __future__ import annotations

import argparse
import enum
import random
from pathlib import Path
from typing import Mapping, Optional, Sequence

import pygame

from turnthem.projectile import FRAME_DT, Projectile
from turnthem.render import GameObject, draw_texture_rec
from turnthem.weapon import WeaponCard

SCREEN_WIDTH = 520
SCREEN_HEIGHT = 800
TITLE = "TurnThem"
TARGET_FPS = 60
BACKGROUND = (245, 245, 245)

CARD_SHEET_SIZE = 150
CARD_WIDTH = 90.0
CARD_HEIGHT = 120.0
SHELL_FRAME = (9, 19)

DECK_FRAME = (0, 0, 500, 150)
DECK_POSITION = (10.0, 640.0)
SLOT_POSITIONS = (
    (28.0, 653.0),
    (153.0, 653.0),
    (278.0, 653.0),
    (403.0, 653.0),
)

TEXTURE_FILES = {
    "cannon": "cannon_sprite_sheet.png",
    "scannon": "scannon_sprite_sheet.png",
    "shell": "shell_projectile.png",
    "deck": "deck_sprite_sheet.png",
}


class CardType(enum.Enum):
    CANNON = enum.auto()
    SCANNON = enum.auto()


class MouseState(enum.Enum):
    NORMAL = enum.auto()
    DRAGGING = enum.auto()
    DROP = enum.auto()


def _is_loaded(texture: Optional[pygame.Surface]) -> bool:
    return texture is not None and texture.get_width() > 0 and texture.get_height() > 0


def generate_weapon_card(
    sprite: pygame.Surface, pos: Sequence[float], slot: int
) -> WeaponCard:
    """Create a weapon card drawn from ``sprite``, placed at ``pos`` in deck slot ``slot``."""
    x, y = pos
    return WeaponCard(sprite, CARD_SHEET_SIZE, CARD_WIDTH, CARD_HEIGHT, x, y, slot)


class Deck(GameObject):
    """The tray at the bottom of the screen holding four weapon cards."""

    def __init__(
        self,
        texture: pygame.Surface,
        card_sprites: Sequence[tuple[CardType, pygame.Surface]],
        rng: Optional[random.Random] = None,
    ) -> None:
        if not card_sprites:
            raise ValueError("a deck needs at least one card sprite")
        self.texture = texture
        self.card_sprites = list(card_sprites)
        self.rng = rng if rng is not None else random.Random()
        self.frame = pygame.Rect(DECK_FRAME)
        self.position = pygame.Vector2(DECK_POSITION)
        self.slot_positions = [pygame.Vector2(p) for p in SLOT_POSITIONS]
        self.cards: list[Optional[WeaponCard]] = [
            self._deal(slot) for slot in range(len(self.slot_positions))
        ]

    def _deal(self, slot: int) -> WeaponCard:
        _, sprite = self.rng.choice(self.card_sprites)
        return generate_weapon_card(sprite, self.slot_positions[slot], slot)

    def update(self) -> None:
        """Deal a new card into every empty slot."""
        for slot, card in enumerate(self.cards):
            if card is None:
                self.cards[slot] = self._deal(slot)

    def draw(self, surface: pygame.Surface) -> None:
        draw_texture_rec(surface, self.texture, self.frame, self.position)
        for card in self.cards:
            if card is not None:
                card.draw(surface)

    def is_point_inside(self, point: Sequence[float]) -> bool:
        px, py = point
        return (
            self.position.x <= px <= self.position.x + self.frame.width
            and self.position.y <= py <= self.position.y + self.frame.height
        )

    def reset_card_position(self, slot_id: int) -> None:
        """Put the card of ``slot_id`` back on its slot; unknown slots are ignored."""
        if not 0 <= slot_id < len(self.cards):
            return
        card = self.cards[slot_id]
        if card is not None:
            card.set_xy(self.slot_positions[slot_id])


class Game:
    """Game state: the deck, flying projectiles and the card being dragged."""

    def __init__(
        self,
        textures: Mapping[str, pygame.Surface],
        screen_width: int = SCREEN_WIDTH,
        screen_height: int = SCREEN_HEIGHT,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.textures = dict(textures)
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.card_sprites = [
            (CardType.CANNON, self.textures["cannon"]),
            (CardType.SCANNON, self.textures["scannon"]),
        ]
        self.deck = Deck(self.textures["deck"], self.card_sprites, rng)
        self.weapon_cards: list[WeaponCard] = [c for c in self.deck.cards if c is not None]
        self.objects: list[GameObject] = [self.deck]
        self.projectiles: list[Projectile] = []
        self.mouse_state = MouseState.NORMAL
        self.selected_card: Optional[WeaponCard] = None
        self.frame_counter = 0

    def fire(
        self, sprite: pygame.Surface, pos: Sequence[float], speed: float, angle: float
    ) -> None:
        """Launch a shell; a texture that did not load fires nothing."""
        if not _is_loaded(sprite):
            return
        self.projectiles.append(Projectile(sprite, pos, SHELL_FRAME, speed, angle))

    def handle_mouse(self, pos: Sequence[float], pressed: bool, released: bool) -> None:
        """Advance the drag-and-drop state machine by one frame."""
        if self.mouse_state is MouseState.NORMAL:
            if pressed:
                card = next((c for c in self.weapon_cards if c.is_point_inside(pos)), None)
                if card is not None:
                    self.mouse_state = MouseState.DRAGGING
                    card.dragging = True
                    self.selected_card = card
        elif self.mouse_state is MouseState.DRAGGING:
            assert self.selected_card is not None
            self.selected_card.set_xy(pos)
            if released:
                self.mouse_state = MouseState.DROP
                self.selected_card.dragging = False
        elif self.mouse_state is MouseState.DROP:
            assert self.selected_card is not None
            if self.deck.is_point_inside(pos):
                self.deck.reset_card_position(self.selected_card.slot_id)
            self.mouse_state = MouseState.NORMAL

    def step(self, dt: float = FRAME_DT) -> None:
        """Update every object and move projectiles, dropping those that left the screen."""
        self.frame_counter += 1
        for obj in self.objects:
            obj.update()
        kept = []
        for projectile in self.projectiles:
            if projectile.is_out_of_bounds(self.screen_width, self.screen_height):
                continue
            projectile.update(dt)
            kept.append(projectile)
        self.projectiles = kept

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(BACKGROUND)
        for obj in self.objects:
            obj.draw(surface)
        for projectile in self.projectiles:
            projectile.draw(surface)


def load_textures(assets_dir: str | Path) -> dict[str, pygame.Surface]:
    """Load the game's images; a missing image becomes an empty surface."""
    root = Path(assets_dir)
    textures = {}
    for name, filename in TEXTURE_FILES.items():
        path = root / filename
        if path.is_file():
            image = pygame.image.load(str(path))
            if pygame.display.get_surface() is not None:
                image = image.convert_alpha()
            textures[name] = image
        else:
            textures[name] = pygame.Surface((0, 0), pygame.SRCALPHA)
    return textures


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="turnthem", description="Run the game.")
    parser.add_argument("--assets", default="assets", help="directory holding the images")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        game = Game(load_textures(args.assets), SCREEN_WIDTH, SCREEN_HEIGHT)
        clock = pygame.time.Clock()
        running = True
        while running:
            pressed = released = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    pressed = True
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    released = True
            if not running:
                break
            game.handle_mouse(pygame.mouse.get_pos(), pressed, released)
            game.step()
            game.draw(screen)
            pygame.display.flip()
            clock.tick(TARGET_FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())