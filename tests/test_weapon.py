import pygame
import pytest

from turnthem.weapon import WeaponCard

RED = (255, 0, 0)
BLUE = (0, 0, 255)
BLACK = (0, 0, 0)


def make_sheet():
    sheet = pygame.Surface((240, 120))
    sheet.fill(RED)
    sheet.fill(BLUE, pygame.Rect(150, 0, 90, 120))
    return sheet


def make_card(x=28, y=653, slot=0):
    return WeaponCard(make_sheet(), 150, 90.0, 120.0, x, y, slot)


@pytest.mark.parametrize(
    "point, inside",
    [
        ((28, 653), True),
        ((28 + 90, 653 + 120), True),
        ((60, 700), True),
        ((27, 700), False),
        ((28 + 91, 700), False),
        ((60, 652), False),
        ((60, 653 + 121), False),
    ],
)
def test_point_inside_includes_edges(point, inside):
    assert make_card().is_point_inside(point) is inside


def test_set_xy_centres_silhouette():
    card = make_card()
    card.set_xy((100, 100))
    half = pygame.Vector2(card.silhouette_frame.size) / 2
    assert card.position + half == pygame.Vector2(100, 100)
    assert card.silhouette_frame.size == (50, 65)


def test_set_xy_then_point_inside_follows_card():
    card = make_card()
    card.set_xy((300, 300))
    assert card.is_point_inside((300, 300))
    assert not card.is_point_inside((28, 653))


def test_keeps_slot_id():
    card = make_card(slot=3)
    card.slot_id = 1
    assert card.slot_id == 1
    assert make_card(slot=2).slot_id == 2


def test_update_leaves_card_unchanged():
    card = make_card(x=10, y=20)
    card.update()
    assert card.position == pygame.Vector2(10, 20)
    assert card.dragging is False


def test_draw_shows_card_face_when_idle():
    card = make_card(x=0, y=0)
    target = pygame.Surface((200, 200))
    target.fill(BLACK)
    card.draw(target)
    assert tuple(target.get_at((0, 0)))[:3] == BLUE
    assert tuple(target.get_at((89, 119)))[:3] == BLUE
    assert tuple(target.get_at((95, 10)))[:3] == BLACK


def test_draw_shows_faded_silhouette_when_dragging():
    card = make_card(x=0, y=0)
    card.dragging = True
    target = pygame.Surface((200, 200))
    target.fill(BLACK)
    card.draw(target)
    red, green, blue = tuple(target.get_at((0, 0)))[:3]
    assert green == 0 and blue == 0
    assert 0 < red < 255
    assert tuple(target.get_at((60, 10)))[:3] == BLACK