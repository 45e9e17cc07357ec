import pygame
import pytest

from turnthem.projectile import Projectile

RED = (255, 0, 0)
BLACK = (0, 0, 0)


def sprite():
    surf = pygame.Surface((9, 19))
    surf.fill(RED)
    return surf


def test_moves_up_at_minus_ninety():
    shell = Projectile(sprite(), (100, 500), (9, 19), 800, -90)
    shell.update(0.5)
    assert shell.position.x == pytest.approx(100, abs=1e-6)
    assert shell.position.y == pytest.approx(500 - 800 * 0.5)


def test_moves_right_at_zero():
    shell = Projectile(sprite(), (10, 20), (9, 19), 300, 0)
    shell.update(0.25)
    assert shell.position.x == pytest.approx(10 + 300 * 0.25)
    assert shell.position.y == pytest.approx(20)


def test_zero_dt_keeps_position():
    shell = Projectile(sprite(), (10, 20), (9, 19), 300, 45)
    shell.update(0.0)
    assert tuple(shell.position) == (10, 20)


@pytest.mark.parametrize(
    "pos, expected",
    [
        ((-50, 100), False),
        ((-51, 100), True),
        ((570, 100), False),
        ((571, 100), True),
        ((100, -50), False),
        ((100, -51), True),
        ((100, 850), False),
        ((100, 851), True),
        ((260, 400), False),
    ],
)
def test_out_of_bounds_margin(pos, expected):
    shell = Projectile(sprite(), pos, (9, 19), 0, 0)
    assert shell.is_out_of_bounds(520, 800) is expected


def test_leaves_screen_eventually():
    shell = Projectile(sprite(), (260, 700), (9, 19), 800, -90)
    steps = 0
    while not shell.is_out_of_bounds(520, 800):
        shell.update(1 / 60)
        steps += 1
        assert steps < 1000
    assert shell.position.y < -50


def test_draw_puts_sprite_near_position():
    shell = Projectile(sprite(), (100, 100), (9, 19), 800, -90)
    target = pygame.Surface((200, 200))
    target.fill(BLACK)
    shell.draw(target)
    assert tuple(target.get_at((100, 100)))[:3] == RED
    assert tuple(target.get_at((10, 10)))[:3] == BLACK