import pytest

from platfx.arkanoid import BLOCKS_H, BLOCKS_W, SCR_H, SCR_W, Arkanoid


def test_starts_with_full_wall():
    game = Arkanoid()
    assert game.blocks_left() == BLOCKS_W * BLOCKS_H
    assert game.stick


def test_ball_follows_platform_while_stuck():
    game = Arkanoid()
    game.update(0.1, right=True)
    assert game.platform_x > 10.0
    assert game.ball_x == game.platform_x
    assert game.ball_y == SCR_H - 0.5
    assert game.stick


def test_launch_releases_ball():
    game = Arkanoid()
    game.update(0.0, launch=True)
    assert not game.stick
    x, y = game.ball_x, game.ball_y
    game.update(0.1)
    assert game.ball_x == pytest.approx(x + game.dx * 0.1)
    assert game.ball_y < y


def test_platform_stays_on_screen():
    game = Arkanoid()
    for _ in range(200):
        game.update(0.1, right=True)
    assert game.platform_x <= SCR_W - game.platform_width / 2.0 + 0.3
    for _ in range(400):
        game.update(0.1, left=True)
    assert game.platform_x >= game.platform_width / 2.0 - 0.3


def test_ball_lost_below_screen_sticks_again():
    game = Arkanoid()
    game.stick = False
    game.platform_x = 3.0
    game.ball_x = 15.0
    game.ball_y = SCR_H - 0.01
    game.dy = 3.5
    game.update(0.1)
    assert game.stick
    assert game.ball_y == 10.0
    assert game.dy < 0


def test_block_hit_removes_block_and_bounces():
    game = Arkanoid()
    game.stick = False
    rect = game.block_rect(3, 4)
    game.ball_x = rect.x + rect.w / 2.0
    game.ball_y = rect.y + rect.h / 2.0
    dy = game.dy
    game.update(0.0)
    assert not game.blocks[3][4]
    assert game.dy == -dy
    assert game.blocks_left() == BLOCKS_W * BLOCKS_H - 1


def test_wall_bounce_flips_dx():
    game = Arkanoid()
    game.stick = False
    game.ball_x = SCR_W + 0.01
    game.ball_y = 12.0
    dx = game.dx
    game.update(0.0)
    assert game.dx == -dx


def test_block_rect_inside_screen_and_bounds():
    game = Arkanoid()
    rect = game.block_rect(BLOCKS_H - 1, BLOCKS_W - 1)
    assert rect.x + rect.w <= SCR_W
    assert rect.y + rect.h <= 7.0
    with pytest.raises(IndexError):
        game.block_rect(BLOCKS_H, 0)